"""Parsing of `<number>.<extension>` tokens."""

from __future__ import annotations

import re

from core.domain.errors import FormatError, NumericError
from core.domain.models import FileArgument

SEPARATOR = "."

# Optional sign, ASCII digits only. `int()` alone would also accept
# whitespace, underscores and non-ASCII digits.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Signed 32-bit range; anything outside is not a valid id.
ID_MIN = -(2**31)
ID_MAX = 2**31 - 1
_MAX_SIGNIFICANT_DIGITS = len(str(ID_MAX))


def parse_filename(name: str, *, position: int | None = None) -> FileArgument:
    """Split `name` at its first dot into a numeric id and an extension.

    `position` (1-based) is only used to label errors.

    Raises:
        FormatError: there is no `.` in `name`.
        NumericError: the prefix is not entirely a base-10 integer, or it
            falls outside `ID_MIN..ID_MAX`.
    """

    prefix, sep, extension = name.partition(SEPARATOR)
    if not sep:
        raise FormatError(name, position)

    if not _INTEGER_RE.fullmatch(prefix):
        raise NumericError(name, position)

    # Length check first so huge prefixes never reach `int()`.
    if len(prefix.lstrip("+-").lstrip("0")) > _MAX_SIGNIFICANT_DIGITS:
        raise NumericError(name, position)

    numeric_id = int(prefix)
    if not ID_MIN <= numeric_id <= ID_MAX:
        raise NumericError(name, position)

    return FileArgument(raw_name=name, numeric_id=numeric_id, extension=extension)
