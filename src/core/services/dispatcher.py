"""File pair dispatch.

Linear validate-then-compute flow: arity, parse both tokens, select the
operation, guard the divisor, compute. Every failure raises a
`ProcessingError` subclass; nothing here prints or exits, so the flow can be
reused by the CLI, tests or any other entry point.
"""

from __future__ import annotations

import logging
from typing import Sequence

from core.domain.errors import ArityError, DivisionByZeroError, UnsupportedCombinationError
from core.domain.models import OperationKind, OperationResult
from core.services.filename_parser import parse_filename
from core.services.operation_selector import compute, select_operation

logger = logging.getLogger(__name__)

EXPECTED_ARGUMENTS = 2


def dispatch(tokens: Sequence[str]) -> OperationResult:
    """Process exactly two filename tokens and return the computed result."""

    if len(tokens) != EXPECTED_ARGUMENTS:
        raise ArityError(len(tokens))

    first = parse_filename(tokens[0], position=1)
    second = parse_filename(tokens[1], position=2)
    logger.debug(
        "Parsed %r -> (%d, %r) and %r -> (%d, %r)",
        first.raw_name,
        first.numeric_id,
        first.extension,
        second.raw_name,
        second.numeric_id,
        second.extension,
    )

    kind = select_operation(first.extension, second.extension)
    if kind is None:
        raise UnsupportedCombinationError(first.extension, second.extension)
    logger.debug("Selected operation: %s", kind.label())

    if kind is OperationKind.REMAINDER and second.numeric_id == 0:
        raise DivisionByZeroError(first.numeric_id)

    value = compute(kind, first.numeric_id, second.numeric_id)
    logger.debug("%s result: %r", kind.label(), value)

    return OperationResult(kind=kind, value=value, first=first, second=second)


def run(arg1: str, arg2: str) -> OperationResult:
    """Two-argument shorthand for `dispatch`."""

    return dispatch((arg1, arg2))
