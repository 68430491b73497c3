"""Error taxonomy for file pair processing.

Every error is fatal to the invocation that raised it. The core raises; only
the CLI boundary turns an error into an exit status.
"""

from __future__ import annotations

from typing import Any


class ProcessingError(Exception):
    """Base class for every classified processing error."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ArityError(ProcessingError):
    """Wrong number of input tokens."""

    def __init__(self, count: int) -> None:
        super().__init__(
            f"Exactly two arguments required (got {count})",
            {"count": count},
        )
        self.count = count


class _TokenError(ProcessingError):
    """An error tied to one specific input token."""

    def __init__(self, message: str, token: str, position: int | None = None) -> None:
        details: dict[str, Any] = {"token": token}
        if position is not None:
            details["position"] = position
        super().__init__(message, details)
        self.token = token
        self.position = position


class FormatError(_TokenError):
    """Filename has no `.` separator."""

    def __init__(self, token: str, position: int | None = None) -> None:
        super().__init__(f"Invalid filename format: {token!r}", token, position)


class NumericError(_TokenError):
    """Prefix before the separator is not a base-10 integer."""

    def __init__(self, token: str, position: int | None = None) -> None:
        super().__init__(f"Invalid number in filename: {token!r}", token, position)


class UnsupportedCombinationError(ProcessingError):
    """Extension pair is not listed in the operation table."""

    def __init__(self, first_extension: str, second_extension: str) -> None:
        super().__init__(
            f"Unsupported file extensions: {first_extension!r} and {second_extension!r}",
            {"first_extension": first_extension, "second_extension": second_extension},
        )
        self.first_extension = first_extension
        self.second_extension = second_extension


class DivisionByZeroError(ProcessingError):
    """Remainder requested with a zero divisor."""

    def __init__(self, dividend: int) -> None:
        super().__init__("Division by zero", {"dividend": dividend, "divisor": 0})
        self.dividend = dividend
