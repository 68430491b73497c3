"""Extension pair -> operation rules.

The table is ordered and matched top-down; the first rule whose extensions
equal the pair (case-sensitive) wins. A pair with no rule is unsupported.

Only `("txt", "png")` maps to a remainder; `("png", "txt")` has no rule.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.domain.errors import DivisionByZeroError
from core.domain.models import OperationKind


@dataclass(frozen=True)
class OperationRule:
    """Guarded rule: `first`/`second` must match exactly."""

    first: str
    second: str
    kind: OperationKind

    def matches(self, ext1: str, ext2: str) -> bool:
        return ext1 == self.first and ext2 == self.second


OPERATION_RULES: tuple[OperationRule, ...] = (
    OperationRule("txt", "txt", OperationKind.MEAN),
    OperationRule("png", "png", OperationKind.SUM),
    OperationRule("txt", "png", OperationKind.REMAINDER),
)


def select_operation(
    ext1: str,
    ext2: str,
    rules: tuple[OperationRule, ...] = OPERATION_RULES,
) -> OperationKind | None:
    """Return the operation for the pair, or `None` when unsupported."""

    for rule in rules:
        if rule.matches(ext1, ext2):
            return rule.kind
    return None


def _truncated_remainder(dividend: int, divisor: int) -> int:
    # Sign follows the dividend (truncating division), unlike Python's `%`.
    remainder = abs(dividend) % abs(divisor)
    return -remainder if dividend < 0 else remainder


def compute(kind: OperationKind, n1: int, n2: int) -> int | float:
    """Evaluate `kind` on the two numeric ids.

    Raises:
        DivisionByZeroError: remainder with `n2 == 0`.
    """

    if kind is OperationKind.MEAN:
        return (n1 + n2) / 2
    if kind is OperationKind.SUM:
        return n1 + n2
    if kind is OperationKind.REMAINDER:
        if n2 == 0:
            raise DivisionByZeroError(n1)
        return _truncated_remainder(n1, n2)
    raise ValueError(f"Unknown operation: {kind!r}")
