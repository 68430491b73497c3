"""Domain models (Pydantic v2).

These models describe *what* a processed file pair is, not how it is read
from the command line or printed back.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class OperationKind(str, Enum):
    """Arithmetic operations a file pair can resolve to."""

    MEAN = "mean"
    SUM = "sum"
    REMAINDER = "remainder"

    def label(self) -> str:
        """Human readable label for logging."""

        return self.value.capitalize()


class FileArgument(BaseModel):
    """One parsed `<number>.<extension>` token.

    Invariants:
    - `raw_name` is the token exactly as received (no trimming).
    - `numeric_id` is the integer before the first dot.
    - `extension` is everything after the first dot, further dots included.
    """

    model_config = ConfigDict(frozen=True)

    raw_name: str = Field(
        ...,
        description="Token exactly as received from the caller.",
    )
    numeric_id: int = Field(
        ...,
        description="Base-10 integer encoded before the first dot.",
    )
    extension: str = Field(
        ...,
        description="Substring after the first dot.",
    )


class OperationResult(BaseModel):
    """Outcome of a single dispatch.

    `value` is a float for `mean` and an int for `sum`/`remainder`.
    """

    model_config = ConfigDict(frozen=True)

    kind: OperationKind = Field(
        ...,
        description="Operation selected by the extension pair.",
    )
    value: int | float = Field(
        ...,
        description="Computed value.",
    )
    first: FileArgument = Field(
        ...,
        description="First parsed argument.",
    )
    second: FileArgument = Field(
        ...,
        description="Second parsed argument.",
    )
