"""Result sink contract.

A sink is the text output collaborator of a dispatch: it receives either the
computed result or the classified error of one invocation.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.errors import ProcessingError
from core.domain.models import OperationResult


@runtime_checkable
class ResultSink(Protocol):
    """Minimal contract for presenting one invocation's outcome."""

    def emit(self, result: OperationResult) -> None:
        """Present a successful result."""

        ...

    def fail(self, error: ProcessingError) -> None:
        """Present a classified error."""

        ...
