"""JSON output.

Machine-readable rendering of results and errors for scripts and pipelines.
"""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

from core.domain.errors import ProcessingError
from core.domain.models import OperationResult


def _dumps(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True)


def result_to_json(result: OperationResult) -> str:
    """Serialize an `OperationResult` to a stable JSON string."""

    return _dumps(result.model_dump(mode="json"))


def error_to_json(error: ProcessingError) -> str:
    """Serialize a classified error to a stable JSON string."""

    return _dumps(
        {
            "error": type(error).__name__,
            "message": error.message,
            "details": error.details,
        }
    )


class JsonSink:
    """One JSON object per invocation: results on stdout, errors on stderr."""

    def __init__(self, *, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out = out
        self._err = err

    def emit(self, result: OperationResult) -> None:
        out = self._out or sys.stdout
        out.write(result_to_json(result) + "\n")

    def fail(self, error: ProcessingError) -> None:
        err = self._err or sys.stderr
        err.write(error_to_json(error) + "\n")
