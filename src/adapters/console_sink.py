"""Human-readable output (Rich).

Results go to stdout, errors to stderr. Tokens are printed verbatim: markup
and highlighting are disabled and lines never wrap.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from core.domain.errors import ProcessingError
from core.domain.models import OperationResult


def format_value(value: int | float) -> str:
    """Render a result value; floats use up to six significant digits."""

    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class ConsoleSink:
    """Plain text sink.

    With `echo_inputs` the processed files, numbers and extensions are
    printed before the `Result:` line.
    """

    def __init__(
        self,
        *,
        echo_inputs: bool = True,
        out: Console | None = None,
        err: Console | None = None,
    ) -> None:
        self.echo_inputs = echo_inputs
        self.out = out or Console(highlight=False)
        self.err = err or Console(stderr=True, highlight=False)

    def _line(self, text: str) -> None:
        self.out.print(text, markup=False, soft_wrap=True)

    def emit(self, result: OperationResult) -> None:
        first, second = result.first, result.second
        if self.echo_inputs:
            self._line(f"Processing files: {first.raw_name} and {second.raw_name}")
            self._line(f"Numbers extracted: {first.numeric_id} and {second.numeric_id}")
            self._line(f"Extensions: {first.extension} and {second.extension}")
        self._line(f"Result: {format_value(result.value)}")

    def fail(self, error: ProcessingError) -> None:
        message = Text.assemble(("Error: ", "bold red"), error.message)
        self.err.print(message, soft_wrap=True)
