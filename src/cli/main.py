"""Command-line interface.

`filepair FILE1 FILE2` parses both `<number>.<extension>` tokens, picks the
operation for their extension pair and prints the result. Classified errors
are reported through the active sink and end the process with exit code 1.
"""

from __future__ import annotations

import logging

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from adapters.console_sink import ConsoleSink
from adapters.json_exporter import JsonSink
from core.config import AppSettings, OutputFormat
from core.domain.errors import ProcessingError
from core.interfaces.sink import ResultSink
from core.logging_config import setup_logging
from core.services.dispatcher import dispatch

EXIT_PROCESSING_ERROR = 1
EXIT_CONFIG_ERROR = 2

app = typer.Typer(
    name="filepair",
    help="Classify a pair of <number>.<extension> filenames and compute their operation.",
    add_completion=False,
)

_err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def build_sink(settings: AppSettings, *, output_format: OutputFormat, quiet: bool) -> ResultSink:
    if output_format is OutputFormat.JSON:
        return JsonSink()
    return ConsoleSink(echo_inputs=settings.echo_inputs and not quiet)


@app.command()
def process(
    files: list[str] | None = typer.Argument(
        None,
        metavar="FILE1 FILE2",
        help="Exactly two filenames such as 10.txt 3.png.",
        show_default=False,
    ),
    output_format: OutputFormat | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format (defaults to FILEPAIR_OUTPUT_FORMAT, then text).",
        show_default=False,
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only print the Result line.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log each processing step to stderr.",
    ),
) -> None:
    """Process two files and print the result of their operation."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(Text.assemble(("Invalid configuration: ", "red"), str(exc)), soft_wrap=True)
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from exc

    setup_logging(logging.DEBUG if verbose else settings.log_level)

    sink = build_sink(settings, output_format=output_format or settings.output_format, quiet=quiet)

    tokens = files or []
    try:
        result = dispatch(tokens)
    except ProcessingError as exc:
        logger.debug("%s: %s", type(exc).__name__, exc.details)
        sink.fail(exc)
        raise typer.Exit(code=EXIT_PROCESSING_ERROR) from exc

    sink.emit(result)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
