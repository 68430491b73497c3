"""Tests for the `filepair` command line."""

import json

import pytest
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


def test_mean_text_output() -> None:
    result = runner.invoke(app, ["10.txt", "20.txt"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "Processing files: 10.txt and 20.txt",
        "Numbers extracted: 10 and 20",
        "Extensions: txt and txt",
        "Result: 15",
    ]


def test_quiet_prints_only_result() -> None:
    result = runner.invoke(app, ["--quiet", "1.txt", "2.txt"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "Result: 1.5"


def test_sum_and_remainder() -> None:
    assert runner.invoke(app, ["-q", "10.png", "20.png"]).stdout.strip() == "Result: 30"
    assert runner.invoke(app, ["-q", "10.txt", "3.png"]).stdout.strip() == "Result: 1"


def test_negative_number_after_double_dash() -> None:
    result = runner.invoke(app, ["-q", "--", "-7.txt", "3.png"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "Result: -1"


@pytest.mark.parametrize(
    ("args", "message"),
    [
        ([], "Exactly two arguments required (got 0)"),
        (["1.txt"], "Exactly two arguments required (got 1)"),
        (["1.txt", "2.txt", "3.txt"], "Exactly two arguments required (got 3)"),
        (["12", "1.txt"], "Invalid filename format"),
        (["12x.txt", "1.txt"], "Invalid number in filename"),
        (["1.png", "1.txt"], "Unsupported file extensions"),
        (["10.txt", "0.png"], "Division by zero"),
    ],
)
def test_errors_exit_with_one(args: list[str], message: str) -> None:
    result = runner.invoke(app, args)
    assert result.exit_code == 1
    assert "Error: " in result.stderr
    assert message in result.stderr
    assert result.stdout == ""


def test_json_result() -> None:
    result = runner.invoke(app, ["--format", "json", "10.png", "20.png"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["kind"] == "sum"
    assert payload["value"] == 30
    assert payload["first"] == {"raw_name": "10.png", "numeric_id": 10, "extension": "png"}


def test_json_error() -> None:
    result = runner.invoke(app, ["-f", "json", "1.png", "1.txt"])
    assert result.exit_code == 1
    payload = json.loads(result.stderr)
    assert payload["error"] == "UnsupportedCombinationError"
    assert payload["details"] == {"first_extension": "png", "second_extension": "txt"}


def test_output_format_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FILEPAIR_OUTPUT_FORMAT", "json")
    result = runner.invoke(app, ["10.txt", "20.txt"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["value"] == 15.0


def test_flag_overrides_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FILEPAIR_OUTPUT_FORMAT", "json")
    result = runner.invoke(app, ["--format", "text", "-q", "10.txt", "20.txt"])
    assert result.stdout.strip() == "Result: 15"


def test_echo_inputs_disabled_by_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FILEPAIR_ECHO_INPUTS", "false")
    result = runner.invoke(app, ["10.txt", "20.txt"])
    assert result.stdout.splitlines() == ["Result: 15"]


def test_invalid_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FILEPAIR_LOG_LEVEL", "LOUD")
    result = runner.invoke(app, ["10.txt", "20.txt"])
    assert result.exit_code == 2
    assert "Invalid configuration" in result.stderr


def test_verbose_logs_to_stderr_only() -> None:
    result = runner.invoke(app, ["--verbose", "-q", "10.txt", "3.png"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "Result: 1"
    assert "Selected operation: Remainder" in result.stderr


@pytest.mark.parametrize(
    "args",
    [
        ["1" + "0" * 400 + ".txt", "1.txt"],
        ["1" * 5000 + ".png", "1.png"],
        ["10.txt", "2147483648.png"],
    ],
)
def test_oversized_id_is_reported_as_error(args: list[str]) -> None:
    result = runner.invoke(app, args)
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Error: Invalid number in filename" in result.stderr
    assert result.stdout == ""
