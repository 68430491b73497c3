"""Application configuration.

Centralizes environment variables (pydantic-settings) so the CLI and the
sinks read configuration the same way. Settings only affect presentation and
logging; they never change how a file pair is classified or computed.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class OutputFormat(str, Enum):
    """Rendering of results and errors."""

    TEXT = "text"
    JSON = "json"


APP_DIR_NAME = "filepair"


def user_env_file() -> Path:
    """Location of the per-user `.env`; a project `.env` overrides it.

    `%APPDATA%\\filepair` on Windows, `~/Library/Application Support/filepair`
    on macOS, `$XDG_CONFIG_HOME/filepair` (default `~/.config`) elsewhere.
    """

    home = Path.home()
    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA") or home)
    elif sys.platform == "darwin":
        base = home / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME") or home / ".config")
    return base / APP_DIR_NAME / ".env"


class AppSettings(BaseSettings):
    """Central application settings (`FILEPAIR_*` environment variables)."""

    model_config = SettingsConfigDict(
        env_prefix="FILEPAIR_",
        extra="ignore",
        case_sensitive=False,
        # Later files override earlier ones: user config, then the working directory.
        env_file=(str(user_env_file()), ".env"),
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level for stderr diagnostics.",
    )
    output_format: OutputFormat = Field(
        default=OutputFormat.TEXT,
        description="How results and errors are rendered.",
    )
    echo_inputs: bool = Field(
        default=True,
        description="Print the processed files, numbers and extensions before the result (text mode).",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level
