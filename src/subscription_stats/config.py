"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings`, which
combines the input path given on the command line with logging options read
from the environment (a `.env` file is loaded by the CLI entry point).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
import os

LOG_LEVEL_ENV = "SUBSCRIPTION_STATS_LOG_LEVEL"
LOG_FILE_ENV = "SUBSCRIPTION_STATS_LOG_FILE"


@dataclass(frozen=True)
class Settings:
    """Container for a single reporting run.

    Attributes:
        input_path: JSON file holding the `items` collection.
        log_level: Numeric logging level.
        log_path: Optional file that receives a copy of the logs.
    """
    input_path: Path
    log_level: int
    log_path: Path | None


def _parse_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise RuntimeError(
            f"Unknown log level {name!r}. "
            "Use one of DEBUG, INFO, WARNING, ERROR, CRITICAL."
        )
    return level


def get_settings(input_path: Path, log_level: str | None = None) -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Args:
        input_path: Path to the input data file.
        log_level: Optional level name that overrides the environment.

    Raises:
        RuntimeError: if the configured log level is not a known level name.
    """
    level_name = log_level or os.getenv(LOG_LEVEL_ENV, "INFO")
    log_file = os.getenv(LOG_FILE_ENV, "").strip()

    return Settings(
        input_path=input_path,
        log_level=_parse_level(level_name),
        log_path=Path(log_file) if log_file else None,
    )
