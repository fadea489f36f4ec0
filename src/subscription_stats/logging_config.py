"""Utilities to configure consistent logging across the reports."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO


def configure_logging(
    log_path: Path | None = None,
    level: int = logging.INFO,
    stream: TextIO | None = None,
) -> None:
    """Configure root logging handlers and formatting.

    Report output is written to stdout, so log records go to stderr unless
    another stream is given.

    Args:
        log_path: Optional path to a file where logs will be written.
        level: Logging level (defaults to INFO).
        stream: Stream for the console handler (defaults to stderr).
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=handlers,
    )
