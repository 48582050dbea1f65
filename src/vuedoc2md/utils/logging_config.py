"""Logging setup shared by the vuedoc2md modules and CLI."""

from __future__ import annotations

import logging
from typing import TextIO

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a vuedoc2md module."""
    return logging.getLogger(name)


def configure_logging(level: str | int = "WARNING", *, stream: TextIO | None = None) -> None:
    """Attach a single stream handler to the package logger.

    Args:
        level: Level name (e.g. "DEBUG") or numeric level.
        stream: Destination for log records. Defaults to stderr.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    package_logger = logging.getLogger("vuedoc2md")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
