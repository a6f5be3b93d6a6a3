"""Logging configuration for panewalk.

The TUI owns the terminal, so log records only ever go to a file. Without a
log file every record is dropped by a ``NullHandler``.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

LOGGER_NAME = "panewalk"
LOG_FORMAT = "%(asctime)s - %(levelname)-8s - %(name)s - %(message)s"
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3

logger = logging.getLogger(LOGGER_NAME)


def parse_level(name: str | None) -> int:
    """Map a level name such as ``"debug"`` to its numeric value (default INFO)."""
    if not name:
        return logging.INFO
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(log_file: Path | None = None, level: str | None = None) -> logging.Handler:
    """Install the single handler on the ``panewalk`` logger.

    Existing handlers are removed first so repeated calls (tests, re-entry)
    do not duplicate records. Returns the installed handler.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler: logging.Handler
    if log_file is None:
        handler = logging.NullHandler()
    else:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(parse_level(level))
    logger.propagate = False
    return handler


__all__ = [
    "LOGGER_NAME",
    "LOG_FORMAT",
    "parse_level",
    "configure_logging",
]
