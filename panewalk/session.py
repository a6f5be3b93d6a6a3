"""Session sinks that receive the final working directory on exit.

A wrapping shell function either captures stdout (``cd "$(panewalk)"``) or
reads the file written by ``FileSink``.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Protocol, TextIO

from platformdirs import user_runtime_dir

APP_NAME = "panewalk"
LAST_DIR_FILENAME = "lastdir"

logger = logging.getLogger(__name__)


def default_last_dir_path() -> Path:
    """Return the well-known file a shell wrapper reads after exit."""
    return Path(user_runtime_dir(APP_NAME, appauthor=False)) / LAST_DIR_FILENAME


class SessionSink(Protocol):
    def report(self, directory: Path) -> None: ...


class StdoutSink:
    """Print the final directory on its own line."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def report(self, directory: Path) -> None:
        if self._stream is not None:
            self._stream.write(f"{directory}\n")
            self._stream.flush()
            return
        # Raw bytes so undecodable names reach the shell unchanged.
        sys.stdout.flush()
        sys.stdout.buffer.write(os.fsencode(directory) + b"\n")
        sys.stdout.buffer.flush()


class FileSink:
    """Write the final directory, without a trailing newline, to ``path``."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def report(self, directory: Path) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(str(directory), encoding="utf-8", errors="surrogateescape")
        logger.info("wrote final directory to %s", self.path)


__all__ = [
    "APP_NAME",
    "LAST_DIR_FILENAME",
    "default_last_dir_path",
    "SessionSink",
    "StdoutSink",
    "FileSink",
]
