"""File-type descriptions for the metadata row.

Descriptions come from ``file --brief`` when the command is available and
from a Pygments lexer lookup otherwise. Classification never fails loudly:
an unknown file simply gets a blank metadata row.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

from .listing import Entry, EntryKind

logger = logging.getLogger(__name__)

FILE_COMMAND: tuple[str, ...] = ("file", "--brief")
FILE_COMMAND_TIMEOUT_SECONDS = 0.5
DIRECTORY_DESCRIPTION = "directory"


class FileClassifier(Protocol):
    def describe(self, path: Path) -> str: ...


def describe_with_lexer(path: Path) -> str:
    """Describe ``path`` by the Pygments lexer its filename maps to."""
    try:
        lexer = get_lexer_for_filename(path.name)
    except ClassNotFound:
        return ""
    return f"{lexer.name} source"


class CommandFileClassifier:
    """Classifier that shells out to ``file(1)`` with a lexer fallback."""

    def __init__(
        self,
        command: tuple[str, ...] = FILE_COMMAND,
        timeout_seconds: float = FILE_COMMAND_TIMEOUT_SECONDS,
    ) -> None:
        self.command = command
        self.timeout_seconds = timeout_seconds
        self._command_missing = False

    def describe(self, path: Path) -> str:
        if not self._command_missing:
            description = self._run_command(path)
            if description:
                return description
        return describe_with_lexer(path)

    def _run_command(self, path: Path) -> str:
        try:
            proc = subprocess.run(
                [*self.command, "--", str(path)],
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
                timeout=self.timeout_seconds,
            )
        except FileNotFoundError:
            logger.info("%s not found; using lexer-based descriptions", self.command[0])
            self._command_missing = True
            return ""
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug("file classifier failed for %s: %s", path, exc)
            return ""
        if proc.returncode != 0:
            return ""
        lines = proc.stdout.strip().splitlines()
        return lines[0].strip() if lines else ""


class MetadataCache:
    """Memoize descriptions by absolute path until the directory changes."""

    def __init__(self, classifier: FileClassifier) -> None:
        self.classifier = classifier
        self._descriptions: dict[Path, str] = {}

    def describe(self, entry: Entry | None) -> str:
        if entry is None:
            return ""
        if entry.kind is EntryKind.DIRECTORY:
            return DIRECTORY_DESCRIPTION
        cached = self._descriptions.get(entry.path)
        if cached is not None:
            return cached
        description = self.classifier.describe(entry.path)
        self._descriptions[entry.path] = description
        return description

    def clear(self) -> None:
        self._descriptions.clear()


__all__ = [
    "FILE_COMMAND",
    "DIRECTORY_DESCRIPTION",
    "FileClassifier",
    "describe_with_lexer",
    "CommandFileClassifier",
    "MetadataCache",
]
