"""Navigation state machine for the three-pane browser.

``NavigationState`` owns the current directory and selection index and
recomputes the parent/current/child listings after every action. Directory
changes go through a ``Navigator`` so the state machine can either drive the
real process working directory or track a purely logical path.
"""

from __future__ import annotations

import enum
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from .errors import DirectoryReadError
from .listing import EMPTY, Entry, Listing, list_directory, parent_directory

logger = logging.getLogger(__name__)

Lister = Callable[[Path], Listing]

_CHDIR_FAILURES = (PermissionError, FileNotFoundError, NotADirectoryError)


class Action(enum.Enum):
    """Keystroke-level navigation actions."""

    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    DESCEND = "descend"
    ASCEND = "ascend"
    QUIT = "quit"


class Navigator(Protocol):
    """Source of truth for the working directory."""

    def cwd(self) -> Path:
        """Return the absolute working directory."""
        ...

    def change_directory(self, path: Path) -> bool:
        """Switch to ``path``; return ``False`` when it cannot be entered."""
        ...


class ProcessNavigator:
    """Navigator backed by the process working directory (``os.chdir``)."""

    def __init__(self, start: Path | None = None) -> None:
        if start is not None:
            os.chdir(start)

    def cwd(self) -> Path:
        return Path(os.getcwd())

    def change_directory(self, path: Path) -> bool:
        try:
            os.chdir(path)
        except _CHDIR_FAILURES as exc:
            logger.info("cannot enter %s: %s", path, exc)
            return False
        return True


class LogicalNavigator:
    """Navigator that tracks a resolved path without touching process state."""

    def __init__(self, start: Path) -> None:
        self._path = Path(os.path.realpath(start))

    def cwd(self) -> Path:
        return self._path

    def change_directory(self, path: Path) -> bool:
        target = Path(os.path.realpath(path))
        if not target.is_dir():
            logger.info("cannot enter %s: not a directory", path)
            return False
        if not os.access(target, os.X_OK):
            logger.info("cannot enter %s: search permission denied", path)
            return False
        self._path = target
        return True


def clamp_selection(index: int, count: int) -> int:
    """Clamp ``index`` into ``[0, count - 1]``; empty listings pin it to 0."""
    if count <= 0:
        return 0
    return max(0, min(index, count - 1))


class NavigationState:
    """Current position in the filesystem plus derived pane listings."""

    def __init__(self, navigator: Navigator, lister: Lister = list_directory) -> None:
        self.navigator = navigator
        self._list = lister
        self.current_directory = navigator.cwd()
        self.selection_index = 0
        self.parent: Listing = EMPTY
        self.current: Listing = EMPTY
        self.child: Listing = EMPTY
        self.refresh()

    @property
    def selected_entry(self) -> Entry | None:
        """Return the highlighted entry, or ``None`` when nothing is selectable."""
        entries = self.current.entries
        if 0 <= self.selection_index < len(entries):
            return entries[self.selection_index]
        return None

    def apply(self, action: Action | None) -> bool:
        """Apply one action and recompute listings.

        Returns ``False`` for ``QUIT`` (without relisting), ``True`` otherwise.
        ``None`` stands for an unrecognized key and only relists.
        """
        if action is Action.QUIT:
            return False

        restore_name: str | None = None
        if action is Action.MOVE_DOWN:
            self.selection_index += 1
        elif action is Action.MOVE_UP:
            self.selection_index -= 1
        elif action is Action.DESCEND:
            if self._descend():
                self.selection_index = 0
        elif action is Action.ASCEND:
            restore_name = self._ascend()

        self.refresh(restore_name=restore_name)
        return True

    def refresh(self, restore_name: str | None = None) -> None:
        """Re-read all three listings for the navigator's directory.

        When ``restore_name`` is given the selection moves to the first entry
        with that name, or to 0 if there is none. Failure to read the current
        directory propagates; parent/child read failures yield empty panes.
        """
        self.current_directory = self.navigator.cwd()
        self.current = self._list(self.current_directory)

        if restore_name is not None:
            found = self.current.index_of(restore_name)
            self.selection_index = found if found is not None else 0
        self.selection_index = clamp_selection(self.selection_index, len(self.current))

        parent = parent_directory(self.current_directory)
        self.parent = EMPTY if parent is None else self._list_side_pane(parent)

        selected = self.selected_entry
        self.child = EMPTY if selected is None else self._list_side_pane(selected.path)

    def _list_side_pane(self, path: Path) -> Listing:
        try:
            return self._list(path)
        except DirectoryReadError as exc:
            logger.warning("%s", exc)
            return EMPTY

    def _descend(self) -> bool:
        selected = self.selected_entry
        if selected is None or not selected.path.is_dir():
            return False
        if self.child.denied:
            return False
        if not self.navigator.change_directory(selected.path):
            return False
        logger.debug("descended into %s", selected.path)
        return True

    def _ascend(self) -> str | None:
        """Move to the parent directory; return the name of the directory left."""
        parent = parent_directory(self.current_directory)
        if parent is None:
            return None
        left_name = self.current_directory.name
        if not self.navigator.change_directory(parent):
            return None
        logger.debug("ascended to %s", parent)
        return left_name


__all__ = [
    "Action",
    "Navigator",
    "ProcessNavigator",
    "LogicalNavigator",
    "NavigationState",
    "clamp_selection",
]
