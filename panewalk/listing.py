"""Directory listing and entry classification.

``list_directory`` turns one directory into an immutable, byte-wise sorted
``Listing``. Access-control failures become the ``DENIED`` listing, paths
that are not directories become ``EMPTY``, anything else is fatal.
"""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .errors import DirectoryReadError

logger = logging.getLogger(__name__)


class EntryKind(enum.Enum):
    """Visual category of one directory child."""

    DIRECTORY = "directory"
    SYMLINK = "symlink"
    REGULAR = "regular"


@dataclass(frozen=True)
class Entry:
    """One directory child as observed at listing time."""

    name: str
    kind: EntryKind
    path: Path


@dataclass(frozen=True)
class Listing:
    """Ordered entries of one directory, or the denied marker."""

    entries: tuple[Entry, ...] = ()
    denied: bool = False

    def __len__(self) -> int:
        return len(self.entries)

    def index_of(self, name: str) -> int | None:
        """Return the position of the first entry called ``name``."""
        for idx, entry in enumerate(self.entries):
            if entry.name == name:
                return idx
        return None


EMPTY = Listing()
DENIED = Listing(denied=True)


def classify_entry(dir_entry: os.DirEntry) -> EntryKind:
    """Classify a scandir entry, checking symlink-ness before directory-ness.

    A symlink pointing at a directory stays a symlink. Probe failures fall back
    to ``REGULAR`` rather than aborting the listing.
    """
    try:
        if dir_entry.is_symlink():
            return EntryKind.SYMLINK
        if dir_entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
    except OSError:
        pass
    return EntryKind.REGULAR


def _is_representable(name: str) -> bool:
    """Return whether ``name`` survives a round trip to UTF-8 text."""
    if not name:
        return False
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _sort_key(entry: Entry) -> bytes:
    return os.fsencode(entry.name)


def list_directory(path: Path | str) -> Listing:
    """Read ``path`` and return its children sorted by byte-wise name.

    Returns ``EMPTY`` when ``path`` does not resolve to a directory and
    ``DENIED`` when the directory cannot be enumerated for lack of permission.
    Raises ``DirectoryReadError`` for any other read failure.
    """
    directory = Path(os.path.abspath(path))
    if not directory.is_dir():
        return EMPTY

    entries: list[Entry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                name = child.name
                if not _is_representable(name):
                    logger.debug("skipping non-representable name in %s", directory)
                    continue
                entries.append(Entry(name=name, kind=classify_entry(child), path=directory / name))
    except PermissionError:
        logger.debug("permission denied listing %s", directory)
        return DENIED
    except (FileNotFoundError, NotADirectoryError):
        # Removed or replaced between the type check and the scan.
        return EMPTY
    except OSError as exc:
        raise DirectoryReadError(directory, exc) from exc

    entries.sort(key=_sort_key)
    return Listing(entries=tuple(entries))


def parent_directory(path: Path) -> Path | None:
    """Return the parent of ``path``, or ``None`` at the filesystem root."""
    parent = path.parent
    if parent == path:
        return None
    return parent


__all__ = [
    "EntryKind",
    "Entry",
    "Listing",
    "EMPTY",
    "DENIED",
    "classify_entry",
    "list_directory",
    "parent_directory",
]
