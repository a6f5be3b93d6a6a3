"""Exception types raised by panewalk.

Only failures the session cannot navigate past are modeled as exceptions;
access-denied directories are ordinary ``Listing`` values instead.
"""

from __future__ import annotations

from pathlib import Path


class PanewalkError(Exception):
    """Base class for panewalk failures."""


class DirectoryReadError(PanewalkError):
    """A directory could not be read for a reason other than access control."""

    def __init__(self, path: Path, reason: OSError) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read directory {path}: {reason.strerror or reason}")


__all__ = [
    "PanewalkError",
    "DirectoryReadError",
]
