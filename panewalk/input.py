"""Low-level terminal input decoding.

Reads raw bytes from stdin one at a time and maps the handful of recognized
keys onto navigation actions. Everything else decodes to ``None``.
"""

from __future__ import annotations

import os

from .navigation import Action

KEY_ACTIONS: dict[bytes, Action] = {
    b"q": Action.QUIT,
    b"j": Action.MOVE_DOWN,
    b"k": Action.MOVE_UP,
    b"l": Action.DESCEND,
    b"h": Action.ASCEND,
}


def read_key(fd: int) -> bytes:
    """Block until one byte is available; return ``b""`` at end of input."""
    return os.read(fd, 1)


def action_for_key(key: bytes) -> Action | None:
    """Translate one input byte into an action, ignoring unknown bytes."""
    return KEY_ACTIONS.get(key)


__all__ = [
    "KEY_ACTIONS",
    "read_key",
    "action_for_key",
]
