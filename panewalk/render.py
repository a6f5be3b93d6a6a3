"""Render driver: composed frames to ANSI output.

Every cycle repaints every row of every frame using absolute cursor
addressing, then flushes the terminal surface once.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from .compositor import PaneFrame

RESET = "\033[0m"


class TerminalSurface(Protocol):
    def write(self, text: str) -> None: ...

    def flush(self) -> None: ...


def cursor_to(row: int, col: int) -> str:
    """Return the CUP sequence for zero-based ``row``/``col``."""
    return f"\033[{row + 1};{col + 1}H"


def build_frame(frames: Iterable[PaneFrame]) -> str:
    """Serialize frames into one escape-sequence string.

    Each row gets its own cursor move, style and trailing reset, so no style
    can leak from one row or pane into the next.
    """
    out: list[str] = []
    for frame in frames:
        geometry = frame.geometry
        if geometry.width <= 0:
            continue
        for offset, row in enumerate(frame.rows):
            out.append(cursor_to(geometry.y + offset, geometry.x))
            out.append(row.style)
            out.append(row.text)
            out.append(RESET)
    return "".join(out)


def render_frames(terminal: TerminalSurface, frames: Iterable[PaneFrame]) -> None:
    """Paint a full screen through ``terminal`` and flush exactly once."""
    terminal.write(build_frame(frames))
    terminal.flush()


__all__ = [
    "RESET",
    "TerminalSurface",
    "cursor_to",
    "build_frame",
    "render_frames",
]
