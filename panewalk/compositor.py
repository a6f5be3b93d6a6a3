"""Pane composition: listings in, fixed-size styled rows out.

Every composed row is exactly as wide as its pane so a full repaint by
absolute cursor addressing never leaves stale characters behind. Nothing in
this module touches the terminal or the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass

from .listing import Listing
from .text import fit_to_width, sanitize_name
from .ui_theme import UITheme

DENIED_NOTICE = "permission denied"
DENIED_NOTICE_ROW = 0


@dataclass(frozen=True)
class PaneGeometry:
    """Zero-based screen rectangle of one pane."""

    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class PaneRow:
    """One composed row: ``text`` spans exactly the pane width."""

    text: str
    style: str


@dataclass(frozen=True)
class PaneFrame:
    geometry: PaneGeometry
    rows: tuple[PaneRow, ...]


@dataclass(frozen=True)
class ScreenLayout:
    """Geometry of the header rows and the three panes for one terminal size."""

    header: PaneGeometry
    metadata: PaneGeometry | None
    parent: PaneGeometry
    current: PaneGeometry
    child: PaneGeometry


def compute_layout(columns: int, lines: int, show_metadata: bool = True) -> ScreenLayout:
    """Split the screen into header row(s) and three side-by-side panes.

    Panes are ``columns // 3`` wide; the child pane absorbs the remainder so
    the full width is painted.
    """
    columns = max(0, columns)
    header = PaneGeometry(x=0, y=0, width=columns, height=1)
    metadata = PaneGeometry(x=0, y=1, width=columns, height=1) if show_metadata else None
    top = 2 if show_metadata else 1
    height = max(1, lines - top)
    third = columns // 3
    return ScreenLayout(
        header=header,
        metadata=metadata,
        parent=PaneGeometry(x=0, y=top, width=third, height=height),
        current=PaneGeometry(x=third, y=top, width=third, height=height),
        child=PaneGeometry(x=2 * third, y=top, width=columns - 2 * third, height=height),
    )


def scroll_start(previous_start: int, selection: int, count: int, height: int) -> int:
    """Return the first visible entry so ``selection`` stays on screen.

    The viewport only moves when the selection leaves it, and never scrolls
    past the last full page.
    """
    height = max(1, height)
    start = previous_start
    if selection < start:
        start = selection
    elif selection >= start + height:
        start = selection - height + 1
    return max(0, min(start, max(0, count - height)))


def _row(text: str, style: str, width: int) -> PaneRow:
    return PaneRow(text=fit_to_width(sanitize_name(text), width), style=style)


def compose_pane(
    listing: Listing,
    selection_index: int | None,
    geometry: PaneGeometry,
    theme: UITheme,
    start: int = 0,
) -> PaneFrame:
    """Compose one pane from a listing.

    ``selection_index`` is an index into ``listing`` (``None`` for panes
    without a cursor); ``start`` is the first entry shown on row 0.
    """
    width = geometry.width
    blank = _row("", theme.reset, width)
    rows: list[PaneRow] = []

    if listing.denied:
        for row in range(geometry.height):
            if row == DENIED_NOTICE_ROW:
                rows.append(_row(DENIED_NOTICE, theme.denied, width))
            else:
                rows.append(blank)
        return PaneFrame(geometry=geometry, rows=tuple(rows))

    entries = listing.entries
    for row in range(geometry.height):
        idx = start + row
        if idx >= len(entries):
            rows.append(blank)
            continue
        entry = entries[idx]
        if idx == selection_index:
            style = theme.selected
        else:
            style = theme.style_for_kind(entry.kind)
        rows.append(_row(entry.name, style, width))
    return PaneFrame(geometry=geometry, rows=tuple(rows))


def compose_header(text: str, geometry: PaneGeometry, style: str) -> PaneFrame:
    """Compose a single-line frame such as the path or metadata row."""
    rows = [_row(text, style, geometry.width)]
    for _ in range(1, geometry.height):
        rows.append(_row("", style, geometry.width))
    return PaneFrame(geometry=geometry, rows=tuple(rows))


def compose_screen(
    layout: ScreenLayout,
    theme: UITheme,
    *,
    path_text: str,
    metadata_text: str,
    parent: Listing,
    current: Listing,
    child: Listing,
    selection_index: int,
    current_start: int = 0,
) -> list[PaneFrame]:
    """Compose header row(s) plus the parent, current and child panes."""
    frames = [compose_header(path_text, layout.header, theme.header)]
    if layout.metadata is not None:
        frames.append(compose_header(metadata_text, layout.metadata, theme.metadata))
    frames.append(compose_pane(parent, None, layout.parent, theme))
    frames.append(compose_pane(current, selection_index, layout.current, theme, start=current_start))
    frames.append(compose_pane(child, None, layout.child, theme))
    return frames


__all__ = [
    "DENIED_NOTICE",
    "DENIED_NOTICE_ROW",
    "PaneGeometry",
    "PaneRow",
    "PaneFrame",
    "ScreenLayout",
    "compute_layout",
    "scroll_start",
    "compose_pane",
    "compose_header",
    "compose_screen",
]
