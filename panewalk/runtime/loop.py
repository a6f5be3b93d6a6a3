"""Blocking input loop: one byte, one full transition and repaint.

Each cycle applies an action to the navigation state (which relists the
parent/current/child directories), recomposes all panes and repaints the
whole screen. There are no timers and no background work.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..classifier import MetadataCache
from ..compositor import compose_screen, compute_layout, scroll_start
from ..input import action_for_key, read_key
from ..navigation import NavigationState
from ..render import render_frames
from ..terminal import TerminalController
from ..ui_theme import UITheme

logger = logging.getLogger(__name__)


@dataclass
class ViewState:
    """Presentation-only state carried between cycles."""

    current_start: int = 0


def render_state(
    state: NavigationState,
    terminal: TerminalController,
    theme: UITheme,
    view: ViewState,
    metadata: MetadataCache | None = None,
) -> None:
    """Compose the three panes plus header rows and paint them."""
    columns, lines = terminal.size()
    layout = compute_layout(columns, lines, show_metadata=metadata is not None)
    view.current_start = scroll_start(
        view.current_start,
        state.selection_index,
        len(state.current),
        layout.current.height,
    )
    metadata_text = metadata.describe(state.selected_entry) if metadata is not None else ""
    frames = compose_screen(
        layout,
        theme,
        path_text=str(state.current_directory),
        metadata_text=metadata_text,
        parent=state.parent,
        current=state.current,
        child=state.child,
        selection_index=state.selection_index,
        current_start=view.current_start,
    )
    render_frames(terminal, frames)


def run_main_loop(
    state: NavigationState,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme,
    metadata: MetadataCache | None = None,
) -> Path:
    """Run until quit or end of input and return the final directory.

    The caller owns the terminal mode; errors propagate so the caller's
    ``raw_mode`` context can restore the terminal.
    """
    view = ViewState()
    render_state(state, terminal, theme, view, metadata)
    while True:
        key = read_key(stdin_fd)
        if not key:
            logger.info("input closed; ending session")
            break
        previous_directory = state.current_directory
        if not state.apply(action_for_key(key)):
            break
        if state.current_directory != previous_directory:
            logger.info("directory changed to %s", state.current_directory)
            view.current_start = 0
            if metadata is not None:
                metadata.clear()
        render_state(state, terminal, theme, view, metadata)
    return state.current_directory


__all__ = [
    "ViewState",
    "render_state",
    "run_main_loop",
]
