"""Runtime composition layer for panewalk.

Builds the navigator, navigation state and collaborators from ``AppOptions``,
runs the loop inside the terminal's raw mode, then reports the final
directory to the session sink.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from ..classifier import CommandFileClassifier, MetadataCache
from ..navigation import LogicalNavigator, NavigationState, Navigator, ProcessNavigator
from ..session import FileSink, SessionSink, StdoutSink
from ..terminal import TerminalController
from ..ui_theme import resolve_theme
from .loop import run_main_loop

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppOptions:
    """Resolved command-line configuration."""

    start_directory: Path
    choosedir: Path | None = None
    logical: bool = False
    no_color: bool = False
    theme: str | None = None
    show_metadata: bool = True


def build_navigator(options: AppOptions) -> Navigator:
    if options.logical:
        return LogicalNavigator(options.start_directory)
    return ProcessNavigator(options.start_directory)


def build_sink(options: AppOptions) -> SessionSink:
    if options.choosedir is not None:
        return FileSink(options.choosedir)
    return StdoutSink()


def run_browser(
    options: AppOptions,
    *,
    stdin_fd: int | None = None,
    output_fd: int | None = None,
) -> Path:
    """Run one interactive session and return the final directory.

    The UI is drawn on stderr's descriptor by default so stdout stays free
    for ``StdoutSink``. Nothing is reported when the session fails.
    """
    if stdin_fd is None:
        stdin_fd = sys.stdin.fileno()
    if output_fd is None:
        output_fd = sys.stderr.fileno()

    state = NavigationState(build_navigator(options))
    logger.info("starting in %s", state.current_directory)
    theme = resolve_theme(options.theme, no_color=options.no_color)
    metadata = MetadataCache(CommandFileClassifier()) if options.show_metadata else None

    terminal = TerminalController(stdin_fd, output_fd)
    with terminal.raw_mode():
        final_directory = run_main_loop(state, terminal, stdin_fd, theme, metadata)

    logger.info("exiting in %s", final_directory)
    build_sink(options).report(final_directory)
    return final_directory


__all__ = [
    "AppOptions",
    "build_navigator",
    "build_sink",
    "run_browser",
]
