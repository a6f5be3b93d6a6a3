"""Terminal surface for the TUI session.

Owns raw-mode lifecycle and alternate-screen switching, and buffers frame
output so each render cycle reaches the terminal as a single write burst.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l\x1b[2J\x1b[H"
LEAVE_TUI_SEQUENCE = b"\x1b[?25h\x1b[2J\x1b[?1049l"
FALLBACK_SIZE = (80, 24)


class TerminalController:
    """Manage terminal mode transitions and buffered frame output."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind input/output file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._buffer: list[str] = []

    def enable_tui_mode(self) -> None:
        """Enter raw mode, switch to the alternate screen and hide the cursor."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        self._write_bytes(ENTER_TUI_SEQUENCE)

    def disable_tui_mode(self) -> None:
        """Show the cursor, leave the alternate screen and restore tty state."""
        self._buffer.clear()
        try:
            self._write_bytes(LEAVE_TUI_SEQUENCE)
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def size(self) -> tuple[int, int]:
        """Return ``(columns, lines)`` of the output terminal."""
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError:
            return FALLBACK_SIZE
        if size.columns <= 0 or size.lines <= 0:
            return FALLBACK_SIZE
        return size.columns, size.lines

    def write(self, text: str) -> None:
        """Queue ``text`` for the next ``flush``."""
        self._buffer.append(text)

    def flush(self) -> None:
        """Emit all queued output."""
        if not self._buffer:
            return
        data = "".join(self._buffer).encode("utf-8", errors="replace")
        self._buffer.clear()
        self._write_bytes(data)

    def _write_bytes(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = os.write(self.stdout_fd, view)
            view = view[written:]

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield self
        finally:
            self.disable_tui_mode()


__all__ = [
    "ENTER_TUI_SEQUENCE",
    "LEAVE_TUI_SEQUENCE",
    "TerminalController",
]
