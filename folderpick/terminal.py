"""Terminal control helpers for the picker session.

Owns the controlling-tty file descriptor, raw-mode lifecycle, and
alternate-screen switching. Frames go to the tty so that standard output
stays reserved for the chosen path.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

from .logger import get_logger

TTY_PATH = "/dev/tty"
DEFAULT_SIZE = (80, 24)

logger = get_logger(__name__)


def open_tty(path: str = TTY_PATH) -> int:
    """Open the controlling terminal for reading and writing."""
    return os.open(path, os.O_RDWR | os.O_NOCTTY)


class TerminalController:
    """Manage terminal mode transitions on one tty file descriptor pair."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind input/output file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Enter alternate screen and hide cursor.
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")
        logger.debug("Terminal switched to raw mode")

    def disable_tui_mode(self) -> None:
        """Restore normal terminal state and the main screen buffer."""
        # Show cursor and restore the main screen buffer.
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        logger.debug("Terminal restored")

    def size(self) -> tuple[int, int]:
        """Return ``(columns, lines)`` of the tty, falling back to 80x24."""
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError:
            return DEFAULT_SIZE
        columns = size.columns or DEFAULT_SIZE[0]
        lines = size.lines or DEFAULT_SIZE[1]
        return columns, lines

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()


__all__ = ["DEFAULT_SIZE", "TTY_PATH", "TerminalController", "open_tty"]
