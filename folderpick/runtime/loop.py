"""Main interactive event loop for the picker.

Alternates between rendering the current state and blocking on the next key.
Feature logic lives in ``PickerState`` and the key dispatcher.
"""

from __future__ import annotations

from ..input import handle_key, read_key
from ..logger import get_logger
from ..render import render_frame
from ..state import PickerState
from ..terminal import TerminalController
from ..ui_theme import UITheme

logger = get_logger(__name__)


def normalize_enter(key: str, skip_next_lf: bool) -> tuple[str | None, bool]:
    """Collapse CR, LF and CRLF into one ``ENTER`` token.

    Returns ``(key, skip_next_lf)``; ``key`` is ``None`` when the token is the
    LF half of a CRLF pair and must be dropped.
    """
    if skip_next_lf and key == "ENTER_LF":
        return None, False
    if key == "ENTER_CR":
        return "ENTER", True
    if key == "ENTER_LF":
        return "ENTER", False
    return key, False


def run_main_loop(state: PickerState, terminal: TerminalController, theme: UITheme) -> None:
    """Run the picker until ``state.running`` turns false.

    The running flag is checked before every render, so nothing is drawn or
    read after a quit or confirm. Errors from reading or writing the tty
    propagate after the terminal has been restored.
    """
    skip_next_lf = False
    with terminal.raw_mode():
        while state.running:
            columns, lines = terminal.size()
            render_frame(terminal.stdout_fd, state, columns, lines, theme)

            try:
                raw_key = read_key(terminal.stdin_fd)
            except KeyboardInterrupt:
                state.quit()
                continue

            key, skip_next_lf = normalize_enter(raw_key, skip_next_lf)
            if key is None:
                continue
            if not handle_key(state, key):
                logger.debug("Ignored key %r in %s mode", key, state.mode.value)
