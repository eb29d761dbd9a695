"""Runtime composition layer for folderpick.

Opens the controlling terminal, builds the initial state, and runs the loop.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from ..logger import get_logger
from ..state import PickerState
from ..terminal import TTY_PATH, TerminalController, open_tty
from ..ui_theme import resolve_theme
from .loop import run_main_loop

logger = get_logger(__name__)


def run_picker(
    root: Path,
    folders: Sequence[str],
    theme_name: str | None = None,
    no_color: bool = False,
    tty_path: str = TTY_PATH,
) -> Path | None:
    """Run the interactive picker over ``folders`` and return the chosen path.

    Returns ``None`` when the user quits without confirming a folder.
    """
    theme = resolve_theme(theme_name, no_color=no_color)
    state = PickerState.create(root, folders)
    tty_fd = open_tty(tty_path)
    try:
        terminal = TerminalController(stdin_fd=tty_fd, stdout_fd=tty_fd)
        logger.info("Starting picker over %d folders with theme %s", len(state.folders), theme.name)
        run_main_loop(state, terminal, theme)
    finally:
        os.close(tty_fd)
    return state.result
