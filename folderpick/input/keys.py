"""Keyboard dispatch for normal and editing modes.

``action_for_key`` is a pure ``(mode, key) -> Action`` mapping; navigation
and confirm resolve to the same actions in both modes.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from ..state import Mode, PickerState


class Action(Enum):
    QUIT = "quit"
    SELECT_NEXT = "select_next"
    SELECT_PREVIOUS = "select_previous"
    ENTER_EDITING = "enter_editing"
    EXIT_EDITING = "exit_editing"
    APPEND_CHAR = "append_char"
    DELETE_CHAR = "delete_char"
    CONFIRM = "confirm"


_SHARED_KEYS: dict[str, Action] = {
    "DOWN": Action.SELECT_NEXT,
    "UP": Action.SELECT_PREVIOUS,
    "ENTER": Action.CONFIRM,
    "CTRL_C": Action.QUIT,
}

NORMAL_KEYS: dict[str, Action] = {
    **_SHARED_KEYS,
    "q": Action.QUIT,
    "ESC": Action.QUIT,
    "j": Action.SELECT_NEXT,
    "k": Action.SELECT_PREVIOUS,
    "/": Action.ENTER_EDITING,
}

EDITING_KEYS: dict[str, Action] = {
    **_SHARED_KEYS,
    "ESC": Action.EXIT_EDITING,
    "BACKSPACE": Action.DELETE_CHAR,
}


def is_text_key(key: str) -> bool:
    """Return whether ``key`` is a single printable character."""
    return len(key) == 1 and key.isprintable()


def action_for_key(mode: Mode, key: str) -> Action | None:
    """Map a key token to an action for ``mode``; ``None`` means ignore."""
    if mode is Mode.NORMAL:
        return NORMAL_KEYS.get(key)
    action = EDITING_KEYS.get(key)
    if action is not None:
        return action
    if is_text_key(key):
        return Action.APPEND_CHAR
    return None


def _action_handlers(state: PickerState, key: str) -> dict[Action, Callable[[], None]]:
    return {
        Action.QUIT: state.quit,
        Action.SELECT_NEXT: state.select_next,
        Action.SELECT_PREVIOUS: state.select_previous,
        Action.ENTER_EDITING: state.enter_editing,
        Action.EXIT_EDITING: state.exit_editing,
        Action.APPEND_CHAR: lambda: state.append_char(key),
        Action.DELETE_CHAR: state.delete_char,
        Action.CONFIRM: state.confirm,
    }


def handle_key(state: PickerState, key: str) -> bool:
    """Apply the action bound to ``key`` and return whether one was dispatched.

    Keys arriving after the picker stopped running are ignored.
    """
    if not state.running:
        return False
    action = action_for_key(state.mode, key)
    if action is None:
        return False
    _action_handlers(state, key)[action]()
    return True


__all__ = [
    "Action",
    "EDITING_KEYS",
    "NORMAL_KEYS",
    "action_for_key",
    "handle_key",
    "is_text_key",
]
