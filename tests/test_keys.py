"""Tests for mode-dependent key dispatch.

Checks the pure ``(mode, key) -> Action`` mapping and that ``handle_key``
drives the state machine the same way a user session would.
"""

from __future__ import annotations

import unittest
from pathlib import Path

from folderpick.input import Action, action_for_key, handle_key
from folderpick.state import Mode, PickerState

ROOT = Path("/home/user/Projects")


def _make_state() -> PickerState:
    return PickerState.create(ROOT, ["Alpha", "Beta", "Gamma"])


class ActionForKeyTests(unittest.TestCase):
    def test_normal_mode_bindings(self) -> None:
        expected = {
            "q": Action.QUIT,
            "ESC": Action.QUIT,
            "CTRL_C": Action.QUIT,
            "j": Action.SELECT_NEXT,
            "DOWN": Action.SELECT_NEXT,
            "k": Action.SELECT_PREVIOUS,
            "UP": Action.SELECT_PREVIOUS,
            "/": Action.ENTER_EDITING,
            "ENTER": Action.CONFIRM,
        }
        for key, action in expected.items():
            with self.subTest(key=key):
                self.assertIs(action_for_key(Mode.NORMAL, key), action)

    def test_normal_mode_ignores_other_keys(self) -> None:
        for key in ("x", "BACKSPACE", "LEFT", "RIGHT", "TAB", "MOUSE", "UNKNOWN"):
            with self.subTest(key=key):
                self.assertIsNone(action_for_key(Mode.NORMAL, key))

    def test_editing_mode_bindings(self) -> None:
        expected = {
            "ESC": Action.EXIT_EDITING,
            "ENTER": Action.CONFIRM,
            "DOWN": Action.SELECT_NEXT,
            "UP": Action.SELECT_PREVIOUS,
            "BACKSPACE": Action.DELETE_CHAR,
            "CTRL_C": Action.QUIT,
        }
        for key, action in expected.items():
            with self.subTest(key=key):
                self.assertIs(action_for_key(Mode.EDITING, key), action)

    def test_editing_mode_treats_printable_characters_as_text(self) -> None:
        for key in ("a", "q", "j", "k", "/", " ", "é", "7"):
            with self.subTest(key=key):
                self.assertIs(action_for_key(Mode.EDITING, key), Action.APPEND_CHAR)

    def test_editing_mode_ignores_non_text_tokens(self) -> None:
        for key in ("LEFT", "TAB", "MOUSE", "UNKNOWN", "\x00"):
            with self.subTest(key=key):
                self.assertIsNone(action_for_key(Mode.EDITING, key))


class HandleKeyTests(unittest.TestCase):
    def test_vim_keys_navigate_in_normal_mode(self) -> None:
        state = _make_state()

        self.assertTrue(handle_key(state, "j"))
        self.assertEqual(state.selected, 1)
        self.assertTrue(handle_key(state, "k"))
        self.assertTrue(handle_key(state, "k"))
        self.assertEqual(state.selected, 2)

    def test_typing_after_slash_filters_and_enter_confirms(self) -> None:
        state = _make_state()

        for key in ("/", "a", "l", "ENTER"):
            handle_key(state, key)

        self.assertEqual(state.result, ROOT / "Alpha")
        self.assertFalse(state.running)

    def test_q_is_text_in_editing_mode_and_quit_in_normal_mode(self) -> None:
        state = _make_state()

        handle_key(state, "/")
        handle_key(state, "q")
        self.assertTrue(state.running)
        self.assertEqual(state.query, "q")
        self.assertEqual(state.filtered, [])

        handle_key(state, "ESC")
        self.assertIs(state.mode, Mode.NORMAL)
        self.assertEqual(state.filtered, ["Alpha", "Beta", "Gamma"])

        handle_key(state, "q")
        self.assertFalse(state.running)
        self.assertIsNone(state.result)

    def test_arrow_navigation_stays_live_while_editing(self) -> None:
        state = _make_state()

        handle_key(state, "/")
        handle_key(state, "a")
        handle_key(state, "DOWN")
        handle_key(state, "DOWN")
        handle_key(state, "ENTER")

        self.assertEqual(state.result, ROOT / "Gamma")

    def test_unbound_key_reports_no_dispatch(self) -> None:
        state = _make_state()

        self.assertFalse(handle_key(state, "x"))
        self.assertEqual(state.selected, 0)
        self.assertTrue(state.running)

    def test_keys_after_stop_are_ignored(self) -> None:
        state = _make_state()
        handle_key(state, "q")

        self.assertFalse(handle_key(state, "/"))
        self.assertIs(state.mode, Mode.NORMAL)


if __name__ == "__main__":
    unittest.main()
