"""Tests for the render/read/dispatch loop and picker composition."""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
import unittest
from unittest import mock

from folderpick.errors import InputClosedError
from folderpick.runtime import run_main_loop, run_picker
from folderpick.runtime.loop import normalize_enter
from folderpick.state import PickerState
from folderpick.ui_theme import PLAIN_THEME

ROOT = Path("/home/user/Desktop")


class _FakeTerminal:
    def __init__(self) -> None:
        self.stdin_fd = 10
        self.stdout_fd = 11
        self.events: list[str] = []

    @contextmanager
    def raw_mode(self):
        self.events.append("enter")
        try:
            yield
        finally:
            self.events.append("exit")

    def size(self) -> tuple[int, int]:
        return 80, 24


def _make_state() -> PickerState:
    return PickerState.create(ROOT, ["Alpha", "Beta", "Gamma"])


def _key_feed(keys: list[str]):
    remaining = list(keys)

    def read_key(_fd: int) -> str:
        if not remaining:
            raise AssertionError("loop read past the final key")
        key = remaining.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key

    return read_key


class NormalizeEnterTests(unittest.TestCase):
    def test_crlf_pair_collapses_to_one_enter(self) -> None:
        key, skip = normalize_enter("ENTER_CR", False)
        self.assertEqual((key, skip), ("ENTER", True))
        key, skip = normalize_enter("ENTER_LF", skip)
        self.assertEqual((key, skip), (None, False))

    def test_bare_lf_is_enter_and_other_keys_reset_skip(self) -> None:
        self.assertEqual(normalize_enter("ENTER_LF", False), ("ENTER", False))
        self.assertEqual(normalize_enter("j", True), ("j", False))


class RunMainLoopTests(unittest.TestCase):
    def test_renders_before_each_read_and_stops_after_confirm(self) -> None:
        state = _make_state()
        terminal = _FakeTerminal()
        keys = ["j", "/", "e", "ENTER_CR"]

        with mock.patch("folderpick.runtime.loop.read_key", side_effect=_key_feed(keys)) as read_mock, mock.patch(
            "folderpick.runtime.loop.render_frame"
        ) as render_mock:
            run_main_loop(state, terminal, PLAIN_THEME)

        self.assertEqual(read_mock.call_count, 4)
        self.assertEqual(render_mock.call_count, 4)
        render_mock.assert_called_with(11, state, 80, 24, PLAIN_THEME)
        self.assertEqual(state.result, ROOT / "Beta")
        self.assertFalse(state.running)
        self.assertEqual(terminal.events, ["enter", "exit"])

    def test_quit_key_ends_loop_without_result(self) -> None:
        state = _make_state()

        with mock.patch("folderpick.runtime.loop.read_key", side_effect=_key_feed(["x", "q"])), mock.patch(
            "folderpick.runtime.loop.render_frame"
        ):
            run_main_loop(state, _FakeTerminal(), PLAIN_THEME)

        self.assertIsNone(state.result)
        self.assertFalse(state.running)

    def test_lf_following_cr_is_not_a_second_enter(self) -> None:
        state = _make_state()
        keys = ["/", "z", "ENTER_CR"]

        with mock.patch("folderpick.runtime.loop.read_key", side_effect=_key_feed(keys)), mock.patch(
            "folderpick.runtime.loop.render_frame"
        ):
            run_main_loop(state, _FakeTerminal(), PLAIN_THEME)

        self.assertIsNone(state.result)
        self.assertFalse(state.running)

    def test_keyboard_interrupt_quits(self) -> None:
        state = _make_state()

        with mock.patch(
            "folderpick.runtime.loop.read_key", side_effect=_key_feed([KeyboardInterrupt()])
        ), mock.patch("folderpick.runtime.loop.render_frame"):
            run_main_loop(state, _FakeTerminal(), PLAIN_THEME)

        self.assertFalse(state.running)
        self.assertIsNone(state.result)

    def test_input_errors_propagate_after_terminal_restore(self) -> None:
        state = _make_state()
        terminal = _FakeTerminal()

        with mock.patch(
            "folderpick.runtime.loop.read_key", side_effect=_key_feed(["j", InputClosedError()])
        ), mock.patch("folderpick.runtime.loop.render_frame"):
            with self.assertRaises(InputClosedError):
                run_main_loop(state, terminal, PLAIN_THEME)

        self.assertEqual(terminal.events, ["enter", "exit"])
        self.assertIsNone(state.result)

    def test_stopped_state_never_renders(self) -> None:
        state = _make_state()
        state.quit()

        with mock.patch("folderpick.runtime.loop.read_key") as read_mock, mock.patch(
            "folderpick.runtime.loop.render_frame"
        ) as render_mock:
            run_main_loop(state, _FakeTerminal(), PLAIN_THEME)

        read_mock.assert_not_called()
        render_mock.assert_not_called()


class RunPickerTests(unittest.TestCase):
    def test_returns_confirmed_path_and_closes_tty(self) -> None:
        def fake_loop(state, terminal, theme) -> None:
            self.assertEqual(terminal.stdin_fd, 42)
            self.assertEqual(terminal.stdout_fd, 42)
            self.assertEqual(theme.name, "plain")
            state.select_next()
            state.confirm()

        with mock.patch("folderpick.runtime.app.open_tty", return_value=42), mock.patch(
            "folderpick.runtime.app.TerminalController"
        ) as controller_cls, mock.patch("folderpick.runtime.app.run_main_loop", side_effect=fake_loop), mock.patch(
            "folderpick.runtime.app.os.close"
        ) as close_mock:
            controller_cls.return_value.stdin_fd = 42
            controller_cls.return_value.stdout_fd = 42
            result = run_picker(ROOT, ["Alpha", "Beta"], no_color=True)

        self.assertEqual(result, ROOT / "Beta")
        controller_cls.assert_called_once_with(stdin_fd=42, stdout_fd=42)
        close_mock.assert_called_once_with(42)

    def test_closes_tty_when_loop_fails(self) -> None:
        with mock.patch("folderpick.runtime.app.open_tty", return_value=42), mock.patch(
            "folderpick.runtime.app.TerminalController"
        ), mock.patch(
            "folderpick.runtime.app.run_main_loop", side_effect=InputClosedError()
        ), mock.patch("folderpick.runtime.app.os.close") as close_mock:
            with self.assertRaises(InputClosedError):
                run_picker(ROOT, ["Alpha"])

        close_mock.assert_called_once_with(42)


if __name__ == "__main__":
    unittest.main()
