"""Tests for terminal mode control sequences and restoration.

Verifies raw-mode lifecycle safety: the tty is restored on normal exit, on
exceptions raised mid-session, and when entering the session fails.
"""

from __future__ import annotations

import termios
import unittest
from unittest import mock

from millerview.errors import TerminalError
from millerview.terminal import ENTER_SEQUENCE, LEAVE_SEQUENCE, TerminalController


class TerminalBehaviorTests(unittest.TestCase):
    def test_enable_and_disable_tui_mode_use_alternate_screen_sequences(self) -> None:
        saved_state = [1, 2, 3]

        with mock.patch("millerview.terminal.termios.tcgetattr", return_value=saved_state), mock.patch(
            "millerview.terminal.tty.setraw"
        ) as setraw_mock, mock.patch("millerview.terminal.os.write") as write_mock, mock.patch(
            "millerview.terminal.termios.tcsetattr"
        ) as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.enable_tui_mode()
            self.assertTrue(controller.active)
            controller.disable_tui_mode()

        self.assertFalse(controller.active)
        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        self.assertEqual(write_mock.call_args_list[0].args, (1, b"\x1b[?1049h\x1b[?25l"))
        self.assertEqual(write_mock.call_args_list[1].args, (1, b"\x1b[0m\x1b[?25h\x1b[?1049l"))
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)

    def test_raw_mode_restores_terminal_after_exception(self) -> None:
        with mock.patch("millerview.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with mock.patch.object(controller, "enable_tui_mode") as enable_mock, mock.patch.object(
            controller, "disable_tui_mode"
        ) as disable_mock:
            with self.assertRaises(RuntimeError):
                with controller.raw_mode():
                    raise RuntimeError("boom")

        enable_mock.assert_called_once()
        disable_mock.assert_called_once()

    def test_raw_mode_restores_terminal_on_normal_exit(self) -> None:
        with mock.patch("millerview.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with mock.patch.object(controller, "enable_tui_mode"), mock.patch.object(
            controller, "disable_tui_mode"
        ) as disable_mock:
            with controller.raw_mode() as active:
                self.assertIs(active, controller)
            disable_mock.assert_called_once()

    def test_non_tty_stdin_raises_terminal_error(self) -> None:
        with mock.patch(
            "millerview.terminal.termios.tcgetattr",
            side_effect=termios.error(25, "Inappropriate ioctl for device"),
        ):
            with self.assertRaises(TerminalError):
                TerminalController(stdin_fd=0, stdout_fd=1)

    def test_failed_entry_restores_and_raises_terminal_error(self) -> None:
        saved_state = [9]
        with mock.patch("millerview.terminal.termios.tcgetattr", return_value=saved_state):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with mock.patch("millerview.terminal.tty.setraw"), mock.patch(
            "millerview.terminal.os.write",
            side_effect=[OSError(5, "I/O error"), 0],
        ) as write_mock, mock.patch("millerview.terminal.termios.tcsetattr") as setattr_mock:
            with self.assertRaises(TerminalError):
                with controller.raw_mode():
                    self.fail("session body must not run")

        self.assertEqual(write_mock.call_args_list[1].args, (1, LEAVE_SEQUENCE))
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)
        self.assertFalse(controller.active)

    def test_restore_still_resets_tty_when_screen_write_fails(self) -> None:
        with mock.patch("millerview.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with mock.patch("millerview.terminal.os.write", side_effect=OSError(5, "I/O error")), mock.patch(
            "millerview.terminal.termios.tcsetattr"
        ) as setattr_mock:
            controller.disable_tui_mode()

        setattr_mock.assert_called_once()

    def test_sequences_enter_and_leave_alternate_screen(self) -> None:
        self.assertIn(b"\x1b[?1049h", ENTER_SEQUENCE)
        self.assertIn(b"\x1b[?25l", ENTER_SEQUENCE)
        self.assertIn(b"\x1b[?1049l", LEAVE_SEQUENCE)
        self.assertIn(b"\x1b[?25h", LEAVE_SEQUENCE)


if __name__ == "__main__":
    unittest.main()
