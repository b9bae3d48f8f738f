"""Terminal control for the interactive session.

Owns raw-mode lifecycle, alternate-screen switching, and cursor visibility.
``raw_mode`` is the only supported way in: it restores the saved tty state on
every exit path, including exceptions raised mid-session.
"""

from __future__ import annotations

import contextlib
import logging
import os
import termios
import tty

from .errors import TerminalError

logger = logging.getLogger(__name__)

ENTER_SEQUENCE = b"\x1b[?1049h\x1b[?25l"
LEAVE_SEQUENCE = b"\x1b[0m\x1b[?25h\x1b[?1049l"


class TerminalController:
    """Manage terminal mode transitions for one session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalError(f"cannot read terminal attributes: {exc}") from exc
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def enable_tui_mode(self) -> None:
        """Enter raw mode on the alternate screen with the cursor hidden."""
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
            self._active = True
            os.write(self.stdout_fd, ENTER_SEQUENCE)
        except (OSError, termios.error) as exc:
            self.disable_tui_mode()
            raise TerminalError(f"cannot enter interactive mode: {exc}") from exc
        logger.debug("entered raw mode on fd %d", self.stdin_fd)

    def disable_tui_mode(self) -> None:
        """Restore the main screen, cursor, and saved tty attributes.

        Both steps are attempted even if the first fails, so a broken stdout
        still leaves the tty usable.
        """
        errors: list[Exception] = []
        try:
            os.write(self.stdout_fd, LEAVE_SEQUENCE)
        except OSError as exc:
            errors.append(exc)
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        except termios.error as exc:
            errors.append(exc)
        self._active = False
        for exc in errors:
            logger.warning("terminal restore step failed: %s", exc)
        logger.debug("left raw mode on fd %d", self.stdin_fd)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        self.enable_tui_mode()
        try:
            yield self
        finally:
            self.disable_tui_mode()
