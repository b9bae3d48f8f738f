"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized events:
``KeyEvent`` for keypresses and ``ResizeEvent`` for window size changes.
Resizes are delivered through a SIGWINCH self-pipe so both kinds of event can
be awaited with one ``select`` call.
"""

from __future__ import annotations

import contextlib
import os
import select
import shutil
import signal
from collections.abc import Callable
from dataclasses import dataclass

ESC_SEQUENCE_TIMEOUT_MS = 25
DEFAULT_TERMINAL_SIZE = (80, 24)
_PENDING_BYTES: list[bytes] = []


@dataclass(frozen=True)
class KeyEvent:
    key: str


@dataclass(frozen=True)
class ResizeEvent:
    columns: int
    rows: int


InputEvent = KeyEvent | ResizeEvent


def terminal_size() -> tuple[int, int]:
    """Return ``(columns, rows)`` of the controlling terminal."""
    size = shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE)
    return size.columns, size.lines


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one keypress from ``fd`` and return its token.

    Printable keys come back as themselves. Arrow keys map to ``UP``/``DOWN``/
    ``LEFT``/``RIGHT`` and a lone escape to ``ESC``. Returns ``""`` on timeout
    or end of input.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch == b"\r":
        return "ENTER"
    if ch in {b"\x08", b"\x7f"}:
        return "BACKSPACE"

    if ch != b"\x1b":
        needed = _utf8_length(ch[0]) - 1
        while needed > 0:
            more = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if more is None:
                break
            ch += more
            needed -= 1
        return ch.decode("utf-8", errors="replace")

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    arrows = {b"A": "UP", b"B": "DOWN", b"C": "RIGHT", b"D": "LEFT"}
    if seq in arrows:
        return arrows[seq]
    # Drain the rest of a CSI sequence (parameters then one final byte).
    consumed = 0
    while seq is not None and not (0x40 <= seq[0] <= 0x7E) and consumed < 32:
        seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        consumed += 1
    return "ESC"


class InputReader:
    """Wait for keypresses and terminal resizes on one ``select`` call."""

    def __init__(
        self,
        stdin_fd: int,
        get_size: Callable[[], tuple[int, int]] = terminal_size,
    ) -> None:
        self.stdin_fd = stdin_fd
        self.get_size = get_size
        self._wake_read: int | None = None
        self._wake_write: int | None = None
        self._previous_handler = None

    def _on_sigwinch(self, _signum, _frame) -> None:
        if self._wake_write is None:
            return
        try:
            os.write(self._wake_write, b"\0")
        except BlockingIOError:
            # Pipe already full: a wake-up is pending anyway.
            pass

    def install(self) -> None:
        """Create the self-pipe and start listening for SIGWINCH."""
        if self._wake_read is not None:
            return
        self._wake_read, self._wake_write = os.pipe()
        os.set_blocking(self._wake_read, False)
        os.set_blocking(self._wake_write, False)
        self._previous_handler = signal.signal(signal.SIGWINCH, self._on_sigwinch)

    def uninstall(self) -> None:
        if self._wake_read is None:
            return
        signal.signal(signal.SIGWINCH, self._previous_handler or signal.SIG_DFL)
        self._previous_handler = None
        os.close(self._wake_read)
        os.close(self._wake_write)
        self._wake_read = None
        self._wake_write = None

    @contextlib.contextmanager
    def listening(self):
        self.install()
        try:
            yield self
        finally:
            self.uninstall()

    def notify_resize(self) -> None:
        """Queue a resize event as if SIGWINCH had been delivered."""
        self._on_sigwinch(signal.SIGWINCH, None)

    def _drain_wake_pipe(self) -> None:
        assert self._wake_read is not None
        while True:
            try:
                if not os.read(self._wake_read, 64):
                    return
            except BlockingIOError:
                return

    def read_event(self, timeout_ms: int | None = None) -> InputEvent | None:
        """Block for the next event; ``None`` when ``timeout_ms`` elapses first."""
        if _PENDING_BYTES:
            return KeyEvent(read_key(self.stdin_fd))

        fds = [self.stdin_fd]
        if self._wake_read is not None:
            fds.append(self._wake_read)
        timeout = None if timeout_ms is None else max(0.0, timeout_ms / 1000.0)
        ready, _, _ = select.select(fds, [], [], timeout)
        if not ready:
            return None

        if self._wake_read is not None and self._wake_read in ready:
            self._drain_wake_pipe()
            columns, rows = self.get_size()
            return ResizeEvent(columns, rows)

        key = read_key(self.stdin_fd)
        if key == "":
            raise EOFError("input stream closed")
        return KeyEvent(key)
