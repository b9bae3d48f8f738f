"""Session bootstrap: build state, wire terminal, input, and renderer, then run.

Falls back to a plain pretty-printed dump when no interactive terminal is
available or ``--nopager`` was requested.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from ..highlight import colorize_json, dump_document
from ..input import InputReader, terminal_size
from ..navigation import NavigationState
from ..panels import derive_panels
from ..render import render_panels, write_frame
from ..terminal import TerminalController
from ..ui_theme import DEFAULT_THEME, UITheme, resolve_theme
from .loop import run_main_loop

logger = logging.getLogger(__name__)


def status_text(state: NavigationState, source_label: str = "") -> tuple[str, str]:
    """Return ``(left, right)`` status texts: location pointer and position."""
    pointer = state.json_pointer() or "/"
    left = f"{source_label} {pointer}" if source_label else pointer
    count = state.child_count()
    right = f"{state.current_index + 1}/{count}" if count else "leaf"
    return left, right


class FrameRenderer:
    """Derive panels from state and draw one full frame per call."""

    def __init__(
        self,
        theme: UITheme = DEFAULT_THEME,
        source_label: str = "",
        fd: int | None = None,
    ) -> None:
        self.theme = theme
        self.source_label = source_label
        self.fd = fd
        self.frames = 0

    def _write(self, payload: str) -> None:
        write_frame(payload, self.fd)

    def __call__(self, state: NavigationState) -> None:
        panels = derive_panels(state)
        status_left, status_right = status_text(state, self.source_label)
        render_panels(
            panels,
            state.columns,
            state.rows,
            status_left=status_left,
            status_right=status_right,
            theme=self.theme,
            write=self._write,
        )
        self.frames += 1


def print_document(document: object, no_color: bool, style: str | None) -> None:
    text = dump_document(document)
    if not no_color and os.isatty(sys.stdout.fileno()):
        text = colorize_json(text, style)
    sys.stdout.write(text)


def run_viewer(
    document: object,
    path: Path,
    *,
    theme_name: str | None = None,
    no_color: bool = False,
    nopager: bool = False,
    style: str | None = None,
) -> None:
    """Browse ``document`` interactively until the user quits."""
    if nopager or not os.isatty(sys.stdin.fileno()):
        print_document(document, no_color, style)
        return

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    reader = InputReader(stdin_fd)
    state = NavigationState(document, terminal_size())
    renderer = FrameRenderer(resolve_theme(theme_name, no_color=no_color), path.name, stdout_fd)
    logger.info("browsing %s at %dx%d", path, state.columns, state.rows)
    run_main_loop(state, terminal, reader, renderer)
    logger.info("session ended after %d frames", renderer.frames)
