"""Frame rendering for the Miller column view.

Each frame is a full redraw: the screen is cleared, then every panel clears
its own rectangle, draws its visible lines, and overlays the highlighted row
in reverse video. Output is buffered and written with a single ``os.write``.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable

from .ansi import clip_to_width, display_width, fit_to_width
from .panels import Panel, PanelSide, visible_rows
from .ui_theme import DEFAULT_THEME, UITheme

NARROW_NOTICE = "terminal too narrow"


class AnsiFrame:
    """Buffered ANSI drawing surface for one frame."""

    def __init__(self, theme: UITheme = DEFAULT_THEME) -> None:
        self.theme = theme
        self._out: list[str] = []

    @staticmethod
    def _move(row: int, column: int) -> str:
        return f"\033[{row + 1};{column + 1}H"

    def clear_screen(self) -> None:
        self._out.append("\033[H\033[2J")

    def move_and_clear(self, column: int, width: int, rows: int) -> None:
        """Blank the ``width`` x ``rows`` rectangle starting at ``column`` and home to it."""
        blank = " " * width
        for row in range(rows):
            self._out.append(self._move(row, column))
            self._out.append(blank)
        self._out.append(self._move(0, column))

    def draw_text(self, row: int, column: int, text: str, style: str = "") -> None:
        self._out.append(self._move(row, column))
        if style:
            self._out.append(style)
            self._out.append(text)
            self._out.append(self.theme.reset)
        else:
            self._out.append(text)

    def draw_highlight(self, row: int, column: int, text: str) -> None:
        self.draw_text(row, column, text, self.theme.highlight)

    def getvalue(self) -> str:
        return "".join(self._out)


def _panel_style(theme: UITheme, side: PanelSide) -> str:
    if side is PanelSide.LEFT:
        return theme.ancestor
    if side is PanelSide.RIGHT:
        return theme.preview
    return theme.current


def draw_panel(frame: AnsiFrame, panel: Panel, rows: int) -> None:
    """Draw one panel: clear its rectangle, its visible lines, then the highlight overlay."""
    frame.move_and_clear(panel.column, panel.width, rows)
    style = _panel_style(frame.theme, panel.side)
    visible = panel.lines[panel.start : panel.start + rows]
    for row, line in enumerate(visible):
        frame.draw_text(row, panel.column, line, style)
    if panel.highlight is not None:
        row = panel.highlight - panel.start
        if 0 <= row < rows:
            frame.draw_highlight(row, panel.column, panel.lines[panel.highlight])


def build_status_line(left_text: str, width: int, right_text: str = "") -> str:
    """Lay out ``left_text`` and ``right_text`` on one row of exactly ``width`` columns."""
    if width <= 0:
        return ""
    right = clip_to_width(right_text, width)
    right_cols = display_width(right)
    if right_cols >= width:
        return fit_to_width(right, width)
    gap = 1 if right else 0
    left = fit_to_width(left_text, width - right_cols - gap)
    return f"{left}{' ' * gap}{right}"


def render_frame(
    panels: list[Panel],
    columns: int,
    rows: int,
    *,
    status_left: str = "",
    status_right: str = "",
    theme: UITheme = DEFAULT_THEME,
) -> str:
    """Return the escape-sequence payload for one complete frame."""
    frame = AnsiFrame(theme)
    frame.clear_screen()
    content_rows = visible_rows(rows)
    for panel in panels:
        draw_panel(frame, panel, content_rows)
    if not panels and columns > 0 and content_rows > 0:
        notice = clip_to_width(NARROW_NOTICE, columns)
        notice_col = max(0, (columns - display_width(notice)) // 2)
        frame.draw_text(content_rows // 2, notice_col, notice, theme.notice)
    if rows > 0 and columns > 0:
        status = build_status_line(status_left, columns - 1, status_right)
        frame.draw_text(rows - 1, 0, status, theme.status)
    return frame.getvalue()


def write_frame(payload: str, fd: int | None = None) -> None:
    """Write a rendered frame to ``fd`` (stdout by default) in full."""
    if fd is None:
        fd = sys.stdout.fileno()
    data = payload.encode("utf-8", errors="replace")
    while data:
        written = os.write(fd, data)
        data = data[written:]


def render_panels(
    panels: list[Panel],
    columns: int,
    rows: int,
    *,
    status_left: str = "",
    status_right: str = "",
    theme: UITheme = DEFAULT_THEME,
    write: Callable[[str], None] = write_frame,
) -> None:
    """Render and emit one frame."""
    write(
        render_frame(
            panels,
            columns,
            rows,
            status_left=status_left,
            status_right=status_right,
            theme=theme,
        )
    )
