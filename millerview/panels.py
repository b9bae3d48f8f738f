"""Derive the three Miller columns from navigation state and terminal size.

``derive_panels`` is pure: it reads a ``NavigationState`` and returns fresh
``Panel`` descriptors each frame. The renderer only ever sees the labels
computed here, never the document nodes themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .ansi import fit_to_width
from .document import node_lines
from .navigation import NavigationState

MIN_PANEL_WIDTH = 4
STATUS_ROWS = 1


class PanelSide(Enum):
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"


@dataclass(frozen=True)
class Panel:
    """One renderable column.

    ``lines`` holds every row already fitted to ``width``; ``start`` is the
    first row shown so ``highlight`` stays inside the visible window.
    """

    side: PanelSide
    source_node: object
    lines: tuple[str, ...]
    highlight: int | None
    column: int
    width: int
    start: int = 0


def panel_width(columns: int) -> int:
    return max(0, columns) // 3


def visible_rows(rows: int) -> int:
    """Return rows available to panels after reserving the status line."""
    return max(0, rows - STATUS_ROWS)


def scroll_start(highlight: int | None, rows: int) -> int:
    """Return the smallest offset that keeps ``highlight`` in a ``rows``-tall window."""
    if highlight is None or rows <= 0:
        return 0
    return max(0, highlight - rows + 1)


def build_panel(
    side: PanelSide,
    node: object,
    highlight: int | None,
    column: int,
    width: int,
    rows: int,
) -> Panel:
    """Build one panel for ``node`` with its lines fitted to ``width``.

    A highlight that does not land on a line (an empty container) is dropped.
    """
    lines = tuple(fit_to_width(line, width) for line in node_lines(node))
    if highlight is not None and not 0 <= highlight < len(lines):
        highlight = None
    return Panel(
        side=side,
        source_node=node,
        lines=lines,
        highlight=highlight,
        column=column,
        width=width,
        start=scroll_start(highlight, rows),
    )


def derive_panels(
    state: NavigationState,
    columns: int | None = None,
    rows: int | None = None,
    *,
    min_width: int = MIN_PANEL_WIDTH,
) -> list[Panel]:
    """Map navigation state plus terminal size to 0-3 panels, left to right.

    Size defaults to the dimensions last recorded by ``state.resize``. When a
    third of the width is below ``min_width`` no panels are produced at all.
    """
    if columns is None:
        columns = state.columns
    if rows is None:
        rows = state.rows
    width = panel_width(columns)
    if width < max(1, min_width):
        return []
    content_rows = visible_rows(rows)

    panels: list[Panel] = []
    if state.ancestor_stack:
        parent = state.ancestor_stack[-1]
        panels.append(build_panel(PanelSide.LEFT, parent.node, parent.index, 0, width, content_rows))

    panels.append(
        build_panel(
            PanelSide.MIDDLE,
            state.current_node,
            state.current_index,
            width,
            width,
            content_rows,
        )
    )

    selected = state.selected_child()
    if selected is not None:
        _label, child = selected
        panels.append(build_panel(PanelSide.RIGHT, child, None, 2 * width, width, content_rows))
    return panels


__all__ = [
    "MIN_PANEL_WIDTH",
    "Panel",
    "PanelSide",
    "build_panel",
    "derive_panels",
    "panel_width",
    "scroll_start",
    "visible_rows",
]
