"""Navigation state machine: ancestor stack, current node, and selection index.

Every transition saturates at the boundaries instead of failing, so callers
never need to guard a keypress. Ancestors are held by reference; the decoded
document is never mutated while a session runs.
"""

from __future__ import annotations

from dataclasses import dataclass

from .document import child_at, child_count, child_label
from .input import DEFAULT_TERMINAL_SIZE


@dataclass(frozen=True)
class AncestorFrame:
    """One saved level: the parent node and the index selected inside it."""

    node: object
    index: int


class NavigationState:
    """Mutable browsing position inside one document."""

    def __init__(self, root: object, size: tuple[int, int] = DEFAULT_TERMINAL_SIZE) -> None:
        self.root = root
        self.current_node = root
        self.current_index = 0
        self.ancestor_stack: list[AncestorFrame] = []
        self.columns = 0
        self.rows = 0
        self.resize(*size)

    @property
    def depth(self) -> int:
        return len(self.ancestor_stack)

    def child_count(self) -> int:
        return child_count(self.current_node)

    def selected_child(self) -> tuple[str, object] | None:
        """Return ``(label, child)`` under the cursor, or ``None`` for a leaf."""
        if self.child_count() == 0:
            return None
        return child_at(self.current_node, self.current_index)

    def selected_label(self) -> str | None:
        if self.child_count() == 0:
            return None
        return child_label(self.current_node, self.current_index)

    def snapshot(self) -> tuple[object, int, tuple[AncestorFrame, ...]]:
        """Return the navigation triple for equality checks."""
        return self.current_node, self.current_index, tuple(self.ancestor_stack)

    def move_next(self) -> bool:
        """Select the next sibling, stopping at the last one."""
        last = max(0, self.child_count() - 1)
        target = min(self.current_index + 1, last)
        if target == self.current_index:
            return False
        self.current_index = target
        return True

    def move_prev(self) -> bool:
        """Select the previous sibling, stopping at the first one."""
        target = max(self.current_index - 1, 0)
        if target == self.current_index:
            return False
        self.current_index = target
        return True

    def descend(self) -> bool:
        """Make the selected child the current node."""
        selected = self.selected_child()
        if selected is None:
            return False
        _label, child = selected
        self.ancestor_stack.append(AncestorFrame(self.current_node, self.current_index))
        self.current_node = child
        self.current_index = 0
        return True

    def ascend(self) -> bool:
        """Return to the parent, restoring the index selected there."""
        if not self.ancestor_stack:
            return False
        frame = self.ancestor_stack.pop()
        self.current_node = frame.node
        self.current_index = frame.index
        return True

    def resize(self, columns: int, rows: int) -> bool:
        """Record terminal dimensions; navigation fields are untouched."""
        columns = max(0, int(columns))
        rows = max(0, int(rows))
        if (columns, rows) == (self.columns, self.rows):
            return False
        self.columns = columns
        self.rows = rows
        return True

    def path_labels(self) -> list[str]:
        """Return labels from the root down to the current node."""
        return [child_label(frame.node, frame.index) for frame in self.ancestor_stack]

    def json_pointer(self) -> str:
        """Return the RFC 6901 pointer of the selection (or current leaf)."""
        labels = self.path_labels()
        selected = self.selected_label()
        if selected is not None:
            labels.append(selected)
        return "".join("/" + _escape_pointer_token(label) for label in labels)


def _escape_pointer_token(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")
