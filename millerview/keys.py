"""Key-to-command bindings for the browser.

Matching is exact and case-sensitive: ``J`` is not ``j``. Keys without a
binding resolve to ``None`` and are ignored by the event loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Command(Enum):
    MOVE_NEXT = "move_next"
    MOVE_PREV = "move_prev"
    DESCEND = "descend"
    ASCEND = "ascend"
    QUIT = "quit"


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key tokens to a single command."""

    keys: tuple[str, ...]
    command: Command


class KeyMap:
    """Small exact-match key lookup table."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register_binding(self, binding: KeyBinding) -> KeyMap:
        """Register one binding, overwriting existing commands for the same keys."""
        for key in binding.keys:
            self._commands[key] = binding.command
        return self

    def register_bindings(self, *bindings: KeyBinding) -> KeyMap:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def lookup(self, key: str) -> Command | None:
        return self._commands.get(key)


DEFAULT_BINDINGS: tuple[KeyBinding, ...] = (
    KeyBinding(("j",), Command.MOVE_NEXT),
    KeyBinding(("k",), Command.MOVE_PREV),
    KeyBinding(("l",), Command.DESCEND),
    KeyBinding(("h",), Command.ASCEND),
    KeyBinding(("q",), Command.QUIT),
)


def default_keymap() -> KeyMap:
    return KeyMap().register_bindings(*DEFAULT_BINDINGS)
