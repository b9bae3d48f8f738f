"""Tests for the key binding table."""

from __future__ import annotations

import unittest

from millerview.keys import Command, KeyBinding, KeyMap, default_keymap


class KeyMapTests(unittest.TestCase):
    def test_default_bindings(self) -> None:
        keymap = default_keymap()
        self.assertIs(keymap.lookup("j"), Command.MOVE_NEXT)
        self.assertIs(keymap.lookup("k"), Command.MOVE_PREV)
        self.assertIs(keymap.lookup("l"), Command.DESCEND)
        self.assertIs(keymap.lookup("h"), Command.ASCEND)
        self.assertIs(keymap.lookup("q"), Command.QUIT)

    def test_lookup_is_case_sensitive_and_exact(self) -> None:
        keymap = default_keymap()
        for key in ("J", "Q", "jj", "", "ESC", "DOWN"):
            self.assertIsNone(keymap.lookup(key))

    def test_later_binding_overrides_earlier(self) -> None:
        keymap = KeyMap().register_bindings(
            KeyBinding(("a", "b"), Command.MOVE_NEXT),
            KeyBinding(("b",), Command.QUIT),
        )
        self.assertIs(keymap.lookup("a"), Command.MOVE_NEXT)
        self.assertIs(keymap.lookup("b"), Command.QUIT)


if __name__ == "__main__":
    unittest.main()
