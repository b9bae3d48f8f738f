"""Tests for display-width aware label fitting and theme selection."""

from __future__ import annotations

import unittest

from millerview.ansi import (
    CONTROL_PLACEHOLDER,
    clip_to_width,
    display_width,
    fit_to_width,
    sanitize_label,
)
from millerview.ui_theme import (
    DEFAULT_THEME,
    OCEAN_THEME,
    PLAIN_THEME,
    available_theme_names,
    normalize_theme_name,
    resolve_theme,
)


class AnsiTextTests(unittest.TestCase):
    def test_wide_and_combining_characters_are_measured(self) -> None:
        self.assertEqual(display_width("abc"), 3)
        self.assertEqual(display_width("日本"), 4)
        self.assertEqual(display_width("é"), 1)

    def test_clip_never_splits_a_wide_character(self) -> None:
        self.assertEqual(clip_to_width("日本語", 5), "日本")
        self.assertEqual(clip_to_width("abc", 0), "")

    def test_fit_pads_and_truncates_to_exact_width(self) -> None:
        self.assertEqual(fit_to_width("ab", 4), "ab  ")
        self.assertEqual(fit_to_width("abcdef", 4), "abcd")
        self.assertEqual(fit_to_width("日本語", 5), "日本 ")
        self.assertEqual(fit_to_width("", 3), "   ")
        self.assertEqual(fit_to_width("abc", 0), "")

    def test_sanitize_escapes_controls(self) -> None:
        self.assertEqual(sanitize_label("a\tb\nc"), "a\\tb\\nc")
        self.assertEqual(sanitize_label("x\x1by\x00"), f"x{CONTROL_PLACEHOLDER}y{CONTROL_PLACEHOLDER}")
        self.assertEqual(sanitize_label("plain"), "plain")


class ThemeTests(unittest.TestCase):
    def test_theme_resolution(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "ocean"))
        self.assertIs(resolve_theme("OCEAN"), OCEAN_THEME)
        self.assertIs(resolve_theme("bogus"), DEFAULT_THEME)
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)
        self.assertEqual(normalize_theme_name("  Default "), "default")

    def test_plain_theme_keeps_reverse_video_for_selection(self) -> None:
        self.assertEqual(PLAIN_THEME.highlight, "\033[7m")
        self.assertEqual(PLAIN_THEME.current, "")


if __name__ == "__main__":
    unittest.main()
