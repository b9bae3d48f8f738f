"""Display-width aware text shaping for fixed-width panel cells.

Labels come straight from user data, so they may hold wide characters,
combining marks, or control bytes. These helpers turn any label into a single
row that occupies an exact number of terminal columns.
"""

from __future__ import annotations

import unicodedata

CONTROL_PLACEHOLDER = "\N{REPLACEMENT CHARACTER}"
_CONTROL_ESCAPES = {"\n": "\\n", "\r": "\\r", "\t": "\\t"}


def char_display_width(ch: str) -> int:
    """Return terminal column width for one printable character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def sanitize_label(text: str) -> str:
    """Make ``text`` safe to print as one row.

    Common whitespace controls are shown as their backslash escapes; any other
    control character (including ESC) becomes a placeholder glyph.
    """
    out: list[str] = []
    for ch in text:
        if ch in _CONTROL_ESCAPES:
            out.append(_CONTROL_ESCAPES[ch])
        elif unicodedata.category(ch) in {"Cc", "Cf"}:
            out.append(CONTROL_PLACEHOLDER)
        else:
            out.append(ch)
    return "".join(out)


def clip_to_width(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns."""
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def fit_to_width(text: str, width: int) -> str:
    """Clip and right-pad ``text`` so it spans exactly ``width`` columns."""
    if width <= 0:
        return ""
    clipped = clip_to_width(sanitize_label(text), width)
    return clipped + " " * (width - display_width(clipped))

