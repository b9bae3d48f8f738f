"""UI theme definitions and selection helpers.

Themes are ANSI palettes for panel chrome only. Syntax colors used by the
non-interactive ``--nopager`` dump come from the pygments style instead.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    highlight: str
    ancestor: str
    current: str
    preview: str
    status: str
    notice: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    highlight="\033[7m",
    ancestor="\033[38;5;250m",
    current="\033[1;38;5;252m",
    preview="\033[2;38;5;250m",
    status="\033[7m",
    notice="\033[1;38;5;214m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    highlight="\033[1;7;38;5;45m",
    ancestor="\033[38;5;110m",
    current="\033[1;38;5;153m",
    preview="\033[2;38;5;73m",
    status="\033[7;38;5;39m",
    notice="\033[1;38;5;215m",
)

# Reverse video is kept without color so the selection stays visible.
PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    highlight="\033[7m",
    ancestor="",
    current="",
    preview="",
    status="\033[7m",
    notice="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
