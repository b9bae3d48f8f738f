"""Syntax-highlighted document dump for non-interactive output.

Used when the browser is not started (``--nopager`` or piped stdin): the
document is pretty-printed in its original key order and colorized with
pygments when writing to a terminal.
"""

from __future__ import annotations

import json

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_FORMATTERS: dict[str, Terminal256Formatter] = {}


def normalize_style(style: str | None) -> str:
    """Return ``style`` if pygments knows it, else the default style."""
    if not style:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def _formatter_for_style(style: str) -> Terminal256Formatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = Terminal256Formatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def dump_document(document: object, indent: int = 2) -> str:
    """Pretty-print ``document`` as JSON, keeping key order and non-ASCII text."""
    return json.dumps(document, indent=indent, ensure_ascii=False) + "\n"


def colorize_json(source: str, style: str | None = DEFAULT_STYLE) -> str:
    """Return ``source`` with ANSI syntax colors applied."""
    return highlight(source, JsonLexer(), _formatter_for_style(normalize_style(style)))
