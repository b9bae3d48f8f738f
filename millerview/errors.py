"""Exception types raised outside the navigation core.

Navigation itself never raises; these cover document loading and terminal
session setup, both of which are fatal.
"""

from __future__ import annotations


class MillerviewError(Exception):
    """Base exception for all millerview errors."""


class DocumentError(MillerviewError):
    """Raised when the input document cannot be read or decoded."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


class TerminalError(MillerviewError):
    """Raised when the interactive terminal session cannot be entered."""
