"""Public runtime orchestration entry points.

This package groups the interactive session bootstrap (`run_viewer`) and the
event loop in ``runtime.loop`` that it drives.
"""

from __future__ import annotations


def run_viewer(*args, **kwargs):
    """Lazily import the session entrypoint to keep package imports light."""
    from .app import run_viewer as _run_viewer

    return _run_viewer(*args, **kwargs)


__all__ = ["run_viewer"]
