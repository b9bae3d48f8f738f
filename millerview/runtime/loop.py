"""Main interactive event loop for the Miller column browser.

Blocks for one input event at a time, applies at most one navigation
transition, and renders exactly one frame afterwards. Bursts of resize
events are collapsed into a single re-layout.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..input import InputEvent, InputReader, ResizeEvent
from ..keys import Command, KeyMap, default_keymap
from ..navigation import NavigationState
from ..terminal import TerminalController

logger = logging.getLogger(__name__)

RESIZE_DEBOUNCE_MS = 50


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    resize_debounce_ms: int = RESIZE_DEBOUNCE_MS


def apply_command(state: NavigationState, command: Command) -> bool:
    """Apply one navigation command; return whether the state changed."""
    if command is Command.MOVE_NEXT:
        return state.move_next()
    if command is Command.MOVE_PREV:
        return state.move_prev()
    if command is Command.DESCEND:
        return state.descend()
    if command is Command.ASCEND:
        return state.ascend()
    raise ValueError(f"not a navigation command: {command}")


def drain_resize_events(
    reader: InputReader,
    first: ResizeEvent,
    debounce_ms: int,
) -> tuple[ResizeEvent, InputEvent | None]:
    """Collect resize events arriving within ``debounce_ms`` of each other.

    Returns the last observed size plus the first non-resize event that ended
    the burst, if any, so it can still be processed.
    """
    last = first
    drained = 0
    while True:
        event = reader.read_event(timeout_ms=debounce_ms)
        if event is None:
            break
        if not isinstance(event, ResizeEvent):
            logger.debug("resize burst of %d ended by %r", drained + 1, event)
            return last, event
        last = event
        drained += 1
    logger.debug("resize burst of %d settled at %dx%d", drained + 1, last.columns, last.rows)
    return last, None


def run_main_loop(
    state: NavigationState,
    terminal: TerminalController,
    reader: InputReader,
    render: Callable[[NavigationState], None],
    keymap: KeyMap | None = None,
    timing: RuntimeLoopTiming = RuntimeLoopTiming(),
) -> None:
    """Run the interactive loop until a quit command arrives.

    The terminal stays in raw mode for the duration and is restored on every
    exit path, including exceptions raised by ``render``.
    """
    if keymap is None:
        keymap = default_keymap()

    with terminal.raw_mode(), reader.listening():
        render(state)
        pending: InputEvent | None = None
        while True:
            if pending is not None:
                event, pending = pending, None
            else:
                try:
                    event = reader.read_event()
                except KeyboardInterrupt:
                    continue
            if event is None:
                continue

            if isinstance(event, ResizeEvent):
                settled, pending = drain_resize_events(reader, event, timing.resize_debounce_ms)
                state.resize(settled.columns, settled.rows)
                render(state)
                continue

            command = keymap.lookup(event.key)
            if command is None:
                continue
            if command is Command.QUIT:
                logger.debug("quit requested")
                break
            apply_command(state, command)
            render(state)
