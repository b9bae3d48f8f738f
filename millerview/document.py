"""Read-only access helpers over the parsed JSON document.

Nodes are plain decoded JSON values (``dict``/``list``/scalars). Every helper
dispatches on ``node_kind`` so container vs scalar behavior lives in one place.
Object key order is the decoder's insertion order and is never re-sorted.
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterator
from enum import Enum
from itertools import islice
from pathlib import Path

from .errors import DocumentError


class NodeKind(Enum):
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def node_kind(node: object) -> NodeKind:
    """Classify a decoded JSON value."""
    if node is None:
        return NodeKind.NULL
    # bool is an int subclass, so it has to be checked first.
    if isinstance(node, bool):
        return NodeKind.BOOL
    if isinstance(node, (int, float)):
        return NodeKind.NUMBER
    if isinstance(node, str):
        return NodeKind.STRING
    if isinstance(node, list):
        return NodeKind.ARRAY
    if isinstance(node, dict):
        return NodeKind.OBJECT
    raise TypeError(f"not a JSON value: {type(node).__name__}")


def is_container(node: object) -> bool:
    return node_kind(node) in {NodeKind.ARRAY, NodeKind.OBJECT}


def scalar_text(node: object) -> str:
    """Return display text for a scalar, using JSON spelling except for raw strings."""
    kind = node_kind(node)
    if kind is NodeKind.STRING:
        return node
    if kind in {NodeKind.NULL, NodeKind.BOOL, NodeKind.NUMBER}:
        return json.dumps(node)
    raise TypeError(f"{kind.value} is not a scalar")


def child_count(node: object) -> int:
    """Return the number of selectable children (0 for scalars)."""
    kind = node_kind(node)
    if kind is NodeKind.ARRAY or kind is NodeKind.OBJECT:
        return len(node)
    return 0


def child_label(node: object, index: int) -> str:
    """Return the label of child ``index``.

    Arrays label children by position and objects by key. A scalar only
    accepts ``index == 0`` and is labelled with its own text.
    """
    kind = node_kind(node)
    if kind is NodeKind.ARRAY:
        if not 0 <= index < len(node):
            raise IndexError(f"array index out of range: {index}")
        return str(index)
    if kind is NodeKind.OBJECT:
        if not 0 <= index < len(node):
            raise IndexError(f"object index out of range: {index}")
        return next(islice(node, index, None))
    if index != 0:
        raise IndexError(f"scalar index out of range: {index}")
    return scalar_text(node)


def child_at(node: object, index: int) -> tuple[str, object]:
    """Return ``(label, child)`` for child ``index``.

    For a scalar, ``index`` 0 yields the scalar's text paired with the scalar
    itself, which is how a leaf is shown as its own single-row panel.
    """
    kind = node_kind(node)
    if kind is NodeKind.ARRAY:
        if not 0 <= index < len(node):
            raise IndexError(f"array index out of range: {index}")
        return str(index), node[index]
    if kind is NodeKind.OBJECT:
        if not 0 <= index < len(node):
            raise IndexError(f"object index out of range: {index}")
        return next(islice(node.items(), index, None))
    if index != 0:
        raise IndexError(f"scalar index out of range: {index}")
    return scalar_text(node), node


def iter_children(node: object) -> Iterator[tuple[str, object]]:
    """Yield ``(label, child)`` pairs in container order."""
    kind = node_kind(node)
    if kind is NodeKind.ARRAY:
        for idx, child in enumerate(node):
            yield str(idx), child
    elif kind is NodeKind.OBJECT:
        yield from node.items()


def node_lines(node: object) -> list[str]:
    """Return one display line per child, or the scalar's text as a single line."""
    if is_container(node):
        return [label for label, _child in iter_children(node)]
    return [scalar_text(node)]


def _reject_constant(name: str) -> object:
    raise ValueError(f"{name} is not a valid JSON value")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number out of range: {text}")
    return value


def parse_document(text: str, source: str = "<string>") -> object:
    """Decode strict JSON text, raising ``DocumentError`` with a position on failure.

    The non-standard ``NaN``/``Infinity`` literals and floats that overflow to
    infinity are rejected, as are integers longer than the interpreter's
    digit limit.
    """
    try:
        return json.loads(
            text,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except json.JSONDecodeError as exc:
        raise DocumentError(
            source,
            f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}",
        ) from exc
    except RecursionError as exc:
        raise DocumentError(source, "document is nested too deeply") from exc
    except ValueError as exc:
        raise DocumentError(source, f"invalid JSON: {exc}") from exc


def load_document(path: Path) -> object:
    """Read and decode the document at ``path``."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise DocumentError(str(path), exc.strerror or str(exc)) from exc
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise DocumentError(str(path), f"not valid UTF-8 (byte {exc.start})") from exc
    return parse_document(text, str(path))
