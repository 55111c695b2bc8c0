"""Property path accessors.

Paths are dot-delimited with optional bracket indexes: ``address.city``,
``phones[0].number``. Reads never raise for an unreachable path; writes
create the intermediate containers they need. Strings are values, not
containers: ``get_path("abc", "0")`` is MISSING.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any

_INDEX_RE = re.compile(r"\[(\w+)\]")
_SCALARS = (str, bytes, bytearray, int, float, complex, bool, type(None))


class _Missing:
    """Marker for a value that does not exist (as opposed to None)."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<MISSING>"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def normalize_path(path: str) -> list[str]:
    """Split a path into segments, converting ``a[0]`` into ``a.0``.

    Only non-negative indexes are recognized. ``a[-1]`` stays a single
    ``"a[-1]"`` segment, which reads as a plain key.
    """
    path = _INDEX_RE.sub(r".\1", path)
    path = path.removeprefix(".")
    return path.split(".")


def _child(container: Any, segment: str) -> Any:
    """Return container[segment] (key, index or attribute), or MISSING."""
    if isinstance(container, Mapping):
        return container[segment] if segment in container else MISSING
    if isinstance(container, (list, tuple)):
        if segment.isdigit() and int(segment) < len(container):
            return container[int(segment)]
        return MISSING
    if isinstance(container, _SCALARS) or container is MISSING:
        return MISSING
    try:
        return getattr(container, segment)
    except AttributeError:
        return MISSING


def _is_container(value: Any) -> bool:
    if isinstance(value, (MutableMapping, list)):
        return True
    if isinstance(value, _SCALARS) or isinstance(value, tuple) or value is MISSING:
        return False
    return hasattr(value, "__dict__") or hasattr(value, "__slots__")


def _assign(container: Any, segment: str, value: Any) -> None:
    if isinstance(container, MutableMapping):
        container[segment] = value
    elif isinstance(container, list):
        index = int(segment)
        if index >= len(container):
            container.extend([None] * (index + 1 - len(container)))
        container[index] = value
    else:
        setattr(container, segment, value)


def _new_container(next_segment: str) -> dict[str, Any] | list[Any]:
    return [] if next_segment.isdigit() else {}


def get_path(obj: Any, path: str, default: Any = MISSING) -> Any:
    """Get the value at ``path`` inside ``obj``.

    Args:
        obj: Mapping, sequence or object to read from.
        path: Dot/bracket property path.
        default: Returned when any level of the path is unreachable.

    Returns:
        The value found, or ``default``.
    """
    current = obj
    for segment in normalize_path(path):
        current = _child(current, segment)
        if current is MISSING:
            return default
    return current


def set_path(obj: Any, path: str, value: Any) -> Any:
    """Set ``value`` at ``path`` inside ``obj``, creating missing levels.

    A list is created when the next segment is numeric, a dict otherwise.
    Scalars found at an intermediate level are replaced. Sibling properties
    are left untouched.

    Returns:
        The root, which is a new container when ``obj`` is None.
    """
    segments = normalize_path(path)
    root = obj if _is_container(obj) else _new_container(segments[0])

    current = root
    for segment, next_segment in zip(segments, segments[1:]):
        child = _child(current, segment)
        if not _is_container(child):
            child = _new_container(next_segment)
            _assign(current, segment, child)
        current = child

    _assign(current, segments[-1], value)
    return root


def aggregate_paths(paths: Iterable[str], obj: Any) -> dict[str, Any]:
    """Build a dict holding each of ``paths`` read from ``obj``.

    The shape of every path is preserved: ``["a.b", "c"]`` gives
    ``{"a": {"b": ...}, "c": ...}``. Unreachable paths are set to None.
    """
    result: dict[str, Any] = {}
    for path in paths:
        set_path(result, path, get_path(obj, path, None))
    return result
