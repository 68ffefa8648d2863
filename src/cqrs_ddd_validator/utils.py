"""
Shared helpers for keyed-structure access and dotted property paths.

These are pure-Python helpers with no dependency on rules or handlers.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel


class _Missing:
    """Sentinel type for a path that does not resolve."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

_INT_RE = re.compile(r"^-?\d+$")

# ---------------------------------------------------------------------------
# Structure detection / coercion
# ---------------------------------------------------------------------------


def is_keyed(value: Any) -> bool:
    """True for mappings, lists/tuples and plain objects with attributes."""
    if isinstance(value, Mapping | list | tuple | BaseModel):
        return True
    if isinstance(value, str | bytes | bytearray | type) or callable(value):
        return False
    return hasattr(value, "__dict__")


def to_keyed(value: Any) -> dict[Any, Any]:
    """
    Coerce a keyed structure to a ``dict``.

    - Mappings are shallow-copied.
    - Lists and tuples are keyed by position.
    - Pydantic models are dumped.
    - Other objects expose their public instance attributes.
    """
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, list | tuple):
        return dict(enumerate(value))
    if isinstance(value, BaseModel):
        return value.model_dump()
    if hasattr(value, "__dict__"):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    raise TypeError(f"Cannot access {type(value).__name__} by key")


# ---------------------------------------------------------------------------
# Path handling
# ---------------------------------------------------------------------------


def split_path(path: str | int) -> list[str]:
    """
    Split a property path into value-path segments.

    Non-negative integer keys form a single segment; strings are split on
    ``.``.
    """
    if isinstance(path, int) and not isinstance(path, bool) and path >= 0:
        return [str(path)]
    return str(path).split(".")


def get_value_by_path(data: Any, path: str | int) -> Any:
    """
    Resolve *path* against *data*, returning :data:`MISSING` when any
    segment cannot be found.

    ``"author.age"`` walks ``data["author"]["age"]``; numeric segments
    also address list positions and integer mapping keys.
    """
    if isinstance(path, int) and not isinstance(path, bool):
        return _get_segment(data, path)

    current = data
    for part in str(path).split("."):
        current = _get_segment(current, part)
        if current is MISSING:
            return MISSING
    return current


def path_exists(data: Any, path: str | int) -> bool:
    return get_value_by_path(data, path) is not MISSING


def _get_segment(container: Any, key: str | int) -> Any:
    if isinstance(container, Mapping):
        if key in container:
            return container[key]
        alternate = _alternate_key(key)
        if alternate is not None and alternate in container:
            return container[alternate]
        return MISSING

    if isinstance(container, list | tuple):
        index = key if isinstance(key, int) else _alternate_key(key)
        if isinstance(index, int) and -len(container) <= index < len(container):
            return container[index]
        return MISSING

    if isinstance(key, str) and not key.startswith("_") and is_keyed(container):
        return getattr(container, key, MISSING)

    return MISSING


def _alternate_key(key: str | int) -> str | int | None:
    """``0`` <-> ``"0"`` so numeric segments match either key type."""
    if isinstance(key, int):
        return str(key)
    if _INT_RE.match(key):
        return int(key)
    return None


def to_snake(name: str) -> str:
    """Convert PascalCase to snake_case (e.g. HasLength -> has_length)."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()
