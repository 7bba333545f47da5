"""Naming and access helpers for the untyped values runtypes inspect."""
from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, Final


class _Undefined:
    """Marker for an absent field, distinct from ``None``."""

    __slots__ = ()
    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "undefined"


undefined: Final = _Undefined()


def is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def type_of(value: Any) -> str:
    if value is undefined:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Enum):
        return "symbol"
    if isinstance(value, list | tuple):
        return "array"
    if callable(value):
        return "function"
    return "object"


def is_finite_number_key(key: Any) -> bool:
    if is_number(key):
        return math.isfinite(key)
    if isinstance(key, str):
        try:
            return math.isfinite(float(key))
        except ValueError:
            return False
    return False


def has_field(value: Any, name: str) -> bool:
    if isinstance(value, Mapping):
        return name in value
    return hasattr(value, name)


def read_field(value: Any, name: str) -> Any:
    """Read ``name`` by key from mappings and by attribute from anything else.

    Absent fields read as :data:`undefined`.
    """
    if isinstance(value, Mapping):
        return value[name] if name in value else undefined
    return getattr(value, name, undefined)


def literal_repr(value: Any) -> str:
    if value is undefined:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(value, Enum):
        return f"{type(value).__name__}.{value.name}"
    return repr(value)


__all__ = [
    "has_field",
    "is_finite_number_key",
    "is_number",
    "literal_repr",
    "read_field",
    "type_of",
    "undefined",
]
