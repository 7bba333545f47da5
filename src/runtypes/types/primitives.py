from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from runtypes.constants import (
    NEVER_MESSAGE,
    TAG_BOOLEAN,
    TAG_FUNCTION,
    TAG_INSTANCEOF,
    TAG_LITERAL,
    TAG_NEVER,
    TAG_NUMBER,
    TAG_STRING,
    TAG_SYMBOL,
    TAG_UNKNOWN,
)
from runtypes.result import Failure, Result, Success
from runtypes.runtype import Runtype, create
from runtypes.values import _Undefined, literal_repr, type_of, undefined

L = TypeVar("L")
V = TypeVar("V")

LiteralBase = None | bool | int | float | str | Enum | _Undefined

_LITERAL_TYPES = (type(None), bool, int, float, str, Enum, _Undefined)


def _of_kind(kind: str) -> Runtype[Any]:
    def validate(value: Any) -> Result[Any]:
        actual = type_of(value)
        if actual != kind:
            return Failure(f"Expected {kind}, but was {actual}")
        return Success(value)

    return create(validate, tag=kind)


Unknown: Runtype[Any] = create(Success, tag=TAG_UNKNOWN)
"""Validates anything, but provides no new type information about it."""

Never: Runtype[Any] = create(lambda value: Failure(NEVER_MESSAGE), tag=TAG_NEVER)

# Kept as an alias for older callers.
Void = Unknown

Boolean: Runtype[bool] = _of_kind(TAG_BOOLEAN)
Number: Runtype[int | float] = _of_kind(TAG_NUMBER)
String: Runtype[str] = _of_kind(TAG_STRING)
Symbol: Runtype[Enum] = _of_kind(TAG_SYMBOL)
Function: Runtype[Any] = _of_kind(TAG_FUNCTION)


def _literal_equals(value: Any, expected: Any) -> bool:
    if expected is None or expected is undefined or isinstance(expected, bool | Enum):
        return value is expected
    return type_of(value) == type_of(expected) and value == expected


def Literal(value: L) -> Runtype[L]:  # noqa: N802
    """Construct a runtype for a single literal value.

    Comparison is strict: ``Literal(1)`` rejects ``True`` and ``"1"``, and
    ``Literal(float("nan"))`` never succeeds.
    """
    if not isinstance(value, _LITERAL_TYPES):
        raise TypeError(f"Literal values must be None, bool, number, str or Enum, got {type(value).__name__}")

    def validate(candidate: Any) -> Result[L]:
        if not _literal_equals(candidate, value):
            actual = literal_repr(candidate) if isinstance(candidate, _LITERAL_TYPES) else type_of(candidate)
            return Failure(f"Expected literal {literal_repr(value)}, but was {actual}")
        return Success(candidate)

    return create(validate, tag=TAG_LITERAL, value=value)


Undefined = Literal(undefined)
Null = Literal(None)


def InstanceOf(ctor: type[V]) -> Runtype[V]:  # noqa: N802
    if not isinstance(ctor, type):
        raise TypeError(f"InstanceOf expects a class, got {type(ctor).__name__}")

    def validate(value: Any) -> Result[V]:
        if not isinstance(value, ctor):
            return Failure(f"Expected {ctor.__name__}, but was {type(value).__name__}")
        return Success(value)

    return create(validate, tag=TAG_INSTANCEOF, ctor=ctor)


__all__ = [
    "Boolean",
    "Function",
    "InstanceOf",
    "Literal",
    "LiteralBase",
    "Never",
    "Null",
    "Number",
    "String",
    "Symbol",
    "Undefined",
    "Unknown",
    "Void",
]
