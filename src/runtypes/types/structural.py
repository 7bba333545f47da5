from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from runtypes.constants import (
    DICTIONARY_KEY_KINDS,
    TAG_ARRAY,
    TAG_DICTIONARY,
    TAG_PARTIAL,
    TAG_RECORD,
    TAG_TUPLE,
)
from runtypes.result import Failure, Result, Success
from runtypes.runtype import Runtype, create
from runtypes.show import show
from runtypes.values import has_field, is_finite_number_key, read_field, type_of, undefined

E = TypeVar("E")


def _array(element: Runtype[E], is_readonly: bool) -> Runtype[list[E]]:
    def validate(value: Any) -> Result[list[E]]:
        if not isinstance(value, list | tuple):
            return Failure(f"Expected array, but was {type_of(value)}")
        for index, item in enumerate(value):
            result = element.validate(item)
            if isinstance(result, Failure):
                return result.within(str(index))
        return Success(value)

    return create(
        validate,
        tag=TAG_ARRAY,
        element=element,
        is_readonly=is_readonly,
        as_readonly=lambda: _array(element, True),
    )


def Array(element: Runtype[E]) -> Runtype[list[E]]:  # noqa: N802
    """Construct a runtype for lists (or tuples) whose items all match ``element``."""
    return _array(element, False)


def Tuple(*components: Runtype[Any]) -> Runtype[tuple[Any, ...]]:  # noqa: N802
    def validate(value: Any) -> Result[tuple[Any, ...]]:
        if not isinstance(value, list | tuple):
            return Failure(f"Expected tuple to be an array, but was {type_of(value)}")
        if len(value) != len(components):
            return Failure(f"Expected an array of length {len(components)}, but was {len(value)}")
        for index, (component, item) in enumerate(zip(components, value)):
            result = component.validate(item)
            if isinstance(result, Failure):
                return result.within(str(index))
        return Success(value)

    return create(validate, tag=TAG_TUPLE, components=tuple(components))


def _frozen_fields(fields: Mapping[str, Runtype[Any]]) -> Mapping[str, Runtype[Any]]:
    for name in fields:
        if not isinstance(name, str):
            raise TypeError(f"Field names must be strings, got {type(name).__name__}")
    return MappingProxyType(dict(fields))


def _record(fields: Mapping[str, Runtype[Any]], is_readonly: bool) -> Runtype[dict[str, Any]]:
    # Keys that are not declared are left alone: records match structurally.
    def validate(value: Any) -> Result[dict[str, Any]]:
        if value is None or value is undefined:
            return Failure(f"Expected {show(runtype)}, but was {type_of(value)}")
        for name, field in fields.items():
            result = field.validate(read_field(value, name))
            if isinstance(result, Failure):
                return result.within(name)
        return Success(value)

    runtype = create(
        validate,
        tag=TAG_RECORD,
        fields=fields,
        is_readonly=is_readonly,
        as_readonly=lambda: _record(fields, True),
    )
    return runtype


def Record(fields: Mapping[str, Runtype[Any]]) -> Runtype[dict[str, Any]]:  # noqa: N802
    """Construct a record runtype from runtypes for its values.

    Mappings are read by key and any other object by attribute; a missing
    field reads as ``undefined``.
    """
    return _record(_frozen_fields(fields), False)


def Partial(fields: Mapping[str, Runtype[Any]]) -> Runtype[dict[str, Any]]:  # noqa: N802
    frozen = _frozen_fields(fields)

    def validate(value: Any) -> Result[dict[str, Any]]:
        if value is None or value is undefined:
            return Failure(f"Expected {show(runtype)}, but was {type_of(value)}")
        for name, field in frozen.items():
            if not has_field(value, name):
                continue
            result = field.validate(read_field(value, name))
            if isinstance(result, Failure):
                return result.within(name)
        return Success(value)

    runtype = create(validate, tag=TAG_PARTIAL, fields=frozen)
    return runtype


def Dictionary(value: Runtype[E], key: str = "string") -> Runtype[dict[Any, E]]:  # noqa: N802
    """Construct a runtype for mappings with uniformly typed values.

    ``key`` is ``"string"`` (every key is a ``str``) or ``"number"`` (every
    key is a finite number, or a string spelling one).
    """
    if key not in DICTIONARY_KEY_KINDS:
        raise ValueError(f"Dictionary key kind must be one of {', '.join(DICTIONARY_KEY_KINDS)}, got {key!r}")

    def validate(candidate: Any) -> Result[dict[Any, E]]:
        if not isinstance(candidate, Mapping):
            return Failure(f"Expected {show(runtype)}, but was {type_of(candidate)}")
        for item_key, item in candidate.items():
            if key == "string" and not isinstance(item_key, str):
                return Failure(
                    f"Expected dictionary key to be a string, but was {type_of(item_key)}",
                    str(item_key),
                )
            if key == "number" and not is_finite_number_key(item_key):
                return Failure(
                    f"Expected dictionary key to be a number, but was {type_of(item_key)}",
                    str(item_key),
                )
            result = value.validate(item)
            if isinstance(result, Failure):
                return result.within(str(item_key))
        return Success(candidate)

    runtype = create(validate, tag=TAG_DICTIONARY, key=key, value=value)
    return runtype


__all__ = [
    "Array",
    "Dictionary",
    "Partial",
    "Record",
    "Tuple",
]
