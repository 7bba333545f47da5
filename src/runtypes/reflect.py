"""Introspectable shadow of a runtype tree.

Each runtype tag maps to exactly one :class:`Reflect` variant. Children are
read through the child runtype's own cached ``reflect``, so a recursive
runtype (built with ``Lazy``) reflects into a cyclic graph instead of
recursing forever. :meth:`Reflect.to_dict` cuts such cycles when it
flattens the graph.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar

from runtypes.constants import (
    TAG_ARRAY,
    TAG_BOOLEAN,
    TAG_BRAND,
    TAG_CALLBACK,
    TAG_CONSTRAINT,
    TAG_DICTIONARY,
    TAG_FUNCTION,
    TAG_INSTANCEOF,
    TAG_INTERSECT,
    TAG_LITERAL,
    TAG_NEVER,
    TAG_NUMBER,
    TAG_PARTIAL,
    TAG_PROMISE,
    TAG_RECORD,
    TAG_STRING,
    TAG_SYMBOL,
    TAG_TUPLE,
    TAG_UNION,
    TAG_UNKNOWN,
    TAG_VOID,
)
from runtypes.values import undefined

if TYPE_CHECKING:
    from runtypes.runtype import Runtype

Encoder = Callable[["Reflect"], dict[str, Any]]


class Reflect:
    tag: ClassVar[str]

    __slots__ = ("_runtype",)

    def __init__(self, runtype: Runtype[Any]) -> None:
        self._runtype = runtype

    @property
    def runtype(self) -> Runtype[Any]:
        return self._runtype

    def to_dict(self) -> dict[str, Any]:
        return _encode(self, set())

    def _describe(self, encode: Encoder) -> dict[str, Any]:
        return {}

    def __repr__(self) -> str:
        return f"<Reflect {self.tag}>"


class ReflectUnknown(Reflect):
    __slots__ = ()
    tag = TAG_UNKNOWN


class ReflectNever(Reflect):
    __slots__ = ()
    tag = TAG_NEVER


class ReflectVoid(Reflect):
    __slots__ = ()
    tag = TAG_VOID


class ReflectBoolean(Reflect):
    __slots__ = ()
    tag = TAG_BOOLEAN


class ReflectNumber(Reflect):
    __slots__ = ()
    tag = TAG_NUMBER


class ReflectString(Reflect):
    __slots__ = ()
    tag = TAG_STRING


class ReflectSymbol(Reflect):
    __slots__ = ()
    tag = TAG_SYMBOL


class ReflectFunction(Reflect):
    __slots__ = ()
    tag = TAG_FUNCTION


class ReflectLiteral(Reflect):
    __slots__ = ()
    tag = TAG_LITERAL

    @property
    def value(self) -> Any:
        return self._runtype.value

    def _describe(self, encode: Encoder) -> dict[str, Any]:
        value = self.value
        if value is undefined or isinstance(value, Enum):
            value = repr(value)
        return {"value": value}


class ReflectArray(Reflect):
    __slots__ = ()
    tag = TAG_ARRAY

    @property
    def element(self) -> Reflect:
        return self._runtype.element.reflect

    @property
    def is_readonly(self) -> bool:
        return bool(self._runtype.is_readonly)

    def _describe(self, encode: Encoder) -> dict[str, Any]:
        return {"element": encode(self.element), "is_readonly": self.is_readonly}


class ReflectRecord(Reflect):
    __slots__ = ()
    tag = TAG_RECORD

    @property
    def fields(self) -> Mapping[str, Reflect]:
        return MappingProxyType({name: field.reflect for name, field in self._runtype.fields.items()})

    @property
    def is_readonly(self) -> bool:
        return bool(self._runtype.is_readonly)

    def _describe(self, encode: Encoder) -> dict[str, Any]:
        return {
            "fields": {name: encode(field) for name, field in self.fields.items()},
            "is_readonly": self.is_readonly,
        }


class ReflectPartial(Reflect):
    __slots__ = ()
    tag = TAG_PARTIAL

    @property
    def fields(self) -> Mapping[str, Reflect]:
        return MappingProxyType({name: field.reflect for name, field in self._runtype.fields.items()})

    def _describe(self, encode: Encoder) -> dict[str, Any]:
        return {"fields": {name: encode(field) for name, field in self.fields.items()}}


class ReflectDictionary(Reflect):
    __slots__ = ()
    tag = TAG_DICTIONARY

    @property
    def key(self) -> str:
        return self._runtype.key

    @property
    def value(self) -> Reflect:
        return self._runtype.value.reflect

    def _describe(self, encode: Encoder) -> dict[str, Any]:
        return {"key": self.key, "value": encode(self.value)}


class ReflectTuple(Reflect):
    __slots__ = ()
    tag = TAG_TUPLE

    @property
    def components(self) -> tuple[Reflect, ...]:
        return tuple(component.reflect for component in self._runtype.components)

    def _describe(self, encode: Encoder) -> dict[str, Any]:
        return {"components": [encode(component) for component in self.components]}


class ReflectUnion(Reflect):
    __slots__ = ()
    tag = TAG_UNION

    @property
    def alternatives(self) -> tuple[Reflect, ...]:
        return tuple(alternative.reflect for alternative in self._runtype.alternatives)

    def _describe(self, encode: Encoder) -> dict[str, Any]:
        return {"alternatives": [encode(alternative) for alternative in self.alternatives]}


class ReflectIntersect(Reflect):
    __slots__ = ()
    tag = TAG_INTERSECT

    @property
    def intersectees(self) -> tuple[Reflect, ...]:
        return tuple(intersectee.reflect for intersectee in self._runtype.intersectees)

    def _describe(self, encode: Encoder) -> dict[str, Any]:
        return {"intersectees": [encode(intersectee) for intersectee in self.intersectees]}


class ReflectConstraint(Reflect):
    __slots__ = ()
    tag = TAG_CONSTRAINT

    @property
    def underlying(self) -> Reflect:
        return self._runtype.underlying.reflect

    @property
    def constraint(self) -> Callable[[Any], bool | str]:
        return self._runtype.constraint

    @property
    def name(self) -> str | None:
        return self._runtype.name

    @property
    def args(self) -> Any:
        return self._runtype.args

    def _describe(self, encode: Encoder) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "underlying": encode(self.underlying),
            "constraint": getattr(self.constraint, "__qualname__", repr(self.constraint)),
        }
        if self.name is not None:
            payload["name"] = self.name
        if self.args is not None:
            payload["args"] = self.args
        return payload


class ReflectInstanceOf(Reflect):
    __slots__ = ()
    tag = TAG_INSTANCEOF

    @property
    def ctor(self) -> type:
        return self._runtype.ctor

    def _describe(self, encode: Encoder) -> dict[str, Any]:
        return {"ctor": f"{self.ctor.__module__}.{self.ctor.__qualname__}"}


class ReflectBrand(Reflect):
    __slots__ = ()
    tag = TAG_BRAND

    @property
    def brand(self) -> str:
        return self._runtype.brand

    @property
    def entity(self) -> Reflect:
        return self._runtype.entity.reflect

    def _describe(self, encode: Encoder) -> dict[str, Any]:
        return {"brand": self.brand, "entity": encode(self.entity)}


class ReflectCallback(Reflect):
    __slots__ = ()
    tag = TAG_CALLBACK

    @property
    def args(self) -> tuple[Reflect, ...]:
        return tuple(arg.reflect for arg in self._runtype.args)

    def _describe(self, encode: Encoder) -> dict[str, Any]:
        return {"args": [encode(arg) for arg in self.args]}


class ReflectPromise(Reflect):
    __slots__ = ()
    tag = TAG_PROMISE

    @property
    def type(self) -> Reflect:
        return self._runtype.type.reflect

    def _describe(self, encode: Encoder) -> dict[str, Any]:
        return {"type": encode(self.type)}


_VARIANTS: dict[str, type[Reflect]] = {
    variant.tag: variant
    for variant in (
        ReflectUnknown,
        ReflectNever,
        ReflectVoid,
        ReflectBoolean,
        ReflectNumber,
        ReflectString,
        ReflectSymbol,
        ReflectLiteral,
        ReflectArray,
        ReflectRecord,
        ReflectPartial,
        ReflectDictionary,
        ReflectTuple,
        ReflectUnion,
        ReflectIntersect,
        ReflectFunction,
        ReflectConstraint,
        ReflectInstanceOf,
        ReflectBrand,
        ReflectCallback,
        ReflectPromise,
    )
}


def reflect_runtype(runtype: Runtype[Any]) -> Reflect:
    tag = runtype.tag
    variant = _VARIANTS.get(tag)
    if variant is None:
        raise ValueError(f"Unsupported runtype tag: {tag!r}")
    return variant(runtype)


def _encode(node: Reflect, active: set[int]) -> dict[str, Any]:
    marker = id(node)
    if marker in active:
        return {"tag": node.tag, "recursive": True}
    active.add(marker)
    try:
        return {"tag": node.tag, **node._describe(lambda child: _encode(child, active))}
    finally:
        active.discard(marker)


__all__ = [
    "Reflect",
    "ReflectArray",
    "ReflectBoolean",
    "ReflectBrand",
    "ReflectCallback",
    "ReflectConstraint",
    "ReflectDictionary",
    "ReflectFunction",
    "ReflectInstanceOf",
    "ReflectIntersect",
    "ReflectLiteral",
    "ReflectNever",
    "ReflectNumber",
    "ReflectPartial",
    "ReflectPromise",
    "ReflectRecord",
    "ReflectString",
    "ReflectSymbol",
    "ReflectTuple",
    "ReflectUnion",
    "ReflectUnknown",
    "ReflectVoid",
    "reflect_runtype",
]
