from __future__ import annotations

from typing import Any

from runtypes.reflect import (
    Reflect,
    ReflectArray,
    ReflectBrand,
    ReflectCallback,
    ReflectConstraint,
    ReflectDictionary,
    ReflectInstanceOf,
    ReflectIntersect,
    ReflectLiteral,
    ReflectPartial,
    ReflectPromise,
    ReflectRecord,
    ReflectTuple,
    ReflectUnion,
)
from runtypes.runtype import Runtype
from runtypes.values import literal_repr

RECURSION_MARKER = "..."


def show(subject: Reflect | Runtype[Any]) -> str:
    """Render a runtype (or its reflection) as a type expression."""
    refl = subject if isinstance(subject, Reflect) else subject.reflect
    return _show(refl, False, set())


def _show(refl: Reflect, needs_parens: bool, active: set[int]) -> str:
    marker = id(refl)
    if marker in active:
        return RECURSION_MARKER
    active.add(marker)
    try:
        return _render(refl, needs_parens, active)
    finally:
        active.discard(marker)


def _render(refl: Reflect, needs_parens: bool, active: set[int]) -> str:
    def parenthesize(text: str) -> str:
        return f"({text})" if needs_parens else text

    if isinstance(refl, ReflectLiteral):
        return literal_repr(refl.value)
    if isinstance(refl, ReflectArray):
        prefix = "readonly " if refl.is_readonly else ""
        return f"{prefix}{_show(refl.element, True, active)}[]"
    if isinstance(refl, ReflectDictionary):
        return f"{{ [_: {refl.key}]: {_show(refl.value, False, active)} }}"
    if isinstance(refl, ReflectRecord):
        if not refl.fields:
            return "{}"
        prefix = "readonly " if refl.is_readonly else ""
        members = " ".join(
            f"{prefix}{name}: {_show(field, False, active)};" for name, field in refl.fields.items()
        )
        return f"{{ {members} }}"
    if isinstance(refl, ReflectPartial):
        if not refl.fields:
            return "{}"
        members = " ".join(f"{name}?: {_show(field, False, active)};" for name, field in refl.fields.items())
        return f"{{ {members} }}"
    if isinstance(refl, ReflectTuple):
        return f"[{', '.join(_show(component, False, active) for component in refl.components)}]"
    if isinstance(refl, ReflectUnion):
        return parenthesize(" | ".join(_show(alternative, True, active) for alternative in refl.alternatives))
    if isinstance(refl, ReflectIntersect):
        return parenthesize(" & ".join(_show(intersectee, True, active) for intersectee in refl.intersectees))
    if isinstance(refl, ReflectConstraint):
        return refl.name or _show(refl.underlying, needs_parens, active)
    if isinstance(refl, ReflectInstanceOf):
        return refl.ctor.__name__
    if isinstance(refl, ReflectBrand):
        return _show(refl.entity, needs_parens, active)
    if isinstance(refl, ReflectCallback):
        *params, returns = refl.args
        rendered = ", ".join(_show(param, False, active) for param in params)
        return parenthesize(f"({rendered}) => {_show(returns, True, active)}")
    if isinstance(refl, ReflectPromise):
        return f"Promise<{_show(refl.type, False, active)}>"
    return refl.tag


__all__ = [
    "RECURSION_MARKER",
    "show",
]
