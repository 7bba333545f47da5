from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from runtypes.constants import TAG_BRAND, TAG_CONSTRAINT
from runtypes.result import Failure, Result
from runtypes.runtype import Runtype, create
from runtypes.types.primitives import Unknown

A = TypeVar("A")

ConstraintCheck = Callable[[Any], "bool | str"]


def Constraint(  # noqa: N802
    underlying: Runtype[A],
    constraint: ConstraintCheck,
    *,
    name: str | None = None,
    args: Any = None,
) -> Runtype[A]:
    """Refine ``underlying`` with a predicate over already-validated values.

    A string returned by ``constraint`` becomes the failure message; any
    other falsy result fails with a generic message naming ``name``.
    """

    def validate(value: Any) -> Result[A]:
        result = underlying.validate(value)
        if isinstance(result, Failure):
            return result
        verdict = constraint(result.value)
        if isinstance(verdict, str):
            return Failure(verdict)
        if not verdict:
            return Failure(f"Failed {name or 'constraint'} check")
        return result

    return create(
        validate,
        tag=TAG_CONSTRAINT,
        underlying=underlying,
        constraint=constraint,
        name=name,
        args=args,
    )


def Guard(  # noqa: N802
    guard: Callable[[Any], bool],
    *,
    name: str | None = None,
    args: Any = None,
) -> Runtype[Any]:
    return Constraint(Unknown, guard, name=name, args=args)


def Brand(brand: str, entity: Runtype[A]) -> Runtype[A]:  # noqa: N802
    """Mark ``entity`` with a nominal ``brand``; validation is unchanged."""
    if not isinstance(brand, str) or not brand:
        raise ValueError("Brand requires a non-empty string")
    return create(entity.validate, tag=TAG_BRAND, brand=brand, entity=entity)


__all__ = [
    "Brand",
    "Constraint",
    "ConstraintCheck",
    "Guard",
]
