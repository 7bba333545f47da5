from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from runtypes.constants import NO_MATCH_MESSAGE, TAG_INTERSECT, TAG_UNION
from runtypes.errors import ValidationError
from runtypes.result import Failure, Result, Success
from runtypes.runtype import Runtype, create
from runtypes.show import show
from runtypes.values import type_of

Z = TypeVar("Z")


def Union(*alternatives: Runtype[Any]) -> Runtype[Any]:  # noqa: N802
    """Construct a runtype accepting whatever any of ``alternatives`` accepts.

    Alternatives are tried in order and the first success is returned. The
    result also carries ``match``, which dispatches on the same
    alternatives::

        describe = Shape.match(
            lambda circle: f"r={circle['radius']}",
            lambda square: f"s={square['side']}",
        )
    """
    if not alternatives:
        raise ValueError("Union requires at least one alternative")

    def validate(value: Any) -> Result[Any]:
        nested: list[Failure] = []
        for alternative in alternatives:
            result = alternative.validate(value)
            if result.success:
                return result
            if result.key is not None:
                nested.append(result)
        # A single alternative that matched the outer shape pins the failure to its key.
        if len(nested) == 1:
            return nested[0]
        return Failure(f"Expected {show(runtype)}, but was {type_of(value)}")

    def match(*cases: Callable[[Any], Z]) -> Callable[[Any], Z]:
        if len(cases) != len(alternatives):
            raise ValueError(f"Expected {len(alternatives)} cases, one per alternative, got {len(cases)}")

        def matcher(value: Any) -> Z:
            for alternative, case in zip(alternatives, cases):
                result = alternative.validate(value)
                if result.success:
                    return case(result.value)
            raise ValidationError(NO_MATCH_MESSAGE)

        return matcher

    runtype = create(validate, tag=TAG_UNION, alternatives=tuple(alternatives), match=match)
    return runtype


def Intersect(*intersectees: Runtype[Any]) -> Runtype[Any]:  # noqa: N802
    if not intersectees:
        raise ValueError("Intersect requires at least one intersectee")

    def validate(value: Any) -> Result[Any]:
        for intersectee in intersectees:
            result = intersectee.validate(value)
            if isinstance(result, Failure):
                return result
        return Success(value)

    return create(validate, tag=TAG_INTERSECT, intersectees=tuple(intersectees))


__all__ = [
    "Intersect",
    "Union",
]
