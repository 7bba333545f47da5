from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from runtypes.constants import NO_MATCH_MESSAGE
from runtypes.errors import ValidationError
from runtypes.runtype import Runtype

Z = TypeVar("Z")

Case = tuple[Runtype[Any], Callable[[Any], Z]]


def match(*cases: Case[Z]) -> Callable[[Any], Z]:
    """Build a matcher from ``(runtype, handler)`` pairs, tried in order."""
    if not cases:
        raise ValueError("match requires at least one case")

    def matcher(value: Any) -> Z:
        for runtype, handler in cases:
            result = runtype.validate(value)
            if result.success:
                return handler(result.value)
        raise ValidationError(NO_MATCH_MESSAGE)

    return matcher


__all__ = [
    "Case",
    "match",
]
