from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from runtypes.result import Result
from runtypes.runtype import Runtype, create

A = TypeVar("A")

logger = logging.getLogger(__name__)


def Lazy(delayed: Callable[[], Runtype[A]]) -> Runtype[A]:  # noqa: N802
    """Construct a possibly-recursive runtype.

    ``delayed`` runs at most once, the first time the runtype is validated
    or one of its fields is read. Every public field of the result except
    ``tag`` is then copied onto the placeholder; ``tag`` keeps forwarding.

        Tree = Lazy(lambda: Record({"value": Number, "children": Array(Tree)}))
    """
    forced: list[Runtype[A]] = []

    def resolve() -> Runtype[A]:
        if not forced:
            target = delayed()
            forced.append(target)
            for name, field in vars(target).items():
                if name != "tag" and not name.startswith("_"):
                    placeholder.__dict__[name] = field
            logger.debug("resolved lazy runtype to %s", target.tag)
        return forced[0]

    def validate(value: Any) -> Result[A]:
        return resolve().validate(value)

    placeholder = create(validate, _resolve=resolve)
    return placeholder


__all__ = [
    "Lazy",
]
