from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from runtypes.errors import ValidationError
from runtypes.result import Failure, Result

if TYPE_CHECKING:
    from runtypes.reflect import Reflect

A = TypeVar("A")
B = TypeVar("B")

Validator = Callable[[Any], "Result[Any]"]

logger = logging.getLogger(__name__)


class Runtype(Generic[A]):
    """Determines at runtime whether a value conforms to a type specification.

    A runtype is a ``validate`` closure plus the static data describing its
    shape (at least ``tag``). Everything else on this class is derived from
    those two pieces, so every combinator shares one interface. Build
    instances with :func:`create`, not by subclassing.
    """

    tag: str

    def __init__(self, validate: Validator, data: dict[str, Any]) -> None:
        self._validate = validate
        self._reflection: Reflect | None = None
        self.__dict__.update(data)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup misses; placeholders built by Lazy
        # forward to the runtype they resolve to.
        resolve = self.__dict__.get("_resolve")
        if resolve is None or name.startswith("__"):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return getattr(resolve(), name)

    def __setattr__(self, name: str, value: Any) -> None:
        # Public fields describe the shape and are fixed once built.
        if not name.startswith("_"):
            raise AttributeError(f"Runtype attribute {name!r} is read-only")
        super().__setattr__(name, value)

    def validate(self, value: Any) -> Result[A]:
        """Validate ``value`` and return a result; never raises."""
        return self._validate(value)

    def check(self, value: Any) -> A:
        """Return ``value`` if it conforms, otherwise raise :class:`ValidationError`."""
        result = self._validate(value)
        if isinstance(result, Failure):
            logger.debug("check failed against %s at %s: %s", self.tag, result.key, result.message)
            raise ValidationError.from_failure(result)
        return result.value

    def guard(self, value: Any) -> bool:
        return self._validate(value).success

    def __call__(self, value: Any) -> A:
        return self.check(value)

    @property
    def reflect(self) -> Reflect:
        if self._reflection is None:
            from runtypes.reflect import reflect_runtype

            self._reflection = reflect_runtype(self)
        return self._reflection

    def Or(self, other: Runtype[B]) -> Runtype[A | B]:  # noqa: N802
        from runtypes.types.logical import Union

        return Union(self, other)

    def And(self, other: Runtype[B]) -> Runtype[Any]:  # noqa: N802
        from runtypes.types.logical import Intersect

        return Intersect(self, other)

    def with_constraint(
        self,
        constraint: Callable[[A], bool | str],
        *,
        name: str | None = None,
        args: Any = None,
    ) -> Runtype[A]:
        """Refine this runtype with a predicate.

        The predicate returns ``True`` when satisfied, and ``False`` or an
        error message when not. ``name`` shows up in diagnostics and
        reflection; ``args`` is carried for reflection only.
        """
        from runtypes.types.refinement import Constraint

        return Constraint(self, constraint, name=name, args=args)

    def with_guard(
        self,
        guard: Callable[[A], bool],
        *,
        name: str | None = None,
        args: Any = None,
    ) -> Runtype[Any]:
        from runtypes.types.refinement import Constraint

        return Constraint(self, guard, name=name, args=args)

    def with_brand(self, brand: str) -> Runtype[A]:
        from runtypes.types.refinement import Brand

        return Brand(brand, self)

    def __repr__(self) -> str:
        from runtypes.show import show

        return f"<Runtype {show(self)}>"


def create(validate: Validator, **data: Any) -> Runtype[Any]:
    """Build a runtype from its validation closure and its tag data."""
    return Runtype(validate, data)


__all__ = [
    "Runtype",
    "Validator",
    "create",
]
