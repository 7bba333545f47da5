from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar, cast

from runtypes.errors import ValidationError
from runtypes.result import Failure
from runtypes.runtype import Runtype

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Contract:
    """Argument and return-value enforcement for callables.

    ``Contract(A, B, Z)`` checks the first two positional arguments against
    ``A`` and ``B`` and the return value against ``Z``.
    """

    __slots__ = ("argument_types", "return_type")

    def __init__(self, *runtypes: Runtype[Any]) -> None:
        if not runtypes:
            raise ValueError("Contract requires at least a return runtype")
        self.argument_types: tuple[Runtype[Any], ...] = tuple(runtypes[:-1])
        self.return_type: Runtype[Any] = runtypes[-1]

    def enforce(self, fn: Callable[..., T]) -> Callable[..., T]:
        if inspect.iscoroutinefunction(fn):
            async_fn = cast(Callable[..., Awaitable[T]], fn)

            @wraps(async_fn)
            async def async_wrapper(*args: Any, **kwargs: Any) -> T:
                checked_args = self._check_arguments(async_fn, args)
                return self._check_return(async_fn, await async_fn(*checked_args, **kwargs))

            return cast(Callable[..., T], async_wrapper)

        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            checked_args = self._check_arguments(fn, args)
            return self._check_return(fn, fn(*checked_args, **kwargs))

        return wrapper

    def _check_arguments(self, fn: Callable[..., Any], args: tuple[Any, ...]) -> tuple[Any, ...]:
        expected = len(self.argument_types)
        if len(args) < expected:
            message = f"Expected {expected} arguments but only received {len(args)}"
            logger.debug("contract for %s rejected call: %s", _name_of(fn), message)
            raise ValidationError(message)
        checked: list[Any] = []
        for index, (runtype, argument) in enumerate(zip(self.argument_types, args)):
            result = runtype.validate(argument)
            if isinstance(result, Failure):
                logger.debug("contract for %s rejected argument #%d: %s", _name_of(fn), index, result.message)
                raise ValidationError.from_failure(result)
            checked.append(result.value)
        return (*checked, *args[expected:])

    def _check_return(self, fn: Callable[..., Any], value: Any) -> Any:
        result = self.return_type.validate(value)
        if isinstance(result, Failure):
            logger.debug("contract for %s rejected return value: %s", _name_of(fn), result.message)
            raise ValidationError.from_failure(result)
        return result.value


def _name_of(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


__all__ = [
    "Contract",
]
