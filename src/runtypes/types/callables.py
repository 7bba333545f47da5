from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Generator
from typing import Any, Generic, TypeVar

from runtypes.constants import TAG_CALLBACK, TAG_PROMISE
from runtypes.contract import Contract
from runtypes.result import Failure, Result, Success
from runtypes.runtype import Runtype, create
from runtypes.values import type_of

T = TypeVar("T")


def Callback(*runtypes: Runtype[Any]) -> Runtype[Callable[..., Any]]:  # noqa: N802
    """Construct a runtype for callables taking the leading runtypes and returning the last.

    A validated callable comes back wrapped in a :class:`Contract`, so its
    arguments and return value are checked on every later call.
    """
    contract = Contract(*runtypes)

    def validate(value: Any) -> Result[Callable[..., Any]]:
        if not callable(value):
            return Failure(f"Expected callback to be a function, but was {type_of(value)}")
        return Success(contract.enforce(value))

    return create(validate, tag=TAG_CALLBACK, args=tuple(runtypes))


class _CheckedAwaitable(Generic[T]):
    """Awaits the wrapped awaitable, then checks what it produced.

    No coroutine is created until this object is awaited, so results that are
    only guarded and then dropped leave nothing pending.
    """

    __slots__ = ("_awaitable", "_runtype")

    def __init__(self, awaitable: Awaitable[Any], runtype: Runtype[T]) -> None:
        self._awaitable = awaitable
        self._runtype = runtype

    def __await__(self) -> Generator[Any, None, T]:
        value = yield from self._awaitable.__await__()
        return self._runtype.check(value)


def Promise(runtype: Runtype[T]) -> Runtype[Awaitable[T]]:  # noqa: N802
    """Construct a runtype for awaitables whose eventual value matches ``runtype``.

    Validation returns immediately with an awaitable that awaits the original
    and then either returns the checked value or raises ``ValidationError``.
    """

    def validate(value: Any) -> Result[Awaitable[T]]:
        if not inspect.isawaitable(value):
            return Failure(f"Expected awaitable, but was {type_of(value)}")
        return Success(_CheckedAwaitable(value, runtype))

    return create(validate, tag=TAG_PROMISE, type=runtype)


__all__ = [
    "Callback",
    "Promise",
]
