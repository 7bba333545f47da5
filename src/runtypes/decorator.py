from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar, cast

from runtypes.errors import ValidationError
from runtypes.result import Failure
from runtypes.runtype import Runtype

T = TypeVar("T")

_BOUND_PARAMETER_NAMES = ("self", "cls")


def _plan(
    fn: Callable[..., Any],
    signature: inspect.Signature,
    runtypes: tuple[Runtype[Any], ...],
    by_name: dict[str, Runtype[Any]],
) -> list[tuple[str, int, Runtype[Any]]]:
    parameters = list(signature.parameters.values())
    if parameters and parameters[0].name in _BOUND_PARAMETER_NAMES:
        parameters = parameters[1:]
    if len(runtypes) > len(parameters):
        raise TypeError(
            f"{fn.__qualname__} takes {len(parameters)} checkable parameters, but {len(runtypes)} runtypes were given"
        )
    plan = [(parameter.name, index, runtype) for index, (parameter, runtype) in enumerate(zip(parameters, runtypes))]
    positions = {parameter.name: index for index, parameter in enumerate(parameters)}
    for name, runtype in by_name.items():
        if name not in positions:
            raise TypeError(f"{fn.__qualname__} has no parameter named {name!r}")
        if any(planned == name for planned, _, _ in plan):
            raise TypeError(f"Parameter {name!r} of {fn.__qualname__} is checked twice")
        plan.append((name, positions[name], runtype))
    return plan


def checked(*runtypes: Runtype[Any], **by_name: Runtype[Any]) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Check a function's arguments on every call.

    Positional runtypes apply to the leading parameters (a leading ``self``
    or ``cls`` is skipped); keyword runtypes apply to the parameter of that
    name. Arguments left to their defaults are not checked.

        @checked(String, limit=Number)
        def search(query, offset=0, limit=10): ...
    """

    def decorator(fn: Callable[..., T]) -> Callable[..., T]:
        signature = inspect.signature(fn)
        plan = _plan(fn, signature, runtypes, by_name)

        def check_call(args: tuple[Any, ...], kwargs: dict[str, Any]) -> inspect.BoundArguments:
            bound = signature.bind(*args, **kwargs)
            for name, index, runtype in plan:
                if name not in bound.arguments:
                    continue
                result = runtype.validate(bound.arguments[name])
                if isinstance(result, Failure):
                    raise ValidationError(f"{fn.__name__}, argument #{index}: {result.message}", result.key)
                bound.arguments[name] = result.value
            return bound

        if inspect.iscoroutinefunction(fn):
            async_fn = cast(Callable[..., Awaitable[T]], fn)

            @wraps(async_fn)
            async def async_wrapper(*args: Any, **kwargs: Any) -> T:
                bound = check_call(args, kwargs)
                return await async_fn(*bound.args, **bound.kwargs)

            return cast(Callable[..., T], async_wrapper)

        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            bound = check_call(args, kwargs)
            return fn(*bound.args, **bound.kwargs)

        return wrapper

    return decorator


__all__ = [
    "checked",
]
