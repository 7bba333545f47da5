from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class Success(Generic[T]):
    """A passed validation; ``value`` is the validated value."""

    value: T

    @property
    def success(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"success": True, "value": self.value}


@dataclass(slots=True, frozen=True)
class Failure:
    """A failed validation.

    ``key`` locates the failure inside a composite value as a dotted path,
    outermost segment first (``"items.0.name"``).
    """

    message: str
    key: str | None = None

    @property
    def success(self) -> bool:
        return False

    def within(self, key: str) -> Failure:
        """Return this failure re-rooted under ``key``."""
        nested = key if self.key is None else f"{key}.{self.key}"
        return Failure(self.message, nested)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"success": False, "message": self.message}
        if self.key is not None:
            payload["key"] = self.key
        return payload


Result = Success[T] | Failure


__all__ = [
    "Failure",
    "Result",
    "Success",
]
