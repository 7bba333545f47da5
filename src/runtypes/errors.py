from __future__ import annotations

from typing import Any

from runtypes.result import Failure


class ValidationError(ValueError):
    """Raised by ``Runtype.check`` when a value does not conform."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.key = key

    @classmethod
    def from_failure(cls, failure: Failure) -> ValidationError:
        return cls(failure.message, failure.key)

    def __str__(self) -> str:
        if self.key is None:
            return self.message
        return f"{self.key}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"message": self.message}
        if self.key is not None:
            payload["key"] = self.key
        return payload


__all__ = [
    "ValidationError",
]
