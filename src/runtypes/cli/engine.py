from __future__ import annotations

import importlib
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from runtypes.config import CliConfig
from runtypes.result import Failure
from runtypes.runtype import Runtype

logger = logging.getLogger(__name__)

_JSON_SUFFIXES = {".json"}


@dataclass(slots=True, frozen=True)
class CheckOutcome:
    path: Path
    ok: bool
    message: str | None = None
    key: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"path": str(self.path), "ok": self.ok}
        if self.message is not None:
            payload["message"] = self.message
        if self.key is not None:
            payload["key"] = self.key
        return payload

    def render(self) -> str:
        if self.ok:
            return f"OK {self.path}"
        location = f"{self.key}: " if self.key else ""
        return f"FAIL {self.path}: {location}{self.message}"


def resolve_target(target: str, config: CliConfig | None = None) -> Runtype[Any]:
    """Import the runtype named by ``package.module:attribute`` or a configured alias."""
    reference = config.schemas.get(target, target) if config is not None else target
    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(f"Runtype target must look like 'package.module:attribute', got {reference!r}")

    module = importlib.import_module(module_name)
    resolved: Any = module
    for part in attribute.split("."):
        try:
            resolved = getattr(resolved, part)
        except AttributeError as exc:
            raise ValueError(f"{module_name!r} has no attribute {attribute!r}") from exc
    if not isinstance(resolved, Runtype):
        raise ValueError(f"{reference!r} is not a runtype (got {type(resolved).__name__})")
    logger.debug("resolved %s to %s runtype", reference, resolved.tag)
    return resolved


def load_document(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in _JSON_SUFFIXES:
        return json.loads(text)

    import yaml

    return yaml.safe_load(text)


def check_documents(runtype: Runtype[Any], paths: list[Path]) -> list[CheckOutcome]:
    outcomes: list[CheckOutcome] = []
    for path in paths:
        result = runtype.validate(load_document(path))
        if isinstance(result, Failure):
            outcomes.append(CheckOutcome(path=path, ok=False, message=result.message, key=result.key))
        else:
            outcomes.append(CheckOutcome(path=path, ok=True))
    logger.debug("checked %d documents, %d failed", len(outcomes), sum(not o.ok for o in outcomes))
    return outcomes


__all__ = [
    "CheckOutcome",
    "check_documents",
    "load_document",
    "resolve_target",
]
