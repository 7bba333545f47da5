from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from runtypes.constants import (
    CONFIG_FILENAME,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_LEVEL,
    LOG_LEVELS,
    OUTPUT_FORMATS,
)
from runtypes.errors import ValidationError
from runtypes.types import Dictionary, Literal, Partial, String, Union

_LOG_LEVEL = String.with_constraint(
    lambda level: level.upper() in LOG_LEVELS or f"Unknown log level {level!r}",
    name="log_level",
)

CONFIG_SCHEMA = Partial(
    {
        "schemas": Dictionary(String),
        "log_level": _LOG_LEVEL,
        "output": Union(*(Literal(fmt) for fmt in OUTPUT_FORMATS)),
    }
)


@dataclass(slots=True, frozen=True)
class CliConfig:
    schemas: dict[str, str] = field(default_factory=dict)
    log_level: str = DEFAULT_LOG_LEVEL
    output: str = "text"
    source_path: Path | None = None


def _load_yaml(path: Path) -> dict[str, Any]:
    import yaml

    loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file must be a mapping: {path}")
    return loaded


def load_config(
    path: Path | None = None,
    *,
    cwd: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> CliConfig:
    """Load CLI settings from ``path`` or ``runtypes.yaml`` in ``cwd``.

    A missing default file yields defaults; an explicit ``path`` must exist.
    ``RUNTYPES_LOG_LEVEL`` in ``environ`` overrides the file's log level.
    """
    if path is not None and not path.is_file():
        raise ValueError(f"Config file not found: {path}")
    candidate = path if path is not None else (cwd or Path.cwd()) / CONFIG_FILENAME
    source = candidate.resolve() if candidate.is_file() else None
    data = _load_yaml(candidate) if source is not None else {}

    try:
        CONFIG_SCHEMA.check(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid config {candidate}: {exc}") from exc

    env = os.environ if environ is None else environ
    log_level = env.get(ENV_LOG_LEVEL) or data.get("log_level") or DEFAULT_LOG_LEVEL
    log_level = log_level.upper()
    if not _LOG_LEVEL.guard(log_level):
        raise ValueError(f"Unknown log level {log_level!r} (from {ENV_LOG_LEVEL})")

    return CliConfig(
        schemas=dict(data.get("schemas", {})),
        log_level=log_level,
        output=data.get("output", "text"),
        source_path=source,
    )


__all__ = [
    "CONFIG_SCHEMA",
    "CliConfig",
    "load_config",
]
