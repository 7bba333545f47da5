from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from runtypes.cli.engine import CheckOutcome, check_documents, resolve_target
from runtypes.config import CliConfig, load_config
from runtypes.constants import EXIT_INTERNAL_ERROR, EXIT_INVALID, EXIT_SUCCESS, LOG_LEVELS, OUTPUT_FORMATS
from runtypes.show import show


def _version_callback(value: bool) -> None:
    if value:
        from runtypes import __version__

        typer.echo(f"runtypes {__version__}")
        raise typer.Exit()


app = typer.Typer(add_completion=False, help="Validate data files against runtypes")


@app.callback(invoke_without_command=True)
def _main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit."
    ),
) -> None:
    pass


def _setup(config_path: Path | None, log_level: str | None = None) -> CliConfig:
    config = load_config(config_path)
    level = (log_level or config.log_level).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {log_level!r}. Use one of: {', '.join(LOG_LEVELS)}")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return config


def _emit_outcomes(outcomes: list[CheckOutcome], output: str) -> None:
    for outcome in outcomes:
        if output == "json":
            typer.echo(json.dumps(outcome.to_dict(), sort_keys=True))
        else:
            typer.echo(outcome.render())


@app.command()
def check(
    target: str = typer.Argument(..., help="Runtype as package.module:attribute, or a configured alias"),
    files: list[Path] = typer.Argument(..., help="YAML or JSON documents to validate"),
    output: str | None = typer.Option(None, "--output", help="Output format: text | json"),
    config: Path | None = typer.Option(None, "--config", help="Path to runtypes.yaml"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level, overrides config and environment"),
) -> None:
    """Validate each document against a runtype."""
    try:
        settings = _setup(config, log_level)
        fmt = output or settings.output
        if fmt not in OUTPUT_FORMATS:
            raise ValueError(f"Unsupported output format {fmt!r}. Use one of: {', '.join(OUTPUT_FORMATS)}")
        runtype = resolve_target(target, settings)
        outcomes = check_documents(runtype, files)
    except Exception as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(EXIT_INTERNAL_ERROR) from exc

    _emit_outcomes(outcomes, fmt)
    raise typer.Exit(EXIT_SUCCESS if all(outcome.ok for outcome in outcomes) else EXIT_INVALID)


@app.command("show")
def show_command(
    target: str = typer.Argument(..., help="Runtype as package.module:attribute, or a configured alias"),
    config: Path | None = typer.Option(None, "--config", help="Path to runtypes.yaml"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level, overrides config and environment"),
) -> None:
    """Print a runtype as a type expression."""
    try:
        runtype = resolve_target(target, _setup(config, log_level))
        rendered = show(runtype)
    except Exception as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(EXIT_INTERNAL_ERROR) from exc
    typer.echo(rendered)


@app.command()
def reflect(
    target: str = typer.Argument(..., help="Runtype as package.module:attribute, or a configured alias"),
    config: Path | None = typer.Option(None, "--config", help="Path to runtypes.yaml"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level, overrides config and environment"),
) -> None:
    """Print a runtype's reflection as JSON."""
    try:
        runtype = resolve_target(target, _setup(config, log_level))
        payload = json.dumps(runtype.reflect.to_dict(), indent=2, sort_keys=True, default=repr)
    except Exception as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(EXIT_INTERNAL_ERROR) from exc
    typer.echo(payload)


__all__ = ["app"]
