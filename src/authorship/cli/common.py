"""Shared helpers used across the authorship CLI modules."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, MutableMapping, NoReturn
from uuid import uuid4

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from authorship.config import AuthoringConfig, Settings, load_authoring_config
from authorship.entities import Authoring
from authorship.errors import AuthoringError
from authorship.utils.logging import configure_logging, get_logger, logging_context

console = Console()
_LOGGER = get_logger(module=__name__)


class CLIError(RuntimeError):
    """Exception raised for user-facing CLI errors."""


@dataclass(slots=True)
class CLIState:
    """State object attached to ``typer.Context`` for downstream commands."""

    settings: Settings
    overrides: Dict[str, Any]
    environment: str
    run_id: str
    verbose: bool

    def authoring(self) -> Authoring:
        """Build the configured policy, converting failures into ``CLIError``."""

        try:
            return self.settings.build_authoring()
        except AuthoringError as exc:
            raise CLIError(str(exc)) from exc


def abort(error: BaseException) -> NoReturn:
    """Render ``error`` without a stack trace and exit with status 2."""

    console.print(f"[bold red]Error:[/bold red] {escape(str(error))}", soft_wrap=True)
    raise typer.Exit(code=2) from error


def _merge_dict(dest: MutableMapping[str, Any], src: Mapping[str, Any]) -> None:
    for key, value in src.items():
        if isinstance(value, Mapping) and isinstance(dest.get(key), MutableMapping):
            _merge_dict(dest[key], value)  # type: ignore[index]
        elif isinstance(value, Mapping):
            dest[key] = dict(value)
        else:
            dest[key] = value


def parse_override(argument: str) -> Dict[str, Any]:
    """Parse dotted ``key=value`` overrides into nested dictionaries."""

    if "=" not in argument:
        raise typer.BadParameter("Overrides must be expressed as dotted.key=value")
    dotted, value = argument.split("=", 1)
    cursor: MutableMapping[str, Any] = {}
    current = cursor
    segments = [segment.strip() for segment in dotted.split(".") if segment.strip()]
    if not segments:
        raise typer.BadParameter("Override keys must not be empty")
    for segment in segments[:-1]:
        nested: Dict[str, Any] = {}
        current[segment] = nested
        current = nested
    try:
        parsed_value = json.loads(value)
    except json.JSONDecodeError:
        parsed_value = value
    current[segments[-1]] = parsed_value
    return cursor


def merge_overrides(overrides: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    """Merge override dictionaries using deep semantics."""

    result: Dict[str, Any] = {}
    for override in overrides:
        _merge_dict(result, override)
    return result


def resolve_settings(
    environment: str | None,
    overrides: Dict[str, Any],
    config_path: Path | None = None,
) -> Settings:
    """Construct :class:`Settings` with environment, policy file and overrides applied.

    An explicit policy file replaces the ``authoring`` section of the YAML
    configuration; overrides under ``authoring`` are merged on top of it.
    """

    payload = dict(overrides)
    if environment:
        payload["environment"] = environment
    try:
        if config_path is not None:
            policy = load_authoring_config(config_path).model_dump(mode="json", exclude_none=True)
            _merge_dict(policy, payload.get("authoring", {}))
            payload["authoring"] = AuthoringConfig.model_validate(policy)
        return Settings(**payload)
    except FileNotFoundError as exc:
        raise CLIError(str(exc)) from exc
    except (ValidationError, ValueError) as exc:
        raise CLIError(f"Invalid configuration: {exc}") from exc


def configure_state(
    ctx: typer.Context,
    *,
    environment: str | None,
    config_path: Path | None,
    overrides: Iterable[Dict[str, Any]],
    run_id: str | None,
    verbose: bool,
) -> None:
    """Populate ``ctx.obj`` with :class:`CLIState` and initialise logging."""

    merged = merge_overrides(overrides)
    settings = resolve_settings(environment, merged, config_path)
    configure_logging(settings, level="DEBUG" if verbose else None)
    resolved_run_id = run_id or f"cli-{uuid4().hex[:8]}"
    ctx.with_resource(logging_context(run_id=resolved_run_id))
    _LOGGER.debug("CLI state configured", environment=settings.environment)
    ctx.obj = CLIState(
        settings=settings,
        overrides=merged,
        environment=settings.environment,
        run_id=resolved_run_id,
        verbose=verbose,
    )


def get_state(ctx: typer.Context) -> CLIState:
    """Return the previously configured :class:`CLIState`."""

    if ctx.obj is None:
        raise CLIError("CLI context is not initialised")
    if not isinstance(ctx.obj, CLIState):  # pragma: no cover - defensive guard
        raise CLIError("Unexpected CLI context payload")
    return ctx.obj


__all__ = [
    "CLIError",
    "CLIState",
    "abort",
    "configure_state",
    "console",
    "get_state",
    "merge_overrides",
    "parse_override",
    "resolve_settings",
]
