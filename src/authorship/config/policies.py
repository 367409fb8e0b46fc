"""Declarative authoring policy configuration."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, MutableMapping

import yaml
from pydantic import BaseModel, ConfigDict, Field

from ..authoring.factory import build_authoring
from ..entities import Authoring, AuthoringMappingMode

POLICY_ENV_PREFIX = "AUTHORSHIP_POLICY__"


class AuthoringConfig(BaseModel):
    """Raw arguments for one of the authoring entry points.

    Only the shape is validated here; :meth:`build` hands the values to the
    entry point named by :attr:`mode`, which owns the semantic checks.
    """

    model_config = ConfigDict(extra="forbid")

    mode: AuthoringMappingMode
    default: str = Field(..., description="Default author as 'Name <email>'")
    whitelist: List[str] | None = Field(
        default=None,
        description="Origin identifiers to pass through (whitelisted mode only).",
    )

    def build(self) -> Authoring:
        params: Dict[str, Any] = {"default": self.default}
        if self.whitelist is not None:
            params["whitelist"] = list(self.whitelist)
        return build_authoring(self.mode.value, **params)


def _resolve_env_overrides(raw: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Apply AUTHORSHIP_POLICY__ environment variable overrides.

    ``AUTHORSHIP_POLICY__MODE=overwrite`` replaces ``mode``. Values are
    JSON-decoded when possible (e.g. ``["a", "b"]`` becomes a list), otherwise
    they are kept as raw strings.
    """

    for key, value in os.environ.items():
        if not key.startswith(POLICY_ENV_PREFIX):
            continue
        field_name = key[len(POLICY_ENV_PREFIX) :].lower()
        if not field_name:
            continue
        try:
            parsed = json.loads(value)
        except (TypeError, json.JSONDecodeError):
            parsed = value
        raw[field_name] = parsed
    return raw


def _select_section(loaded: Mapping[str, Any]) -> MutableMapping[str, Any]:
    section = loaded.get("authoring")
    if isinstance(section, Mapping):
        return dict(section)
    return dict(loaded)


def load_authoring_config(source: os.PathLike[str] | str | Mapping[str, Any]) -> AuthoringConfig:
    """Load an authoring configuration from a mapping or YAML file.

    The ``authoring`` section is used when present, otherwise the whole
    document. Environment overrides are applied last.
    """

    if isinstance(source, Mapping):
        raw = _select_section(source)
    else:
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"Authoring policy file not found: {path}")
        try:
            with path.open("r", encoding="utf-8") as handle:
                loaded = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise ValueError(f"Authoring policy file '{path}' is not valid YAML: {exc}") from exc
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, Mapping):
            raise ValueError(
                f"Authoring policy file '{path}' must contain a mapping at the top level"
            )
        raw = _select_section(loaded)
    hydrated = _resolve_env_overrides(raw)
    return AuthoringConfig.model_validate(hydrated)


__all__ = ["AuthoringConfig", "load_authoring_config", "POLICY_ENV_PREFIX"]
