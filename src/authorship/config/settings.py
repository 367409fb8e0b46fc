"""Configuration management built on top of the authoring policy primitives."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Literal

import yaml
from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..entities import Authoring
from ..errors import AuthoringConfigError
from .policies import AuthoringConfig, load_authoring_config

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_CONFIG_DIR = PROJECT_ROOT / "config"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "default.yaml"
SETTINGS_ENV_PREFIX = "AUTHORSHIP_SETTINGS__"


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dictionaries."""

    result = dict(base)
    for key, value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _load_yaml_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Configuration file '{path}' is not valid YAML: {exc}") from exc


def _apply_env_overrides(base: Dict[str, Any]) -> Dict[str, Any]:
    """Apply overrides from AUTHORSHIP_SETTINGS__* environment variables."""

    result = dict(base)
    for key, value in os.environ.items():
        if not key.startswith(SETTINGS_ENV_PREFIX):
            continue
        path = key[len(SETTINGS_ENV_PREFIX) :].lower().split("__")
        cursor = result
        for part in path[:-1]:
            cursor = cursor.setdefault(part, {})
        cursor[path[-1]] = value
    return result


class PathsConfig(BaseModel):
    """Filesystem layout for log output."""

    logs_dir: Path = Field(default=PROJECT_ROOT / "logs")

    def ensure_exists(self) -> None:
        """Create directories backing every configured path if they are missing."""
        for field_name in type(self).model_fields:
            path = Path(getattr(self, field_name))
            if not path.is_absolute():
                path = PROJECT_ROOT / path
            path.mkdir(parents=True, exist_ok=True)
            object.__setattr__(self, field_name, path)


class Settings(BaseSettings):
    """Primary configuration object for the authorship tool.

    Precedence (highest first): explicit kwargs, environment variables
    prefixed with ``AUTHORSHIP_`` (handled by :class:`BaseSettings`), nested
    overrides via ``AUTHORSHIP_SETTINGS__`` variables, environment-specific
    YAML (e.g. ``production.yaml``), the default YAML file, and finally the
    class defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTHORSHIP_",
        validate_assignment=True,
        extra="ignore",
    )

    environment: Literal["development", "testing", "production"] = Field(
        default="development",
        description="Active runtime environment",
    )
    config_dir: Path = Field(default=DEFAULT_CONFIG_DIR)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    create_dirs: bool = Field(
        default=True,
        description="Create filesystem directories declared in `paths` during initialisation.",
    )
    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    authoring: AuthoringConfig | None = None

    @model_validator(mode="before")
    @classmethod
    def _bootstrap_from_files(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        """Load YAML files and merge with provided overrides."""

        config_dir = Path(values.get("config_dir") or DEFAULT_CONFIG_DIR)
        environment = values.get("environment") or os.getenv("AUTHORSHIP_ENV", "development")
        base_config = _load_yaml_file(config_dir / "default.yaml")
        env_config = _load_yaml_file(config_dir / f"{environment}.yaml")
        merged = _deep_merge(base_config, env_config)
        hydrated = _apply_env_overrides(merged)

        combined = _deep_merge(hydrated, {k: v for k, v in values.items() if v is not None})

        authoring_data = combined.get("authoring")
        if isinstance(authoring_data, dict):
            combined["authoring"] = load_authoring_config(authoring_data)
        return combined

    @model_validator(mode="after")
    def _ensure_paths(self) -> "Settings":
        """Ensure filesystem paths exist when directory creation is enabled."""

        if self.create_dirs:
            self.paths.ensure_exists()
        return self

    @property
    def log_file(self) -> Path:
        return self.paths.logs_dir / "authorship.log"

    def build_authoring(self) -> Authoring:
        """Build the configured :class:`Authoring` policy."""

        if self.authoring is None:
            raise AuthoringConfigError(
                "No authoring policy configured; add an 'authoring' section to the configuration"
            )
        return self.authoring.build()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a singleton settings instance."""

    return Settings()


__all__ = ["Settings", "get_settings", "PathsConfig", "PROJECT_ROOT"]
