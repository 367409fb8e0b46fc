"""Configuration utilities for the authorship tool."""

from .policies import AuthoringConfig, load_authoring_config
from .settings import PathsConfig, Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "PathsConfig",
    "AuthoringConfig",
    "load_authoring_config",
]
