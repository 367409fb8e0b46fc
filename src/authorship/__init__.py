"""Authorship mapping policies for origin-to-destination migrations."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("authorship")
except PackageNotFoundError:  # pragma: no cover - fallback during local development
    __version__ = "0.1.0"

from .authoring import (
    build_authoring,
    overwrite,
    pass_through,
    resolve_author,
    squash_author,
    whitelisted,
)
from .config.settings import Settings, get_settings
from .entities import Author, Authoring, AuthoringMappingMode, parse_author
from .errors import AuthorParseError, AuthoringConfigError, AuthoringError

__all__ = [
    "__version__",
    "Settings",
    "get_settings",
    "Author",
    "parse_author",
    "Authoring",
    "AuthoringMappingMode",
    "overwrite",
    "pass_through",
    "whitelisted",
    "build_authoring",
    "resolve_author",
    "squash_author",
    "AuthoringError",
    "AuthorParseError",
    "AuthoringConfigError",
]
