"""Entry points and helpers for building and applying authoring policies."""

from .factory import (
    ENTRY_POINTS,
    EntryPoint,
    Example,
    build_authoring,
    overwrite,
    pass_through,
    whitelisted,
)
from .resolution import resolve_author, squash_author

__all__ = [
    "overwrite",
    "pass_through",
    "whitelisted",
    "build_authoring",
    "ENTRY_POINTS",
    "EntryPoint",
    "Example",
    "resolve_author",
    "squash_author",
]
