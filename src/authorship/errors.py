"""Exceptions raised while building authoring policies."""

from __future__ import annotations


class AuthoringError(Exception):
    """Base exception for authorship mapping failures."""


class AuthorParseError(AuthoringError, ValueError):
    """Raised when a raw string is not a ``name <email>`` identity."""

    def __init__(self, raw: object) -> None:
        super().__init__(
            f"Author '{raw}' doesn't match the expected format 'name <mail@example.com>'"
        )
        self.raw = raw


class AuthoringConfigError(AuthoringError, ValueError):
    """Raised when an authoring entry point receives invalid arguments."""


__all__ = ["AuthoringError", "AuthorParseError", "AuthoringConfigError"]
