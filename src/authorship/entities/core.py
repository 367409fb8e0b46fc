"""Contributor identity shared by origin and destination commits."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

from ..errors import AuthorParseError

_AUTHOR_RE = re.compile(r"(?P<name>[^<]+)<(?P<email>[^>]*)>")


class Author(BaseModel):
    """Display name and address of a commit author.

    Instances are only produced by :func:`parse_author` or direct construction
    with already-clean values; they never change afterwards.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Display name of the contributor")
    email: str = Field(default="", description="Email address or origin handle")

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


def parse_author(raw: str) -> Author:
    """Parse ``"Display Name <address>"`` into an :class:`Author`.

    Surrounding whitespace is stripped from both parts. The address may be
    empty but the display name may not.
    """

    if not isinstance(raw, str):
        raise AuthorParseError(raw)
    match = _AUTHOR_RE.fullmatch(raw)
    if match is None:
        raise AuthorParseError(raw)
    name = match.group("name").strip()
    if not name:
        raise AuthorParseError(raw)
    return Author(name=name, email=match.group("email").strip())


__all__ = ["Author", "parse_author"]
