"""Helpers that turn an authoring decision into a destination author."""

from __future__ import annotations

from ..entities import Author, Authoring, parse_author
from ..errors import AuthorParseError
from ..utils.logging import get_logger

_LOGGER = get_logger(module=__name__)


def resolve_author(
    authoring: Authoring,
    raw_origin_id: str,
    origin_author: Author | str | None,
) -> Author:
    """Return the author to record on the destination commit.

    ``origin_author`` is the origin's own identity for the change, either parsed
    already or as a raw ``"Name <email>"`` string. It is only consulted when the
    policy accepts ``raw_origin_id``. A missing or unparseable origin identity
    falls back to :attr:`Authoring.default_author`.
    """

    if not authoring.use_author(raw_origin_id):
        return authoring.default_author
    if origin_author is None:
        _LOGGER.warning(
            "Origin author unavailable, using default author",
            origin_id=raw_origin_id,
        )
        return authoring.default_author
    if isinstance(origin_author, Author):
        return origin_author
    try:
        return parse_author(origin_author)
    except AuthorParseError as exc:
        _LOGGER.warning(
            "Origin author cannot be determined, using default author",
            origin_id=raw_origin_id,
            error=str(exc),
        )
        return authoring.default_author


def squash_author(authoring: Authoring) -> Author:
    """Author for a commit that squashes several origin changes."""

    return authoring.default_author


__all__ = ["resolve_author", "squash_author"]
