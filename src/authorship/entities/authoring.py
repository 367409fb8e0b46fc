"""Authorship mapping policy between an origin and a destination."""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, assert_never

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .core import Author


class AuthoringMappingMode(str, Enum):
    """Modes for mapping origin authors to destination authors.

    Each value matches the name of the entry point that creates it.
    """

    OVERWRITE = "overwrite"
    PASS_THROUGH = "pass_through"
    WHITELISTED = "whitelisted"


class Authoring(BaseModel):
    """Authors mapping between an origin and a destination.

    For any author in the origin the policy always yields an author for the
    destination: either the origin author itself or :attr:`default_author`.
    Values are immutable and hashable, so they can be shared freely and used as
    mapping keys.
    """

    model_config = ConfigDict(frozen=True)

    default_author: Author = Field(
        ...,
        description="Author used for squash workflows, overwrite mode and non-whitelisted authors.",
    )
    mode: AuthoringMappingMode
    whitelist: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Origin identifiers allowed to pass through; typically emails or usernames.",
    )

    @model_validator(mode="after")
    def _validate_whitelist(self) -> "Authoring":
        if self.mode is AuthoringMappingMode.WHITELISTED and not self.whitelist:
            raise ValueError("whitelisted mode requires a non-empty whitelist")
        if self.mode is not AuthoringMappingMode.WHITELISTED and self.whitelist:
            raise ValueError(f"{self.mode.name} mode does not accept a whitelist")
        return self

    def use_author(self, raw_origin_id: str) -> bool:
        """Return True if the origin author identified by ``raw_origin_id`` can be used.

        Matching against the whitelist is exact and case-sensitive. When False,
        callers substitute :attr:`default_author`.
        """

        mode = self.mode
        if mode is AuthoringMappingMode.PASS_THROUGH:
            return True
        if mode is AuthoringMappingMode.OVERWRITE:
            return False
        if mode is AuthoringMappingMode.WHITELISTED:
            return raw_origin_id in self.whitelist
        assert_never(mode)

    def __repr__(self) -> str:
        return (
            f"Authoring(default_author={str(self.default_author)!r}, "
            f"mode={self.mode.name}, whitelist={sorted(self.whitelist)!r})"
        )

    __str__ = __repr__


__all__ = ["Authoring", "AuthoringMappingMode"]
