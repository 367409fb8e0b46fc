"""Domain entities for authorship mapping."""

from .authoring import Authoring, AuthoringMappingMode
from .core import Author, parse_author

__all__ = [
    "Author",
    "parse_author",
    "Authoring",
    "AuthoringMappingMode",
]
