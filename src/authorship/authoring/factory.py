"""Named entry points that build :class:`Authoring` policies.

The three functions here are what configuration authors call. Their names,
parameter names and parameter order are stable: ``overwrite(default)``,
``pass_through(default)`` and ``whitelisted(default, whitelist)``.
"""

from __future__ import annotations

import inspect
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

from ..entities import Authoring, AuthoringMappingMode, parse_author
from ..errors import AuthoringConfigError
from ..utils.logging import get_logger

_LOGGER = get_logger(module=__name__)


@dataclass(frozen=True)
class Example:
    """Documented usage of an entry point."""

    title: str
    code: str
    before: str = ""


@dataclass(frozen=True)
class EntryPoint:
    """Registered constructor exposed to configuration authors."""

    name: str
    function: Callable[..., Authoring]
    examples: Tuple[Example, ...] = field(default_factory=tuple)

    @property
    def doc(self) -> str:
        return inspect.getdoc(self.function) or ""

    @property
    def parameters(self) -> List[str]:
        return list(inspect.signature(self.function).parameters)


def overwrite(default: str) -> Authoring:
    """Use the default author for all the submits in the destination.

    Some destinations might choose to ignore this author and use the current
    user running the tool (they don't allow impersonation).
    """

    authoring = Authoring(
        default_author=parse_author(default),
        mode=AuthoringMappingMode.OVERWRITE,
    )
    _LOGGER.debug("Built authoring policy", mode=authoring.mode.value)
    return authoring


def pass_through(default: str) -> Authoring:
    """Use the origin author as the author in the destination, no whitelisting.

    ``default`` is used in squash mode workflows or if the author cannot be
    determined.
    """

    authoring = Authoring(
        default_author=parse_author(default),
        mode=AuthoringMappingMode.PASS_THROUGH,
    )
    _LOGGER.debug("Built authoring policy", mode=authoring.mode.value)
    return authoring


def whitelisted(default: str, whitelist: Sequence[str]) -> Authoring:
    """Pass through whitelisted origin authors, use ``default`` for everybody else.

    ``default`` is also used in squash mode workflows. Whitelist entries are
    origin identifiers and must be unique; whether they are emails or
    usernames is up to the origin.
    """

    default_author = parse_author(default)
    authoring = Authoring(
        default_author=default_author,
        mode=AuthoringMappingMode.WHITELISTED,
        whitelist=_create_whitelist(whitelist),
    )
    _LOGGER.debug(
        "Built authoring policy",
        mode=authoring.mode.value,
        whitelist_size=len(authoring.whitelist),
    )
    return authoring


def _create_whitelist(whitelist: Sequence[str]) -> frozenset[str]:
    if isinstance(whitelist, (str, bytes)) or not isinstance(whitelist, Sequence):
        raise AuthoringConfigError(
            f"'whitelist' must be a sequence of strings, got {type(whitelist).__name__}"
        )
    if not whitelist:
        raise AuthoringConfigError(
            "'whitelisted' function requires a non-empty 'whitelist' field. For default mapping,"
            " use 'overwrite(...)' mode instead."
        )
    unique_authors: set[str] = set()
    for author in whitelist:
        if not isinstance(author, str):
            raise AuthoringConfigError(
                f"'whitelist' entries must be strings, got {type(author).__name__}"
            )
        if author in unique_authors:
            raise AuthoringConfigError(f"Duplicated whitelist entry '{author}'")
        unique_authors.add(author)
    return frozenset(unique_authors)


ENTRY_POINTS: Dict[str, EntryPoint] = {
    AuthoringMappingMode.OVERWRITE.value: EntryPoint(
        name=AuthoringMappingMode.OVERWRITE.value,
        function=overwrite,
        examples=(
            Example(
                title="Overwrite usage example",
                before=(
                    "Create an authoring object that will overwrite any origin author with"
                    " noreply@foobar.com mail."
                ),
                code='authoring.overwrite("Foo Bar <noreply@foobar.com>")',
            ),
        ),
    ),
    AuthoringMappingMode.PASS_THROUGH.value: EntryPoint(
        name=AuthoringMappingMode.PASS_THROUGH.value,
        function=pass_through,
        examples=(
            Example(
                title="Pass through usage example",
                code='authoring.pass_through(default = "Foo Bar <noreply@foobar.com>")',
            ),
        ),
    ),
    AuthoringMappingMode.WHITELISTED.value: EntryPoint(
        name=AuthoringMappingMode.WHITELISTED.value,
        function=whitelisted,
        examples=(
            Example(
                title="Only pass through whitelisted users",
                code=(
                    "authoring.whitelisted(\n"
                    '    default = "Foo Bar <noreply@foobar.com>",\n'
                    "    whitelist = [\n"
                    '       "someuser@myorg.com",\n'
                    '       "other@myorg.com",\n'
                    '       "another@myorg.com",\n'
                    "    ],\n"
                    ")"
                ),
            ),
            Example(
                title="Only pass through whitelisted LDAPs/usernames",
                before=(
                    "Some repositories are not based on email but use LDAPs/usernames. This is"
                    " also supported since it is up to the origin how to check whether two"
                    " authors are the same."
                ),
                code=(
                    "authoring.whitelisted(\n"
                    '    default = "Foo Bar <noreply@foobar.com>",\n'
                    "    whitelist = [\n"
                    '       "someuser",\n'
                    '       "other",\n'
                    '       "another",\n'
                    "    ],\n"
                    ")"
                ),
            ),
        ),
    ),
}


def build_authoring(name: str, **params: Any) -> Authoring:
    """Invoke the entry point registered under ``name`` with keyword ``params``."""

    entry = ENTRY_POINTS.get(name)
    if entry is None:
        known = ", ".join(sorted(ENTRY_POINTS))
        raise AuthoringConfigError(f"Unknown authoring mode '{name}'; expected one of: {known}")
    expected = entry.parameters
    unexpected = sorted(set(params) - set(expected))
    if unexpected:
        raise AuthoringConfigError(
            f"'{name}' got unexpected parameter(s): {', '.join(unexpected)}"
        )
    missing = [param for param in expected if param not in params]
    if missing:
        raise AuthoringConfigError(
            f"'{name}' missing required parameter(s): {', '.join(missing)}"
        )
    return entry.function(**params)


__all__ = [
    "overwrite",
    "pass_through",
    "whitelisted",
    "build_authoring",
    "ENTRY_POINTS",
    "EntryPoint",
    "Example",
]
