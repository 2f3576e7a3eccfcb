"""Context name patterns and the global context alias."""

from __future__ import annotations

GLOBAL_CONTEXT_NAME = "<global>"
GLOBAL_CONTEXT_ALIAS = "."
WILDCARD = "*"


def resolve_alias(name: str) -> str:
    """Map the ``"."`` shorthand onto the global context name.

    >>> resolve_alias(".")
    '<global>'
    >>> resolve_alias("app.http")
    'app.http'
    """

    if name == GLOBAL_CONTEXT_ALIAS:
        return GLOBAL_CONTEXT_NAME
    return name


def is_wildcard(pattern: str) -> bool:
    """Return ``True`` when ``pattern`` contains the wildcard marker."""

    return WILDCARD in pattern


def matches(candidate: str, pattern: str | None) -> bool:
    """Return ``True`` when ``candidate`` satisfies ``pattern``.

    ``None`` matches everything. Without a ``*`` the comparison is an exact,
    case-sensitive equality. With a ``*`` only the text before the first marker
    matters: the candidate must start with it.

    Examples
    --------
    >>> matches("foo1", "foo*"), matches("Foo1", "foo*")
    (True, False)
    >>> matches("anything", "*"), matches("abc", "ABC")
    (True, False)
    """

    if pattern is None:
        return True
    prefix, marker, _ = pattern.partition(WILDCARD)
    if not marker:
        return candidate == pattern
    return candidate.startswith(prefix)


__all__ = [
    "GLOBAL_CONTEXT_ALIAS",
    "GLOBAL_CONTEXT_NAME",
    "WILDCARD",
    "is_wildcard",
    "matches",
    "resolve_alias",
]
