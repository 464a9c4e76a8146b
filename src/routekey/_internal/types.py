"""Shared type aliases used across routekey modules."""

from typing import Protocol, TypeAlias


class ParsedURL(Protocol):
    """A URL that has already been parsed by the caller.

    ``path`` is the decoded path; ``query`` is the raw (still encoded) query
    string. ``httpx.URL`` satisfies this protocol as-is.
    """

    @property
    def path(self) -> str: ...

    @property
    def query(self) -> str | bytes: ...


# Anything decompose() accepts
URLInput: TypeAlias = str | ParsedURL
