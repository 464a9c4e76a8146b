"""Route and RouteMatch frozen dataclasses."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# Stored in place of a ``:name`` segment
PARAM = "?"


@dataclass(frozen=True, slots=True)
class Route:
    """A URL broken down into the parts matching works on.

    ``segments`` maps a segment's index in the ``/``-split path to its value,
    or to ``PARAM`` for a parameter placeholder. Empty components are skipped
    but still advance the index, so ``/a//b`` yields ``{1: "a", 3: "b"}``.

    Built by ``decompose()``; the mappings are read-only views.
    """

    host: str
    segments: Mapping[int, str]
    query_params: Mapping[str, str]
    hash: str
    path: str = ""
    raw_query: str = ""

    @property
    def url(self) -> str:
        """Path plus raw query: the exact text the hash was computed over."""
        if self.raw_query:
            return f"{self.path}?{self.raw_query}"
        return self.path

    @property
    def specificity(self) -> int:
        """Rank this route scores against a candidate it matches."""
        return sum(1 if value == PARAM else 2 for value in self.segments.values())


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful lookup."""

    route: Route
    rank: int
    config: Any
