"""Route table — registered templates and their opaque configs.

Templates are bucketed by segment count; a lookup only scores the bucket the
incoming URL falls into.

Free-threading safety:
    - Route is a frozen dataclass (immutable)
    - The bucket dict and its tuples are never mutated; ``register`` publishes
      a new dict under ``_lock``, so readers always hold a whole snapshot
    - A config is stored before its route is published, so a lookup that
      finds a route always finds its config
    - Lookups read the current buckets without taking the lock
"""

import logging
import threading
from typing import Any, Generic, TypeVar

from routekey._internal.types import URLInput
from routekey.config import TableConfig
from routekey.errors import DuplicateRouteError, HostNotRegistered, NoMatchFound, NoURLRegistered
from routekey.routing.decompose import decompose
from routekey.routing.route import Route, RouteMatch
from routekey.routing.score import score

logger = logging.getLogger("routekey.table")

C = TypeVar("C")


class RouteTable(Generic[C]):
    """Registry of template routes, keyed by content hash.

    Usage::

        table = RouteTable()
        table.register("http://api.example.com/users/:username/details?type=cached", {"ttl": 60})
        route_hash = table.find("http://api.example.com/users/ken/details?type=cached")
        config = table.get_config(route_hash)

    ``C`` is the caller's config type; the table stores and returns it
    without looking inside.
    """

    __slots__ = ("_config", "_configs", "_lock", "_routes")

    def __init__(self, config: TableConfig | None = None) -> None:
        self._config = config or TableConfig()
        self._lock = threading.Lock()
        # segment count -> templates in registration order
        self._routes: dict[int, tuple[Route, ...]] = {}
        # route hash -> caller config
        self._configs: dict[str, C] = {}

    @property
    def config(self) -> TableConfig:
        return self._config

    def register(self, url: URLInput, config: C) -> bool:
        """Register *url* as a template carrying *config*.

        Returns ``False`` without changing anything when a URL with the same
        hash is already registered; the first registration and its config
        are kept. With ``strict_duplicates`` that case raises
        ``DuplicateRouteError`` instead.
        """
        route = decompose(url)
        count = len(route.segments)

        with self._lock:
            if route.hash in self._configs:
                if self._config.strict_duplicates:
                    raise DuplicateRouteError(route.url, route.hash)
                if self._config.log_registrations:
                    logger.debug("Dropped duplicate route %s (%s)", route.url, route.hash[:12])
                return False

            self._configs[route.hash] = config
            self._routes = {**self._routes, count: (*self._routes.get(count, ()), route)}

        if self._config.log_registrations:
            logger.debug(
                "Registered route %s (%s, %d segments)", route.url, route.hash[:12], count
            )
        return True

    def match(self, url: URLInput) -> RouteMatch:
        """Find the best template for *url*.

        Every template with the same segment count is scored; the first one
        to reach the highest rank wins, so ties go to the earliest
        registration.

        Raises ``NoURLRegistered`` if the table is empty.
        Raises ``HostNotRegistered`` if no template has *url*'s segment count.
        Raises ``NoMatchFound`` if no template scores above zero.
        """
        routes = self._routes
        if not routes:
            raise NoURLRegistered(_display(url))

        candidate = decompose(url)
        bucket = routes.get(len(candidate.segments))
        if bucket is None:
            raise HostNotRegistered(candidate.url)

        best_rank = 0
        best: Route | None = None
        for template in bucket:
            rank = score(template, candidate)
            if rank > best_rank:
                best_rank = rank
                best = template

        if best is None:
            raise NoMatchFound(candidate.url)

        return RouteMatch(route=best, rank=best_rank, config=self._configs[best.hash])

    def find(self, url: URLInput) -> str:
        """Return the hash of the best template for *url*.

        Raises the same errors as ``match()``.
        """
        return self.match(url).route.hash

    def get_config(self, route_hash: str, default: C | None = None) -> C | None:
        """Return the config registered under *route_hash*, or *default*."""
        return self._configs.get(route_hash, default)

    @property
    def routes(self) -> list[Route]:
        """All registered templates, by segment count, then registration order."""
        buckets = self._routes
        return [route for count in sorted(buckets) for route in buckets[count]]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._routes.values())

    def __contains__(self, route_hash: object) -> bool:
        return route_hash in self._configs


def _display(url: URLInput) -> str:
    return url if isinstance(url, str) else str(url)


_default: RouteTable[Any] | None = None
_default_lock = threading.Lock()


def default_route_table() -> RouteTable[Any]:
    """Return the process-wide route table, creating it on first use.

    Prefer passing an explicit ``RouteTable`` around; this is for callers
    that want one shared registry without plumbing it through.
    """
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = RouteTable()
    return _default
