"""URL decomposition.

Turns a URL into a ``Route``: positional path segments, normalized query
parameters and a content hash of the path and raw query.
"""

import hashlib
from types import MappingProxyType
from urllib.parse import unquote, urlsplit

from routekey._internal.types import URLInput
from routekey.query import QueryParams
from routekey.routing.route import PARAM, Route

PARAM_PREFIX = ":"


def parse_segments(path: str) -> dict[int, str]:
    """Map each non-empty path component to its index in the split path.

    Examples::

        "/users"          -> {1: "users"}
        "/users/:id"      -> {1: "users", 2: "?"}
        "/a//b/"          -> {1: "a", 3: "b"}
        ""                -> {}
    """
    segments: dict[int, str] = {}
    for index, part in enumerate(path.split("/")):
        if not part:
            continue
        segments[index] = PARAM if part.startswith(PARAM_PREFIX) else part
    return segments


def create_hash(path: str, raw_query: str = "") -> str:
    """Hex SHA-256 of *path*, followed by ``?`` and *raw_query* when non-empty."""
    data = f"{path}?{raw_query}" if raw_query else path
    return hashlib.sha256(data.encode("utf-8")).hexdigest()


def decompose(url: URLInput) -> Route:
    """Decompose *url* into a ``Route``.

    *url* is either a string, parsed here with ``urlsplit`` (its path is
    percent-decoded, its query kept raw), or an already-parsed URL exposing
    ``path`` and ``query`` such as ``httpx.URL``. The host comes from ``host``
    or, failing that, ``netloc``.

    Never raises for a parsed URL.
    """
    if isinstance(url, str):
        parts = urlsplit(url)
        host = parts.netloc
        path = unquote(parts.path)
        raw_query = parts.query
    else:
        host = getattr(url, "host", None) or getattr(url, "netloc", "")
        if isinstance(host, bytes):
            host = host.decode("latin-1")
        path = url.path
        raw_query = url.query
        if isinstance(raw_query, bytes):
            raw_query = raw_query.decode("latin-1")

    query = QueryParams(raw_query)
    return Route(
        host=host,
        segments=MappingProxyType(parse_segments(path)),
        query_params=MappingProxyType(query.normalized()),
        hash=create_hash(path, raw_query),
        path=path,
        raw_query=raw_query,
    )
