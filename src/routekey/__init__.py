"""routekey — map concrete URLs to the URL templates they belong to.

Register Express-style templates with an opaque config, then look up which
template an incoming URL matches. The hash of the winning template is a
stable key for anything keyed by route rather than by URL, such as a cache.

Basic usage::

    from routekey import RouteTable

    table = RouteTable()
    table.register("http://www.abcdefg.com/api/v1/users/:username/details", {"ttl": 60})

    route_hash = table.find("http://www.abcdefg.com/api/v1/users/ken/details")
    table.get_config(route_hash)  # {"ttl": 60}

Query parameters on a template must be present, with the same value, on a
matching URL::

    table.register("/api/v1/users/:username/details?type=cached", {"ttl": 300})
    table.find("/api/v1/users/ken/details?type=cached&format=JSON")  # matches
    table.find("/api/v1/users/ken/details?format=JSON")  # raises NoMatchFound
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DuplicateRouteError",
    "HostNotRegistered",
    "MatchError",
    "NoMatchFound",
    "NoURLRegistered",
    "Route",
    "RouteKeyError",
    "RouteMatch",
    "RouteTable",
    "TableConfig",
    "decompose",
    "default_route_table",
    "load_routes",
    "score",
]

_ERRORS = frozenset(
    {
        "ConfigurationError",
        "DuplicateRouteError",
        "HostNotRegistered",
        "MatchError",
        "NoMatchFound",
        "NoURLRegistered",
        "RouteKeyError",
    }
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routekey`` fast while providing a clean top-level API.
    """
    if name in ("RouteTable", "default_route_table"):
        from routekey.routing import table as _table

        return getattr(_table, name)

    if name in ("Route", "RouteMatch"):
        from routekey.routing import route as _route

        return getattr(_route, name)

    if name == "decompose":
        from routekey.routing.decompose import decompose

        return decompose

    if name == "score":
        from routekey.routing.score import score

        return score

    if name == "TableConfig":
        from routekey.config import TableConfig

        return TableConfig

    if name == "load_routes":
        from routekey.loader import load_routes

        return load_routes

    if name in _ERRORS:
        from routekey import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
