"""Routes file loading.

A routes file is a JSON object mapping template URLs to config objects::

    {
        "/api/v1/users/:username/details?type=cached": {"ttl": 300},
        "/api/v1/users/:username": {"ttl": 60}
    }

Entries are registered in file order, so among equally ranked templates the
one listed first wins.
"""

import json
from pathlib import Path
from typing import Any

from routekey.config import TableConfig
from routekey.errors import ConfigurationError
from routekey.routing.table import RouteTable


def load_routes(
    path: str | Path,
    table: RouteTable[dict[str, Any]] | None = None,
    config: TableConfig | None = None,
) -> RouteTable[dict[str, Any]]:
    """Register every entry of the routes file at *path*.

    Entries go into *table* when given, otherwise into a new table built
    with *config*. Returns the table.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid JSON,
            or does not map URL strings to JSON objects.
        DuplicateRouteError: If the table is strict and an entry is
            already registered.

    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        msg = f"Cannot read routes file {str(path)!r}: {exc.strerror or exc}"
        raise ConfigurationError(msg) from exc
    except json.JSONDecodeError as exc:
        msg = f"Routes file {str(path)!r} is not valid JSON: {exc}"
        raise ConfigurationError(msg) from exc

    if not isinstance(data, dict):
        msg = (
            f"Routes file {str(path)!r} must contain a JSON object mapping "
            f"template URLs to configs, got {type(data).__name__}"
        )
        raise ConfigurationError(msg)

    if table is None:
        table = RouteTable(config)

    for url, route_config in data.items():
        if not isinstance(route_config, dict):
            msg = (
                f"Config for {url!r} in {str(path)!r} must be a JSON object, "
                f"got {type(route_config).__name__}"
            )
            raise ConfigurationError(msg)
        table.register(url, route_config)

    return table
