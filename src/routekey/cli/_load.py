"""Routes file loading for CLI commands.

Shared by ``routekey routes`` and ``routekey match``: turns loader errors
into an ``Error: ...`` line on stderr and exit status 1.
"""

import sys
from typing import Any

from routekey.errors import ConfigurationError, DuplicateRouteError
from routekey.loader import load_routes
from routekey.routing.table import RouteTable


def load_table(routes_file: str) -> RouteTable[dict[str, Any]]:
    """Load *routes_file* into a new table, exiting with status 1 on failure."""
    try:
        return load_routes(routes_file)
    except (ConfigurationError, DuplicateRouteError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
