"""routekey exception hierarchy.

Shared across the route table, the routes-file loader and the CLI so every
module raises and catches the same types.
"""


class RouteKeyError(Exception):
    """Base for all routekey-specific errors."""


class ConfigurationError(RouteKeyError):
    """Raised when a routes file or table setting is invalid."""


class DuplicateRouteError(RouteKeyError):
    """Raised by a strict table when a URL with a known hash is registered again."""

    def __init__(self, url: str, route_hash: str) -> None:
        self.url = url
        self.hash = route_hash
        super().__init__(f"route already registered: {url!r} ({route_hash[:12]})")


class MatchError(RouteKeyError):
    """No usable template was found for a URL.

    Subclasses differ only in *why* nothing matched. ``code`` is the stable
    identifier callers branch on; ``str(err)`` is the human-readable message.
    """

    code: str = "MATCH_ERROR"
    message: str = "match failed"

    def __init__(self, url: str | None = None) -> None:
        self.url = url
        if url is None:
            super().__init__(self.message)
        else:
            super().__init__(f"{self.message}: {url}")


class NoURLRegistered(MatchError):  # noqa: N818
    """The table has no registrations at all."""

    code = "NO_URL_REGISTERED"
    message = "no url registered"


class HostNotRegistered(MatchError):  # noqa: N818
    """No template shares the candidate's segment count.

    The name is historical; the host is never compared.
    """

    code = "HOST_NOT_REGISTERED"
    message = "host not registered"


class NoMatchFound(MatchError):  # noqa: N818
    """Templates with the right segment count exist but none scored above zero."""

    code = "NO_MATCH_FOUND"
    message = "no match found"
