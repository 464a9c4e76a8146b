"""Route table configuration.

TableConfig is a frozen dataclass — immutable after creation, no string-key
dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TableConfig:
    """Route table configuration. Immutable after creation.

    The defaults keep the permissive behaviour: a second registration of the
    same URL is dropped and reported through ``register()``'s return value::

        table = RouteTable(TableConfig(strict_duplicates=True))
    """

    # Raise DuplicateRouteError instead of silently keeping the first registration
    strict_duplicates: bool = False

    # Emit DEBUG records on the "routekey.table" logger for each registration
    log_registrations: bool = True
