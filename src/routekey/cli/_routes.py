"""``routekey routes`` — list the templates in a routes file.

Prints one row per template with its segment count, the rank it scores
against a URL it matches, a short hash and the template itself.
"""

import argparse

from routekey.cli._load import load_table


def run_routes(args: argparse.Namespace) -> None:
    """List registered templates for ``args.routes_file``."""
    table = load_table(args.routes_file)

    routes = table.routes
    if not routes:
        print("No routes registered.")
        return

    # Build rows: (segments, rank, short hash, template)
    rows: list[tuple[str, str, str, str]] = [
        (str(len(route.segments)), str(route.specificity), route.hash[:12], route.url)
        for route in routes
    ]

    fmt = "{:>8}  {:>4}  {:<12}  {}"
    print(fmt.format("SEGMENTS", "RANK", "HASH", "TEMPLATE"))
    sep_len = 8 + 4 + 12 + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
