"""``routekey match`` — match URLs against a routes file.

Every URL is tried; misses are reported on stderr with their error code and
make the command exit with status 1 once all URLs have been processed.
"""

import argparse
import json
import sys

from routekey.cli._load import load_table
from routekey.errors import MatchError


def run_match(args: argparse.Namespace) -> None:
    """Print the winning template, hash and config for each URL in ``args.urls``."""
    table = load_table(args.routes_file)

    misses = 0
    for url in args.urls:
        try:
            match = table.match(url)
        except MatchError as exc:
            print(f"{url}: {exc.code} ({exc.message})", file=sys.stderr)
            misses += 1
            continue

        print(url)
        print(f"  template: {match.route.url}")
        print(f"  hash:     {match.route.hash}")
        print(f"  rank:     {match.rank}")
        print(f"  config:   {json.dumps(match.config, sort_keys=True)}")

    if misses:
        raise SystemExit(1)
