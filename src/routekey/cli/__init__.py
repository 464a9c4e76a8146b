"""routekey CLI — inspect a routes file and try URLs against it.

Entry point registered as ``routekey`` in ``pyproject.toml``::

    [project.scripts]
    routekey = "routekey.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routekey`` command."""
    parser = argparse.ArgumentParser(
        prog="routekey",
        description="routekey — match URLs to registered URL templates.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log registrations at DEBUG level",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routekey routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List templates in a routes file")
    routes_parser.add_argument("routes_file", help="JSON file mapping template URLs to configs")

    # -- routekey match ---------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match URLs against a routes file")
    match_parser.add_argument("routes_file", help="JSON file mapping template URLs to configs")
    match_parser.add_argument("urls", nargs="+", metavar="URL", help="URL to match")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "routes":
        from routekey.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from routekey.cli._match import run_match

        run_match(args)
