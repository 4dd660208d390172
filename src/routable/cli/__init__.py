"""Routable CLI — inspect, validate, and try out a router.

Entry point registered as ``routable`` in ``pyproject.toml``::

    [project.scripts]
    routable = "routable.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routable`` command."""
    parser = argparse.ArgumentParser(
        prog="routable",
        description="Routable — resolve urls against path templates.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log matching and cache decisions to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routable routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered templates")
    routes_parser.add_argument(
        "router",
        help="Module or file with the router (e.g. myapp.urls:router, conf/urls.py)",
    )

    # -- routable resolve -------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Match a url and show its params")
    resolve_parser.add_argument(
        "router",
        help="Module or file with the router (e.g. myapp.urls:router, conf/urls.py)",
    )
    resolve_parser.add_argument("url", help="Url or path to resolve (e.g. users/42?tab=photos)")
    resolve_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    # -- routable check ---------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate every template")
    check_parser.add_argument(
        "router",
        help="Module or file with the router (e.g. myapp.urls:router, conf/urls.py)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "routes":
        from routable.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from routable.cli._lookup import run_lookup

        run_lookup(args)
    elif args.command == "check":
        from routable.cli._check import run_check

        run_check(args)
