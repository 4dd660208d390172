"""``routable check`` — template validation command.

Resolves an import string to a Router and validates every registered
template.  Exits with code 1 if one is malformed.
"""

import argparse
import sys

from routable.cli._resolve import LOAD_ERRORS, resolve_router
from routable.errors import InvalidTemplate


def run_check(args: argparse.Namespace) -> None:
    """Validate every template of the router at ``args.router``."""
    try:
        router = resolve_router(args.router)
    except LOAD_ERRORS as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        router.check()
    except InvalidTemplate as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"{len(router.routes)} route(s) OK")
