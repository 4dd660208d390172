"""``routable resolve`` — show which template a url matches.

Prints the matched template and the merged parameters without invoking
the route's callback. Exits with code 1 if nothing matches.
"""

import argparse
import json
import logging
import sys

from routable.cli._resolve import LOAD_ERRORS, resolve_router
from routable.errors import InvalidTemplate, RouteNotFound

logger = logging.getLogger("routable.cli")


def run_lookup(args: argparse.Namespace) -> None:
    """Match ``args.url`` against the router at ``args.router``."""
    try:
        router = resolve_router(args.router)
    except LOAD_ERRORS as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        found = router.match(args.url)
        params = router.params_for(args.url)
    except (RouteNotFound, InvalidTemplate) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logger.debug("Resolved %r via %r", args.url, found.template.pattern)

    if args.json:
        payload = {"template": found.template.pattern, "params": params}
        print(json.dumps(payload, indent=2, sort_keys=True, default=str))
        return

    print(f"template: {found.template.pattern or '/'}")
    for name in sorted(params):
        print(f"  {name} = {params[name]}")
