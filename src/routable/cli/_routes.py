"""``routable routes`` — list registered templates.

Resolves an import string to a Router and prints every template in
resolution order with its kind and callback.
"""

import argparse
import sys

from routable.cli._resolve import LOAD_ERRORS, resolve_router
from routable.routing.route import parse_template


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of KIND, TEMPLATE, and callback name."""
    try:
        router = resolve_router(args.router)
    except LOAD_ERRORS as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = []
    for pattern, options in routes:
        kind = "wildcard" if parse_template(pattern).has_wildcard else "exact"
        callback = options.callback
        if callback is None:
            callback_name = "-"
        else:
            callback_name = getattr(callback, "__name__", str(callback))
        rows.append((kind, pattern or "/", callback_name))

    max_kind = max(max(len(r[0]) for r in rows), 4)  # "KIND" header
    max_template = max(max(len(r[1]) for r in rows), 8)  # "TEMPLATE" header

    fmt = f"{{:<{max_kind}}}  {{:<{max_template}}}  {{}}"
    print(fmt.format("KIND", "TEMPLATE", "CALLBACK"))
    sep_len = max_kind + max_template + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for kind, pattern, callback_name in rows:
        print(fmt.format(kind, pattern, callback_name))
