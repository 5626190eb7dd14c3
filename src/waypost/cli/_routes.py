"""``waypost routes`` — list registered routes.

Resolves an import string to a Router and prints every registered
route with its pattern, name, and handler.
"""

import argparse

from waypost.cli._resolve import resolve_or_exit
from waypost.routing.route import Handler


def handler_label(handler: Handler) -> str:
    """Short printable description of a handler."""
    if isinstance(handler, str):
        return handler
    if callable(handler):
        return getattr(handler, "__qualname__", None) or repr(handler)
    if "target" in handler and "action" in handler:
        return f"{handler['target']}::{handler['action']}"
    return repr(dict(handler))


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of PATTERN, NAME, and HANDLER for ``args.app``."""
    router = resolve_or_exit(args)

    routes = router.routes.all()
    if not routes:
        print("No routes registered.")
        return

    rows = [(route.pattern, route.name or "-", handler_label(route.handler)) for route in routes]

    # Column widths
    max_pattern = max(max(len(r[0]) for r in rows), 7)  # "PATTERN" header
    max_name = max(max(len(r[1]) for r in rows), 4)  # "NAME" header

    fmt = f"{{:<{max_pattern}}}  {{:<{max_name}}}  {{}}"
    print(fmt.format("PATTERN", "NAME", "HANDLER"))
    sep_len = max_pattern + max_name + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for pattern, name, handler in rows:
        print(fmt.format(pattern, name, handler))
