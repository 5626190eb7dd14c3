"""``waypost match`` — resolve a URI against an application's router."""

import argparse
import sys

from waypost.cli._resolve import resolve_or_exit
from waypost.cli._routes import handler_label
from waypost.errors import RouteNotFound


def run_match(args: argparse.Namespace) -> None:
    router = resolve_or_exit(args)

    try:
        match = router.match(args.uri, method=args.method)
    except RouteNotFound as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"handler:    {handler_label(match.handler)}")
    print(f"name:       {match.name or '-'}")
    if match.parameters:
        print("parameters:")
        for key, value in match.parameters.items():
            print(f"  {key} = {value}")
    else:
        print("parameters: (none)")
