"""Waypost CLI — inspect an application's router.

Entry point registered as ``waypost`` in ``pyproject.toml``::

    [project.scripts]
    waypost = "waypost.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waypost`` command."""
    parser = argparse.ArgumentParser(
        prog="waypost",
        description="Waypost — route matching and URL generation.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waypost routes ----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:router)")

    # -- waypost match -----------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Resolve a URI to its handler")
    match_parser.add_argument("app", help="Import string (e.g. myapp:router)")
    match_parser.add_argument("uri", help="Request path to match (e.g. /users/42)")
    match_parser.add_argument("--method", default=None, help="HTTP method filter")

    # -- waypost url -------------------------------------------------------
    url_parser = subparsers.add_parser("url", help="Generate a URL for a named route")
    url_parser.add_argument("app", help="Import string (e.g. myapp:router)")
    url_parser.add_argument("name", help="Route name")
    url_parser.add_argument(
        "params",
        nargs="*",
        metavar="key=value",
        help="Route parameters",
    )
    kind = url_parser.add_mutually_exclusive_group()
    kind.add_argument("--absolute", action="store_true", help="Render scheme://host/path")
    kind.add_argument("--network", action="store_true", help="Render //host/path")
    url_parser.add_argument("--scheme", default="http", help="Scheme for absolute URLs")
    url_parser.add_argument("--host", default="localhost", help="Host for absolute URLs")
    url_parser.add_argument("--port", type=int, default=None, help="Port for absolute URLs")
    url_parser.add_argument("--base-url", default="", help="Base path prefix")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from waypost.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from waypost.cli._match import run_match

        run_match(args)
    elif args.command == "url":
        from waypost.cli._url import run_url

        run_url(args)
