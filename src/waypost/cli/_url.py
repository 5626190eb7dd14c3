"""``waypost url`` — generate a URL for a named route."""

import argparse
import sys

from waypost.cli._resolve import resolve_or_exit
from waypost.errors import UrlGeneratorError
from waypost.routing.context import ReferenceType, RequestContext


def parse_params(pairs: list[str]) -> dict[str, str]:
    """Turn ``["id=42", "slug=hello"]`` into a dict.

    Raises ``SystemExit(2)`` for entries without ``=``, like argparse does.
    """
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            print(f"Error: expected key=value, got {pair!r}", file=sys.stderr)
            raise SystemExit(2)
        params[key] = value
    return params


def run_url(args: argparse.Namespace) -> None:
    router = resolve_or_exit(args)
    params = parse_params(args.params)

    reference_type = ReferenceType.ABSOLUTE_PATH
    if args.absolute:
        reference_type = ReferenceType.ABSOLUTE_URL
    elif args.network:
        reference_type = ReferenceType.NETWORK_PATH

    if reference_type is not ReferenceType.ABSOLUTE_PATH:
        context = RequestContext(base_url=args.base_url, host=args.host, scheme=args.scheme)
        if args.port is not None:
            if args.scheme == "https":
                context.https_port = args.port
            else:
                context.http_port = args.port
        router.set_context(context)

    try:
        url = router.generate(args.name, params, reference_type)
    except UrlGeneratorError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(url)
