"""Locate the application's router for the ``waypost`` subcommands.

``APP`` is ``module[:attribute]`` with the attribute defaulting to
``router``. The attribute may hold a ``Router``, a ``RouterConfig`` (built
with ``Router.from_config``), or a zero-argument callable returning either.
"""

import argparse
import importlib
import sys

from waypost.config import RouterConfig
from waypost.errors import WaypostError
from waypost.routing.router import Router


def resolve_router(import_string: str) -> Router:
    module_name, _, attr = import_string.partition(":")
    target = getattr(importlib.import_module(module_name), attr or "router")

    if callable(target) and not isinstance(target, Router):
        target = target()
    if isinstance(target, RouterConfig):
        return Router.from_config(target)
    if isinstance(target, Router):
        return target

    msg = f"{import_string!r} is a {type(target).__name__}, expected a Router or RouterConfig"
    raise TypeError(msg)


def resolve_or_exit(args: argparse.Namespace) -> Router:
    """Resolve ``args.app``; print the problem and exit 1 if it cannot be loaded.

    Anything else a factory raises propagates with its traceback.
    """
    try:
        return resolve_router(args.app)
    except (ImportError, AttributeError, TypeError, WaypostError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
