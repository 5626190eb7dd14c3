"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, no
string-key dict lookups. Build a router from it with
``Router.from_config(config)``.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from waypost.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Parser chain and route definitions for a router.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(directories=("pages",), routes={"home": {"path": "/", "handler": "README.md"}})
    """

    # Parsers, registered in this order: exact, pattern, filesystem
    exact: bool = True
    pattern: bool = True

    # Filesystem parser (enabled when directories is non-empty)
    directories: tuple[str | Path, ...] = ()
    extensions: tuple[str, ...] = (".html.twig", ".md")

    # Route definitions, see Router.add_routes()
    routes: Mapping[str, Any] | Sequence[Mapping[str, Any]] = ()

    def __post_init__(self) -> None:
        for extension in self.extensions:
            if not extension or not extension.startswith("."):
                msg = f"File extension {extension!r} must start with '.'."
                raise ConfigurationError(msg)
