"""Parser protocol.

A parser is any object with this shape::

    class MyParser:
        def supports(self, route: Route) -> bool: ...
        def parse(self, uri: str, routes: Sequence[Route]) -> RouteMatch | None: ...

No base class required. The router keeps parsers in an explicit ordered
list and takes the first non-``None`` result, so registration order is
the precedence rule.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from waypost.routing.route import Route, RouteMatch


@runtime_checkable
class Parser(Protocol):
    """Protocol for route parsers (matching strategies)."""

    def supports(self, route: Route) -> bool:
        """Return True if this parser knows how to match *route*."""
        ...

    def parse(self, uri: str, routes: Sequence[Route]) -> RouteMatch | None:
        """Return a match for *uri* among *routes*, or ``None``."""
        ...
