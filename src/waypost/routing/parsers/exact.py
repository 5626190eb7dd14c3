"""Exact (literal) route parser."""

from collections.abc import Sequence

from waypost.routing.route import Route, RouteMatch

# Characters that mark a pattern as dynamic
_DYNAMIC_MARKERS = ("{", "*", ":")


class ExactParser:
    """Match URIs that equal a route pattern verbatim.

    Only routes without ``{``, ``*`` or ``:`` in their pattern are
    considered. No normalisation happens here beyond what the router
    already applied to the URI.
    """

    __slots__ = ()

    def supports(self, route: Route) -> bool:
        return not any(marker in route.pattern for marker in _DYNAMIC_MARKERS)

    def parse(self, uri: str, routes: Sequence[Route]) -> RouteMatch | None:
        for route in routes:
            if self.supports(route) and route.pattern == uri:
                return RouteMatch.for_route(route)
        return None
