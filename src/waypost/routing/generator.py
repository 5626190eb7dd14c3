"""Reverse URL generation for named routes.

Rebuilds a concrete path from a route pattern and a parameter mapping,
then optionally renders it against a ``RequestContext``::

    generator.generate("user.show", {"id": 42})          # "/users/42"
    generator.generate("home", reference_type=ReferenceType.NETWORK_PATH)
    # "//example.com/base/"
"""

import re
from collections.abc import Mapping
from typing import Any

from waypost.errors import (
    MissingParameter,
    NamedRouteNotFound,
    UnsupportedReferenceType,
    UrlGeneratorError,
)
from waypost.routing.collection import RouteCollection
from waypost.routing.context import ReferenceType, RequestContext
from waypost.routing.route import Route

# {name} and {name:regex}; optional placeholders are left for the second pass
_REQUIRED_RE = re.compile(r"\{([^:}?]+)(?::(?:[^{}]|\{[^{}]*\})+)?\}")

# "/{name?}" including the separator it owns
_OPTIONAL_RE = re.compile(r"/\{([^:}]+)\?\}")


class UrlGenerator:
    """Generate paths and URLs for routes in a ``RouteCollection``.

    Stateless apart from the held context, which the router swaps per
    request via ``set_context()``.
    """

    __slots__ = ("_context", "_routes")

    def __init__(self, routes: RouteCollection, context: RequestContext | None = None) -> None:
        self._routes = routes
        self._context = context

    @property
    def context(self) -> RequestContext | None:
        return self._context

    def set_context(self, context: RequestContext | None) -> "UrlGenerator":
        self._context = context
        return self

    def get_context(self) -> RequestContext | None:
        return self._context

    def generate(
        self,
        name: str,
        parameters: Mapping[str, Any] | None = None,
        reference_type: ReferenceType = ReferenceType.ABSOLUTE_PATH,
    ) -> str:
        """Generate a URL for the route registered as *name*.

        Raises ``UrlGeneratorError`` for unknown names, ``MissingParameter``
        when a required placeholder has no value, and
        ``UnsupportedReferenceType`` for ``RELATIVE_PATH``.
        """
        try:
            route = self._routes.get_by_name(name)
        except NamedRouteNotFound as exc:
            raise UrlGeneratorError.for_route_not_found(name) from exc

        path = build_path(route, parameters or {})
        reference_type = ReferenceType(reference_type)

        if self._context is None or reference_type is ReferenceType.ABSOLUTE_PATH:
            return path
        return _apply_reference_type(path, reference_type, self._context)


def _apply_reference_type(
    path: str, reference_type: ReferenceType, context: RequestContext
) -> str:
    """Prefix the base URL and render *path* as an absolute or network URL.

    ``RELATIVE_PATH`` would need the current ``path_info`` to work out
    ``../`` hops and is not supported.
    """
    path = context.base_url + path
    if reference_type is ReferenceType.ABSOLUTE_URL:
        return f"{context.scheme}://{context.host}{_port_suffix(context)}{path}"
    if reference_type is ReferenceType.NETWORK_PATH:
        return f"//{context.host}{_port_suffix(context)}{path}"
    msg = "Relative path generation is not implemented yet."
    raise UnsupportedReferenceType(msg)


def _port_suffix(context: RequestContext) -> str:
    """``:port`` when the port is not the scheme's standard one."""
    if context.port == context.standard_port:
        return ""
    return f":{context.port}"


def build_path(route: Route, parameters: Mapping[str, Any]) -> str:
    """Substitute *parameters* into *route*'s pattern.

    Caller parameters override the route's declared ones. Required
    placeholders must have a value; optional ones collapse together
    with their leading separator when absent.
    """
    merged = {**route.parameters, **parameters}

    def required(match: re.Match[str]) -> str:
        name = match.group(1)
        if merged.get(name) is None:
            raise MissingParameter(name, route.pattern)
        return str(merged[name])

    def optional(match: re.Match[str]) -> str:
        value = merged.get(match.group(1))
        return "" if value is None else f"/{value}"

    path = _REQUIRED_RE.sub(required, route.pattern)
    return _OPTIONAL_RE.sub(optional, path)
