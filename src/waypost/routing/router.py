"""Router — registration API and the ``match()`` entry point.

Owns the route collection, the ordered parser chain, and the URL
generator. Parsers are tried in registration order and the first one
to return a match wins, so registration order is how callers choose
precedence (exact before pattern prefers literal routes).
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from waypost.config import RouterConfig
from waypost.errors import ConfigurationError, RouteNotFound
from waypost.routing.collection import RouteCollection
from waypost.routing.context import ReferenceType, RequestContext
from waypost.routing.generator import UrlGenerator
from waypost.routing.parsers import ExactParser, FileSystemParser, Parser, PatternParser
from waypost.routing.parsers.pattern import compile_pattern
from waypost.routing.route import Handler, Route, RouteMatch

logger = logging.getLogger("waypost.routing")


def normalize_uri(uri: str) -> str:
    """Trim every leading/trailing ``/`` and prefix exactly one."""
    return "/" + uri.strip("/")


class Router:
    """Route registry plus an ordered chain of parsers.

    Usage::

        router = Router()
        router.add_parser(ExactParser()).add_parser(PatternParser())
        router.add_route("/", "pages/index.md", name="home")
        router.add_route("/users/{id:\\d+}", "Users::show", name="user.show")

        match = router.match("/users/42")   # match.parameters == {"id": "42"}
        router.generate("user.show", {"id": 7})  # "/users/7"

    The collection is not locked. Register every route before serving
    requests; in multi-threaded hosts guard late registration externally.
    """

    __slots__ = ("_parsers", "_routes", "_url_generator")

    def __init__(
        self,
        parsers: Iterable[Parser] = (),
        routes: Mapping[str, Any] | Sequence[Mapping[str, Any]] = (),
        context: RequestContext | None = None,
    ) -> None:
        self._parsers: list[Parser] = list(parsers)
        self._routes = RouteCollection()
        self._url_generator = UrlGenerator(self._routes, context)
        if routes:
            self.add_routes(routes)

    @classmethod
    def from_config(cls, config: RouterConfig) -> "Router":
        """Build a router with the parser chain and routes *config* describes."""
        router = cls()
        if config.exact:
            router.add_parser(ExactParser())
        if config.pattern:
            router.add_parser(PatternParser())
        if config.directories:
            router.add_parser(FileSystemParser(config.directories, config.extensions))
        if config.routes:
            router.add_routes(config.routes)
        return router

    # -- Registration --

    @property
    def parsers(self) -> tuple[Parser, ...]:
        return tuple(self._parsers)

    @property
    def routes(self) -> RouteCollection:
        return self._routes

    def add_parser(self, parser: Parser) -> "Router":
        self._parsers.append(parser)
        return self

    def add_route(
        self,
        pattern: str,
        handler: Handler,
        name: str | None = None,
        parameters: Mapping[str, str] | None = None,
        methods: Iterable[str] = (),
        roles: Iterable[str] = (),
    ) -> "Router":
        """Register a route.

        Placeholder patterns are compiled here, so a malformed one raises
        ``ConfigurationError`` before it can reach ``match()``.
        """
        route = Route(
            pattern=pattern,
            handler=handler,
            name=name,
            parameters=dict(parameters or {}),
            methods=frozenset(methods),
            roles=frozenset(roles),
        )
        if "{" in route.pattern:
            compile_pattern(route.pattern)
        self._routes.add(route)
        return self

    def add_routes(
        self,
        definitions: Mapping[str, Any] | Sequence[Mapping[str, Any]],
    ) -> "Router":
        """Register routes from plain data.

        Accepted shapes::

            {"user.show": {"path": "/users/{id}", "handler": "Users::show"}}
            {"/about": "pages/about.md"}          # unnamed route
            [{"name": "home", "path": "/", "handler": "index.md"}]

        Configs may also carry ``defaults`` (or ``parameters``),
        ``methods`` and ``roles``. ``route`` is accepted as an alias of
        ``path``. Raises ``ConfigurationError`` for anything else.
        """
        if isinstance(definitions, Mapping):
            for key, value in definitions.items():
                if isinstance(value, str):
                    self.add_route(key, value)
                elif isinstance(value, Mapping):
                    self._add_definition({**value, "name": key}, key)
                else:
                    msg = f"Invalid route configuration for {key!r}."
                    raise ConfigurationError(msg)
            return self

        for index, value in enumerate(definitions):
            if not isinstance(value, Mapping):
                msg = f"Invalid route configuration at index {index}."
                raise ConfigurationError(msg)
            self._add_definition(value, str(index))
        return self

    def _add_definition(self, definition: Mapping[str, Any], label: str) -> None:
        name = definition.get("name")
        path = definition.get("path", definition.get("route"))
        handler = definition.get("handler")
        if path is None:
            msg = f'Path is required in route "{name or label}".'
            raise ConfigurationError(msg)
        if handler is None:
            msg = f'Handler is required in route "{name or label}".'
            raise ConfigurationError(msg)
        self.add_route(
            path,
            handler,
            name=name,
            parameters=definition.get("defaults", definition.get("parameters")),
            methods=definition.get("methods", ()),
            roles=definition.get("roles", ()),
        )

    # -- Matching --

    def match(self, uri: str | None = None, method: str | None = None) -> RouteMatch:
        """Resolve *uri* to a ``RouteMatch``.

        When *uri* is omitted, the context's ``path_info`` is used (its
        base path is already stripped). When *method* is given, routes
        restricted to other methods are skipped before any parser runs.

        Raises ``RouteNotFound`` carrying the normalised URI.
        """
        if uri is None:
            context = self.get_context()
            uri = context.path_info if context is not None else "/"
        uri = normalize_uri(uri)

        routes = self._routes.all()
        if method is not None:
            routes = [route for route in routes if route.allows_method(method)]

        for parser in self._parsers:
            match = parser.parse(uri, routes)
            if match is not None:
                logger.debug(
                    "%s matched %r via %s",
                    match.name or "<unnamed>",
                    uri,
                    type(parser).__name__,
                )
                return match

        logger.debug("No route found for %r", uri)
        raise RouteNotFound(uri)

    # -- URL generation --

    @property
    def url_generator(self) -> UrlGenerator:
        return self._url_generator

    def generate(
        self,
        name: str,
        parameters: Mapping[str, Any] | None = None,
        reference_type: ReferenceType = ReferenceType.ABSOLUTE_PATH,
    ) -> str:
        return self._url_generator.generate(name, parameters, reference_type)

    @property
    def context(self) -> RequestContext | None:
        return self._url_generator.get_context()

    def set_context(self, context: RequestContext | None) -> "Router":
        self._url_generator.set_context(context)
        return self

    def get_context(self) -> RequestContext | None:
        return self._url_generator.get_context()
