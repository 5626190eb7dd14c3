"""Waypost — route matching and reverse URL generation.

Resolves request paths to registered handlers through an ordered chain
of parsers, and turns named routes back into paths and URLs. Embeds in
any front end: HTTP servers, static-site generators, CLI multiplexers.

Basic usage::

    from waypost import ExactParser, PatternParser, Router

    router = Router([ExactParser(), PatternParser()])
    router.add_route("/", "pages/index.md", name="home")
    router.add_route("/users/{id:\\d+}", "myapp.users.Users::show", name="user.show")

    match = router.match("/users/42")   # match.parameters == {"id": "42"}
    router.generate("user.show", {"id": 7})  # "/users/7"

File rendering (``pip install waypost[templates,markdown]``)::

    from waypost import Dispatcher
    from waypost.rendering import MarkdownRenderer

    body = Dispatcher({"md": MarkdownRenderer()}).dispatch(match)
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DispatchError",
    "Dispatcher",
    "ExactParser",
    "FileSystemParser",
    "MissingParameter",
    "NamedRouteNotFound",
    "Parser",
    "PatternParser",
    "ReferenceType",
    "RequestContext",
    "Route",
    "RouteCollection",
    "RouteMatch",
    "RouteNotFound",
    "Router",
    "RouterConfig",
    "RouterError",
    "UnsupportedReferenceType",
    "UrlGenerator",
    "UrlGeneratorError",
    "WaypostError",
]

_ROUTING = frozenset(
    {
        "ExactParser",
        "FileSystemParser",
        "Parser",
        "PatternParser",
        "ReferenceType",
        "RequestContext",
        "Route",
        "RouteCollection",
        "RouteMatch",
        "Router",
        "UrlGenerator",
    }
)

_ERRORS = frozenset(
    {
        "ConfigurationError",
        "DispatchError",
        "MissingParameter",
        "NamedRouteNotFound",
        "RouteNotFound",
        "RouterError",
        "UnsupportedReferenceType",
        "UrlGeneratorError",
        "WaypostError",
    }
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypost`` fast while providing a clean top-level API.
    """
    if name in _ROUTING:
        from waypost import routing as _routing

        return getattr(_routing, name)

    if name in _ERRORS:
        from waypost import errors as _errors

        return getattr(_errors, name)

    if name == "Dispatcher":
        from waypost.dispatch import Dispatcher

        return Dispatcher

    if name == "RouterConfig":
        from waypost.config import RouterConfig

        return RouterConfig

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
