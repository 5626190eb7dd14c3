"""Waypost exception hierarchy.

Shared across Router, parsers, URL generator, and dispatcher so every
module raises and catches the same types. Embedding applications
usually catch ``RouterError`` at the top level and render a 404.
"""


class WaypostError(Exception):
    """Base for all waypost-specific errors."""


class ConfigurationError(WaypostError):
    """Raised when routes or router configuration are invalid.

    ``Router`` raises it at registration time. Routes added straight to a
    ``RouteCollection`` skip that check and fail when first matched.
    """


class InvalidDirectory(ConfigurationError):  # noqa: N818
    """A filesystem parser directory does not exist or is not a directory."""

    def __init__(self, directory: str) -> None:
        self.directory = directory
        super().__init__(f"Invalid directory: {directory}")


class RouterError(WaypostError):
    """Base for errors raised while matching or generating routes."""


class RouteNotFound(RouterError):  # noqa: N818
    """No parser produced a match for the URI."""

    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f'No route found for "{uri}".')


class NamedRouteNotFound(RouterError, KeyError):  # noqa: N818
    """No route is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'No route named "{name}".')

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class UrlGeneratorError(RouterError):
    """A URL could not be generated for a named route."""

    @classmethod
    def for_route_not_found(cls, name: str) -> "UrlGeneratorError":
        return cls(
            f'Unable to generate a URL for the named route "{name}" '
            "as such route does not exist."
        )


class MissingParameter(UrlGeneratorError, ValueError):  # noqa: N818
    """A required placeholder has no value during generation."""

    def __init__(self, parameter: str, pattern: str) -> None:
        self.parameter = parameter
        self.pattern = pattern
        super().__init__(
            f'Parameter "{parameter}" is required for route "{pattern}" '
            "but was not provided."
        )


class UnsupportedReferenceType(UrlGeneratorError, NotImplementedError):  # noqa: N818
    """The requested reference type cannot be rendered."""


class DispatchError(WaypostError):
    """A route match could not be turned into a result.

    Raised for unrecognised handler shapes, unknown targets, missing
    actions, and files without a registered renderer.
    """


class RenderingError(WaypostError):
    """Base for file renderer errors."""


class RenderingNotInstalledError(RenderingError):
    """Raised when the optional library behind a renderer is not installed."""
