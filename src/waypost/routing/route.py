"""Route and RouteMatch frozen dataclasses."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from waypost.errors import ConfigurationError

# File path, "Target::action" string, structured config, or a callable
# taking the merged parameter mapping.
Handler: TypeAlias = str | Mapping[str, Any] | Callable[[dict[str, str]], Any]


@dataclass(frozen=True, slots=True)
class Route:
    """A registered pattern-to-handler binding.

    ``pattern`` is the registry key and may contain ``{name}``,
    ``{name?}`` and ``{name:regex}`` placeholders. ``methods`` and
    ``roles`` are opaque metadata for capability checks made outside
    the matching engine; an empty set means "no restriction".
    """

    pattern: str
    handler: Handler
    name: str | None = None
    parameters: Mapping[str, str] = field(default_factory=dict)
    methods: frozenset[str] = frozenset()
    roles: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if not self.pattern:
            msg = "Route pattern must not be empty."
            raise ConfigurationError(msg)
        # Normalise iterables passed by callers; frozen, so go through object.
        object.__setattr__(self, "parameters", dict(self.parameters))
        object.__setattr__(self, "methods", frozenset(m.upper() for m in self.methods))
        object.__setattr__(self, "roles", frozenset(self.roles))

    def allows_method(self, method: str) -> bool:
        return not self.methods or method.upper() in self.methods

    def has_role(self, role: str) -> bool:
        return role in self.roles

    def is_role_allowed(self, role: str) -> bool:
        return not self.roles or self.has_role(role)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match.

    ``parameters`` holds the route's declared defaults merged with the
    values extracted from the URI, extracted values taking precedence.
    ``module`` is a free-form grouping tag the core never interprets.
    """

    handler: Handler
    parameters: Mapping[str, str] = field(default_factory=dict)
    name: str | None = None
    module: str | None = None
    route: Route | None = field(default=None, compare=False, repr=False)

    @classmethod
    def for_route(
        cls,
        route: Route,
        parameters: Mapping[str, str] | None = None,
        module: str | None = None,
    ) -> "RouteMatch":
        """Build a match carrying *route*'s handler and name."""
        return cls(
            handler=route.handler,
            parameters=dict(route.parameters if parameters is None else parameters),
            name=route.name,
            module=module,
            route=route,
        )
