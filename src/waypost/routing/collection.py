"""In-memory route registry keyed by pattern and by name.

Built once at startup by the embedding application and treated as
read-only while requests are matched. There is no internal locking:
finish registration before serving, or guard ``add()`` externally in
multi-threaded hosts.
"""

from collections.abc import Iterator

from waypost.errors import NamedRouteNotFound
from waypost.routing.route import Route


class RouteCollection:
    """Routes indexed by pattern (insertion ordered) and by name.

    Registering a pattern or name that already exists overwrites the
    previous entry. An overwritten pattern keeps its original position
    and the replaced route's name is unregistered with it.

    Usage::

        routes = RouteCollection()
        routes.add(Route("/users/{id}", "users.py", name="user.show"))
        routes.get_by_name("user.show").pattern  # "/users/{id}"
    """

    __slots__ = ("_by_name", "_routes")

    def __init__(self) -> None:
        self._routes: dict[str, Route] = {}
        self._by_name: dict[str, Route] = {}

    def add(self, route: Route) -> "RouteCollection":
        replaced = self._routes.get(route.pattern)
        if replaced is not None and replaced.name is not None:
            # Unless the name was since reassigned to another route
            if self._by_name.get(replaced.name) is replaced:
                del self._by_name[replaced.name]
        self._routes[route.pattern] = route
        if route.name is not None:
            self._by_name[route.name] = route
        return self

    def get(self, pattern: str) -> Route | None:
        return self._routes.get(pattern)

    def has(self, pattern: str) -> bool:
        return pattern in self._routes

    def all(self) -> list[Route]:
        """Return every route in registration order."""
        return list(self._routes.values())

    def get_by_name(self, name: str) -> Route:
        """Return the route registered under *name*.

        Raises ``NamedRouteNotFound`` if no such route exists.
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise NamedRouteNotFound(name) from None

    def has_by_name(self, name: str) -> bool:
        return name in self._by_name

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._routes

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes.values())

    def __len__(self) -> int:
        return len(self._routes)
