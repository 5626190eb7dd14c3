"""Parameterised route parser.

Compiles route patterns with placeholders into anchored regular
expressions::

    "/users/{id}"         -> ^/users/(?P<id>[^/]+)$
    "/users/{id:\\d+}"     -> ^/users/(?P<id>\\d+)$
    "/blog/{year?}"       -> ^/blog(?:/(?P<year>[^/]+))?$
    "/articles/{slug}.html" -> ^/articles/(?P<slug>[^/]+)\\.html$

Literal text between placeholders is kept in place and escaped.
"""

import re
from collections.abc import Sequence

from waypost.errors import ConfigurationError
from waypost.routing.route import Route, RouteMatch

# Constraint used by placeholders without an explicit regex
DEFAULT_CONSTRAINT = r"[^/]+"

# {name}, {name?}, {name:regex}; the regex may hold one level of braces ({2,4})
PLACEHOLDER_RE = re.compile(r"\{((?:[^{}]|\{[^{}]*\})+)\}")


def build_regex(pattern: str) -> str:
    """Translate a route pattern into an anchored regular expression string."""
    parts: list[str] = []
    last = 0
    for placeholder in PLACEHOLDER_RE.finditer(pattern):
        parts.append(re.escape(pattern[last : placeholder.start()]))
        last = placeholder.end()
        inner = placeholder.group(1)

        if inner.endswith("?") and ":" not in inner:
            # Optional: swallow the separator before it so "/blog" matches too
            name = inner[:-1]
            if parts and parts[-1].endswith("/"):
                parts[-1] = parts[-1][:-1]
            parts.append(f"(?:/(?P<{name}>{DEFAULT_CONSTRAINT}))?")
        elif ":" in inner:
            name, constraint = inner.split(":", 1)
            parts.append(f"(?P<{name}>{constraint})")
        else:
            parts.append(f"(?P<{inner}>{DEFAULT_CONSTRAINT})")

    parts.append(re.escape(pattern[last:]))
    return "^" + "".join(parts) + "$"


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a route pattern, raising ``ConfigurationError`` if it is invalid."""
    try:
        return re.compile(build_regex(pattern))
    except re.error as exc:
        msg = f"Route pattern {pattern!r} does not compile: {exc}"
        raise ConfigurationError(msg) from exc


class PatternParser:
    """Match routes whose pattern contains ``{...}`` placeholders.

    Routes are tried in order; the first whose compiled expression
    matches the whole URI wins. Non-empty captures become parameters
    and override the route's declared defaults.
    """

    __slots__ = ()

    def supports(self, route: Route) -> bool:
        return "{" in route.pattern

    def parse(self, uri: str, routes: Sequence[Route]) -> RouteMatch | None:
        for route in routes:
            if not self.supports(route):
                continue
            match = compile_pattern(route.pattern).fullmatch(uri)
            if match is None:
                continue
            extracted = {key: value for key, value in match.groupdict().items() if value}
            return RouteMatch.for_route(route, {**route.parameters, **extracted})
        return None
