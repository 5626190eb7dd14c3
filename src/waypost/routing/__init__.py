"""Routing — route registry, parser chain, and reverse URL generation.

Routes are registered during setup and matched by an ordered chain of
parsers. Named routes can be turned back into paths and URLs.
"""

from waypost.routing.collection import RouteCollection
from waypost.routing.context import ReferenceType, RequestContext
from waypost.routing.generator import UrlGenerator
from waypost.routing.parsers import ExactParser, FileSystemParser, Parser, PatternParser
from waypost.routing.route import Handler, Route, RouteMatch
from waypost.routing.router import Router, normalize_uri

__all__ = [
    "ExactParser",
    "FileSystemParser",
    "Handler",
    "Parser",
    "PatternParser",
    "ReferenceType",
    "RequestContext",
    "Route",
    "RouteCollection",
    "RouteMatch",
    "Router",
    "UrlGenerator",
    "normalize_uri",
]
