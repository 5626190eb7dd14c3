"""Route parsers — pluggable matching strategies.

Register them on a ``Router`` in the order they should be tried.
"""

from waypost.routing.parsers.exact import ExactParser
from waypost.routing.parsers.filesystem import FileSystemParser
from waypost.routing.parsers.pattern import PatternParser
from waypost.routing.parsers.protocol import Parser

__all__ = ["ExactParser", "FileSystemParser", "Parser", "PatternParser"]
