"""Filesystem-backed route parser.

Maps a URI straight onto a file under one of the registered
directories, trying each accepted suffix in turn::

    parser = FileSystemParser(["pages"], [".html.twig", ".md"])
    parser.parse("/blog/post", [])   # -> handler ".../pages/blog/post.md"

Every call checks the disk; nothing is cached. Files that resolve outside
their directory (via ``..`` segments or symlinks) are never matched.
"""

from collections.abc import Iterable, Sequence
from pathlib import Path

from waypost.errors import InvalidDirectory
from waypost.routing.route import Route, RouteMatch


class FileSystemParser:
    """Synthesise routes for files found under registered directories.

    Directories are searched most-recently-added first. Suffixes are
    tried in the order they were configured.
    """

    __slots__ = ("_directories", "_extensions")

    def __init__(self, directories: Iterable[str | Path], extensions: Iterable[str]) -> None:
        self._directories: list[Path] = []
        self._extensions: tuple[str, ...] = tuple(extensions)
        for directory in directories:
            self.add_directory(directory)

    @property
    def directories(self) -> tuple[Path, ...]:
        return tuple(self._directories)

    @property
    def extensions(self) -> tuple[str, ...]:
        return self._extensions

    def add_directory(self, directory: str | Path) -> "FileSystemParser":
        """Register *directory* ahead of the ones already known.

        Raises ``InvalidDirectory`` if the path is missing or not a directory.
        """
        path = Path(directory)
        if not path.is_dir():
            raise InvalidDirectory(str(directory))
        resolved = path.resolve()
        if resolved not in self._directories:
            self._directories.insert(0, resolved)
        return self

    def supports(self, route: Route) -> bool:
        handler = route.handler
        return isinstance(handler, str) and handler.endswith(self._extensions)

    def parse(self, uri: str, routes: Sequence[Route]) -> RouteMatch | None:
        # Registered routes play no part; the filesystem is the registry.
        path = uri.lstrip("/")
        for directory in self._directories:
            for extension in self._extensions:
                candidate = Path(f"{directory}/{path}{extension}")
                if not candidate.exists():
                    continue
                # ".." segments or symlinks must not reach outside the directory
                if not candidate.resolve().is_relative_to(directory):
                    continue
                route = Route(
                    pattern="/" + path,
                    handler=str(candidate),
                    parameters={"uri": uri},
                )
                return RouteMatch.for_route(route)
        return None
