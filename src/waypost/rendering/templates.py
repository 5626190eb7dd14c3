"""Template file renderer backed by kida.

Renders template files matched by the filesystem parser (``.html.twig``,
``.html``) with the match parameters as context::

    renderer = TemplateRenderer(["pages", "layouts"])
    dispatcher.add_renderer("twig", renderer)

Requires ``kida``::

    pip install waypost[templates]
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from waypost.errors import RenderingError, RenderingNotInstalledError

if TYPE_CHECKING:
    from kida import Environment


class TemplateRenderer:
    """Render template files found under one of the search paths.

    Args:
        search_paths: Template directories, searched in order. A file
            handed to the renderer must live under one of them.
        autoescape: HTML-escape interpolated values.
    """

    __slots__ = ("_env", "_search_paths")

    def __init__(self, search_paths: Iterable[str | Path], *, autoescape: bool = True) -> None:
        self._search_paths = tuple(Path(p).resolve() for p in search_paths)
        self._env: Environment = _get_environment(self._search_paths, autoescape=autoescape)

    @property
    def environment(self) -> Environment:
        return self._env

    def __call__(self, file: str, params: Mapping[str, Any]) -> str:
        return self.render_template(self.template_name(file), params)

    def render_template(self, name: str, context: Mapping[str, Any]) -> str:
        """Render the template registered as *name* with *context*."""
        template = self._env.get_template(name)
        return template.render(dict(context))

    def template_name(self, file: str | Path) -> str:
        """Return *file*'s name relative to the search path that holds it."""
        path = Path(file).resolve()
        for root in self._search_paths:
            if path.is_relative_to(root):
                return path.relative_to(root).as_posix()
        roots = ", ".join(str(root) for root in self._search_paths)
        msg = f"Template {file} is outside the search paths: {roots}"
        raise RenderingError(msg)


def _get_environment(search_paths: tuple[Path, ...], *, autoescape: bool) -> Environment:
    """Create a kida Environment, raising a clear error if kida is missing."""
    try:
        from kida import ChoiceLoader, Environment, FileSystemLoader
    except ImportError:
        msg = (
            "waypost.rendering.TemplateRenderer requires 'kida'. "
            "Install with: pip install waypost[templates]"
        )
        raise RenderingNotInstalledError(msg) from None

    loader = ChoiceLoader([FileSystemLoader(str(path)) for path in search_paths])
    return Environment(loader=loader, autoescape=autoescape)
