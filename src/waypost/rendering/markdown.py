"""Markdown file renderer backed by patitas.

Renders ``.md`` files matched by the filesystem parser to HTML. Give it
a ``TemplateRenderer`` and a layout name to wrap the HTML in a page; the
layout receives the match parameters plus ``content``::

    markdown = MarkdownRenderer(layout=(templates, "markdown.html"))
    dispatcher.add_renderer("md", markdown)

Requires ``patitas``::

    pip install waypost[markdown]
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from waypost.errors import RenderingNotInstalledError

if TYPE_CHECKING:
    from patitas import Markdown

    from waypost.rendering.templates import TemplateRenderer


class MarkdownRenderer:
    """Render Markdown files to HTML via patitas.

    Args:
        layout: Optional ``(template_renderer, template_name)`` pair the
            rendered HTML is injected into as ``content``.
        plugins: Patitas plugins to enable (default: all).
        highlight: Enable syntax highlighting for fenced code blocks.
    """

    __slots__ = ("_layout", "_md")

    def __init__(
        self,
        *,
        layout: tuple[TemplateRenderer, str] | None = None,
        plugins: list[str] | None = None,
        highlight: bool = False,
    ) -> None:
        self._layout = layout
        self._md: Markdown = _get_markdown(plugins=plugins, highlight=highlight)

    def __call__(self, file: str, params: Mapping[str, Any]) -> str:
        html = self.render(Path(file).read_text(encoding="utf-8"))
        if self._layout is None:
            return html
        # A layout implies a TemplateRenderer, so kida is importable here.
        from kida.template import Markup

        templates, name = self._layout
        return templates.render_template(name, {**params, "content": Markup(html)})

    def render(self, source: str) -> str:
        """Render Markdown source to an HTML string."""
        if not source:
            return ""
        return self._md(source)


def _get_markdown(*, plugins: list[str] | None, highlight: bool) -> Markdown:
    """Create a patitas Markdown instance, raising a clear error if missing."""
    try:
        from patitas import Markdown
    except ImportError:
        msg = (
            "waypost.rendering.MarkdownRenderer requires 'patitas'. "
            "Install with: pip install waypost[markdown]"
        )
        raise RenderingNotInstalledError(msg) from None

    return Markdown(plugins=plugins or ["all"], highlight=highlight)
