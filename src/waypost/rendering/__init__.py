"""File renderers for the dispatcher.

Both are optional extras::

    pip install waypost[templates]   # kida
    pip install waypost[markdown]    # patitas
"""

from waypost.rendering.markdown import MarkdownRenderer
from waypost.rendering.templates import TemplateRenderer

__all__ = ["MarkdownRenderer", "TemplateRenderer"]
