"""Dispatcher — turns a ``RouteMatch`` into a result.

Branches on the handler shape:

- a path to an existing file is rendered by the renderer registered for
  its extension (``"md"``, ``"twig"``, ...);
- ``"package.module.Target::action"`` instantiates ``Target`` with no
  arguments and calls ``action(parameters)``;
- a mapping with ``target`` and ``action`` keys does the same, merging
  its optional ``parameters`` under the match parameters;
- any other callable is called with the parameters.

Anything else raises ``DispatchError``.
"""

import importlib
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, TypeAlias

from waypost.errors import DispatchError
from waypost.routing.route import RouteMatch

logger = logging.getLogger("waypost.dispatch")

# (file_path, parameters) -> rendered body
Renderer: TypeAlias = Callable[[str, dict[str, Any]], str]


class Dispatcher:
    """Execute route handlers.

    Usage::

        dispatcher = Dispatcher()
        dispatcher.add_renderer("md", MarkdownRenderer())
        body = dispatcher.dispatch(router.match("/blog/post"))
    """

    __slots__ = ("_renderers",)

    def __init__(self, renderers: Mapping[str, Renderer] | None = None) -> None:
        self._renderers: dict[str, Renderer] = {}
        for extension, renderer in (renderers or {}).items():
            self.add_renderer(extension, renderer)

    def add_renderer(self, extension: str, renderer: Renderer) -> "Dispatcher":
        """Register *renderer* for files ending in ``.extension``."""
        self._renderers[extension.lstrip(".")] = renderer
        return self

    def dispatch(self, match: RouteMatch) -> Any:
        handler = match.handler
        params = dict(match.parameters)

        if isinstance(handler, str) and Path(handler).is_file():
            return self._handle_file(handler, params)

        if isinstance(handler, str) and "::" in handler:
            target, _, action = handler.partition("::")
            return self._handle_action(target, action, params)

        if isinstance(handler, Mapping) and "target" in handler and "action" in handler:
            params = {**handler.get("parameters", {}), **params}
            return self._handle_action(handler["target"], handler["action"], params)

        if callable(handler):
            return handler(params)

        msg = f"Unable to dispatch handler of type: {type(handler).__name__}"
        raise DispatchError(msg)

    def _handle_file(self, file: str, params: dict[str, Any]) -> str:
        extension = Path(file).suffix.lstrip(".")
        renderer = self._renderers.get(extension)
        if renderer is None:
            msg = f"Unsupported file type: {extension or file}"
            raise DispatchError(msg)
        logger.debug("Rendering %s with %s renderer", file, extension)
        return renderer(file, params)

    def _handle_action(self, target: str, action: str, params: dict[str, Any]) -> Any:
        cls = _resolve_target(target)
        instance = cls()
        method = getattr(instance, action, None)
        if not callable(method):
            msg = f"Action not found: {target}::{action}"
            raise DispatchError(msg)
        logger.debug("Dispatching to %s::%s", target, action)
        return method(params)


def _resolve_target(target: str) -> type:
    """Import ``"pkg.module.Class"`` or ``"pkg.module:Class"``."""
    if ":" in target:
        module_path, _, attr_name = target.partition(":")
    else:
        module_path, _, attr_name = target.rpartition(".")

    if not module_path or not attr_name:
        msg = f"Target not found: {target}"
        raise DispatchError(msg)

    try:
        module = importlib.import_module(module_path)
        obj = getattr(module, attr_name)
    except (ModuleNotFoundError, AttributeError) as exc:
        msg = f"Target not found: {target}"
        raise DispatchError(msg) from exc

    if not isinstance(obj, type):
        msg = f"Target {target!r} resolved to {type(obj).__name__}, not a class"
        raise DispatchError(msg)
    return obj
