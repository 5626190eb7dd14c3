"""Request context for URL generation.

``RequestContext`` carries the ambient request metadata the URL
generator needs to render absolute and network-path URLs. The embedding
application builds it once per request, typically from an ASGI scope::

    context = RequestContext.from_scope(scope, {"APP_BASE_PATH": "/app"})
    router.set_context(context)
    router.generate("home", reference_type=ReferenceType.ABSOLUTE_URL)
"""

from collections.abc import Mapping, MutableMapping
from dataclasses import asdict, dataclass
from enum import IntEnum
from typing import Any, TypeAlias

# Raw ASGI scope, as handed to an ASGI application
Scope: TypeAlias = MutableMapping[str, Any]

_STANDARD_PORTS: dict[str, int] = {"http": 80, "https": 443}


class ReferenceType(IntEnum):
    """How a generated URL is rendered."""

    ABSOLUTE_URL = 0
    """``https://example.com/path``"""

    ABSOLUTE_PATH = 1
    """``/path``"""

    RELATIVE_PATH = 2
    """``../parent-path`` (not supported by the generator)"""

    NETWORK_PATH = 3
    """``//example.com/path`` (protocol-relative)"""


@dataclass(slots=True)
class RequestContext:
    """Information about the current request used to render URLs."""

    base_url: str = ""
    method: str = "GET"
    host: str = "localhost"
    scheme: str = "http"
    http_port: int = 80
    https_port: int = 443
    path_info: str = "/"
    query_string: str = ""

    @property
    def port(self) -> int:
        """The port in use for the current scheme."""
        return self.https_port if self.scheme == "https" else self.http_port

    @property
    def standard_port(self) -> int:
        return 443 if self.scheme == "https" else 80

    def __str__(self) -> str:
        return ", ".join(f"{key}={value}" for key, value in asdict(self).items())

    @classmethod
    def from_scope(
        cls,
        scope: Scope,
        overrides: Mapping[str, Any] | None = None,
    ) -> "RequestContext":
        """Build a context from an ASGI HTTP scope.

        *overrides* is a side channel of explicit values that win over
        whatever the scope says: ``URL_SCHEME``, ``URL_HOST``,
        ``URL_PORT``, ``URL_URI`` and ``APP_BASE_PATH``.
        """
        overrides = overrides or {}
        server = scope.get("server") or (None, None)
        header_host, header_port = _host_header(scope)

        scheme = overrides.get("URL_SCHEME") or scope.get("scheme") or "http"
        host = overrides.get("URL_HOST") or header_host or server[0] or "localhost"

        http_port = _STANDARD_PORTS["http"]
        https_port = _STANDARD_PORTS["https"]
        port = overrides.get("URL_PORT") or header_port or server[1]
        if port:
            if scheme == "http":
                http_port = int(port)
            elif scheme == "https":
                https_port = int(port)

        base_url = str(overrides.get("APP_BASE_PATH") or scope.get("root_path") or "")

        if overrides.get("URL_URI"):
            path_info = str(overrides["URL_URI"])
        else:
            path_info = scope.get("path", "/")
            if base_url and path_info.startswith(base_url):
                path_info = path_info[len(base_url) :] or "/"
            path_info = "/" + path_info.lstrip("/")

        query_string = scope.get("query_string", b"")
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")

        return cls(
            base_url=base_url,
            method=scope.get("method", "GET"),
            host=host,
            scheme=scheme,
            http_port=http_port,
            https_port=https_port,
            path_info=path_info,
            query_string=query_string,
        )


def _host_header(scope: Scope) -> tuple[str | None, int | None]:
    """Return (host, port) from the ``Host`` header, if present."""
    for name, value in scope.get("headers", ()):
        if name.lower() != b"host":
            continue
        host = value.decode("latin-1")
        if ":" in host and not host.endswith("]"):
            host, _, port = host.rpartition(":")
            return host or None, int(port) if port.isdigit() else None
        return host or None, None
    return None, None
