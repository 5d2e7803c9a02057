# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Ambient server used by the registration decorators.

``MCPServer.binding()`` makes a server current for the duration of a ``with``
block; ``@tool``, ``@resource``, ``@resource_template`` and ``@prompt`` register
with it immediately.  Outside a binding the decorators only attach their spec
to the function.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, Callable


if TYPE_CHECKING:  # pragma: no cover
    from .server import MCPServer

_ACTIVE_SERVER: ContextVar[MCPServer | None] = ContextVar("figma_mcp_active_server", default=None)


def get_active_server() -> MCPServer | None:
    return _ACTIVE_SERVER.get()


@contextmanager
def bind_server(server: MCPServer) -> Iterator[MCPServer]:
    token = _ACTIVE_SERVER.set(server)
    try:
        yield server
    finally:
        _ACTIVE_SERVER.reset(token)


def attach_spec(fn: Callable[..., Any], attr: str, spec: Any, register: str) -> None:
    """Store *spec* on *fn* and hand it to the bound server's *register* method."""
    setattr(fn, attr, spec)
    server = get_active_server()
    if server is not None:
        getattr(server, register)(spec)


def read_spec(fn: Any, attr: str, spec_type: type) -> Any:
    spec = getattr(fn, attr, None)
    return spec if isinstance(spec, spec_type) else None


__all__ = ["attach_spec", "bind_server", "get_active_server", "read_spec"]
