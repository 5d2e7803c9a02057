# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Shared transport primitives for :mod:`figma_mcp.server`.

Provides a minimal base class for transports and the factory signature that
`MCPServer` uses to instantiate them lazily.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from ..core import MCPServer


class BaseTransport(ABC):
    """Common base for server transports.

    Subclasses receive the owning :class:`MCPServer` so they can obtain
    initialization options and drive its request loop.
    """

    TRANSPORT: tuple[str, ...] = ()

    def __init__(self, server: "MCPServer") -> None:
        self._server = server

    @property
    def server(self) -> "MCPServer":
        return self._server

    @property
    def transport_display_name(self) -> str:
        return self.TRANSPORT[-1] if self.TRANSPORT else type(self).__name__

    @abstractmethod
    async def run(self, **kwargs: Any) -> None:
        """Serve until the underlying stream closes."""


@runtime_checkable
class TransportFactory(Protocol):
    """Callable that produces a configured transport for an ``MCPServer``."""

    def __call__(self, server: "MCPServer") -> BaseTransport:  # pragma: no cover - protocol
        ...


__all__ = ["BaseTransport", "TransportFactory"]
