# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Transport adapters for the Figma MCP server."""

from __future__ import annotations

from .base import BaseTransport, TransportFactory
from .stdio import StdioTransport

__all__ = [
    "BaseTransport",
    "StdioTransport",
    "TransportFactory",
]
