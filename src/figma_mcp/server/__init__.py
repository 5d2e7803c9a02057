# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Server-side protocol surface.

The heavy lifting lives in :mod:`figma_mcp.server.core`; this module
re-exports what the application layer is expected to import.
"""

from __future__ import annotations

from .core import MCPServer, NotificationFlags, TransportLiteral


__all__ = [
    "MCPServer",
    "NotificationFlags",
    "TransportLiteral",
]
