# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""STDIO transport adapter built on the reference MCP SDK.

Delegates framing to the SDK's ``stdio_server`` helper, which handles
newline-delimited JSON-RPC traffic over ``stdin``/``stdout``.  Nothing else in
the process may write to ``stdout`` while this transport is running.
"""

from __future__ import annotations

from mcp.server.stdio import stdio_server

from .base import BaseTransport


def get_stdio_server():
    """Return the SDK's stdio context manager.

    Separated into a helper so tests can patch it with in-memory streams.
    """
    return stdio_server


class StdioTransport(BaseTransport):
    """Run an :class:`figma_mcp.server.MCPServer` over STDIO."""

    TRANSPORT = ("stdio", "STDIO", "Standard IO")

    async def run(self, *, raise_exceptions: bool = False) -> None:
        stdio_ctx = get_stdio_server()
        init_options = self.server.create_initialization_options()

        async with stdio_ctx() as (read_stream, write_stream):
            await self.server.run(read_stream, write_stream, init_options, raise_exceptions=raise_exceptions)
