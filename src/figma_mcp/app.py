# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Server assembly."""

from __future__ import annotations

from .design_system import DesignSystem
from .handlers import register_prompts, register_resources, register_tools
from .server import MCPServer, NotificationFlags


SERVER_NAME = "Figma MCP Server"
SERVER_VERSION = "0.1.0"
INSTRUCTIONS = (
    "Design-to-code helpers: inspect design tokens and code templates as resources, "
    "generate component skeletons with generate_code, and add tokens with create_design_token."
)


def create_server(design_system: DesignSystem | None = None) -> MCPServer:
    """Build a server with every tool, resource and prompt registered.

    Each call gets its own :class:`DesignSystem` unless one is passed in, so
    tests can share or inspect the store the handlers write to.
    """
    state = design_system if design_system is not None else DesignSystem()
    server = MCPServer(
        SERVER_NAME,
        version=SERVER_VERSION,
        instructions=INSTRUCTIONS,
        notification_flags=NotificationFlags(resources_changed=True),
    )
    register_resources(server, state)
    register_tools(server, state)
    register_prompts(server, state)
    return server


__all__ = ["SERVER_NAME", "SERVER_VERSION", "create_server"]
