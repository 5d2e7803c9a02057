# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Figma design-to-code MCP server."""

from __future__ import annotations

from . import types
from .app import create_server
from .design_system import DesignSystem, DesignToken
from .prompt import prompt
from .resource import resource
from .resource_template import resource_template
from .server import MCPServer, NotificationFlags
from .tool import tool


__version__ = "0.1.0"

__all__ = [
    "DesignSystem",
    "DesignToken",
    "MCPServer",
    "NotificationFlags",
    "create_server",
    "prompt",
    "resource",
    "resource_template",
    "tool",
    "types",
]
