# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""The ``@tool`` decorator.

Inside :meth:`MCPServer.binding <figma_mcp.server.MCPServer.binding>` the
decorated function is registered straight away; elsewhere it only carries a
:class:`ToolSpec` and can be passed to
:meth:`~figma_mcp.server.MCPServer.register_tool` later.  The function itself
is returned unchanged, so it stays directly callable.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .binding import attach_spec, read_spec


ToolFn = Callable[..., Any]

_TOOL_ATTR = "__figma_mcp_tool__"


@dataclass(slots=True)
class ToolSpec:
    name: str
    fn: ToolFn
    description: str = ""
    title: str | None = None
    input_schema: dict[str, Any] | None = None
    annotations: dict[str, Any] | None = None


def tool(
    name: str | None = None,
    *,
    description: str | None = None,
    title: str | None = None,
    input_schema: dict[str, Any] | None = None,
    annotations: dict[str, Any] | None = None,
) -> Callable[[ToolFn], ToolFn]:
    """Mark a callable as an MCP tool.

    Args:
        name: Tool name, defaults to the function name.
        description: Defaults to the stripped docstring.
        title: Human-readable title shown by clients.
        input_schema: Explicit JSON schema. Derived from the signature when omitted.
        annotations: Behaviour hints such as ``readOnlyHint``.
    """

    def decorator(fn: ToolFn) -> ToolFn:
        spec = ToolSpec(
            name=name or fn.__name__,
            fn=fn,
            description=(description if description is not None else fn.__doc__ or "").strip(),
            title=title,
            input_schema=input_schema,
            annotations=annotations,
        )
        attach_spec(fn, _TOOL_ATTR, spec, "register_tool")
        return fn

    return decorator


def extract_tool_spec(fn: ToolFn) -> ToolSpec | None:
    return read_spec(fn, _TOOL_ATTR, ToolSpec)


__all__ = ["ToolFn", "ToolSpec", "extract_tool_spec", "tool"]
