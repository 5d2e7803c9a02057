# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Protocol errors raised by the capability services.

All classes derive from the SDK's :class:`~mcp.shared.exceptions.McpError`, so
the lowlevel request loop turns them into JSON-RPC error responses without any
extra plumbing. Each error also carries ``data={"kind": ...}`` which lets a
client tell a missing argument apart from malformed input even though both use
the invalid-params code.

Error codes follow https://modelcontextprotocol.io/specification/2025-06-18/server/tools
(unknown tools and invalid arguments are ``-32602``) and
https://modelcontextprotocol.io/specification/2025-06-18/server/resources
(resource not found is ``-32002``).
"""

from __future__ import annotations

from typing import Any, ClassVar

from mcp.shared.exceptions import McpError

from . import types


RESOURCE_NOT_FOUND = -32002


class DesignSystemError(McpError):
    """Base class for request failures raised by the server."""

    code: ClassVar[int] = types.INTERNAL_ERROR
    kind: ClassVar[str] = "internal"

    def __init__(self, message: str, *, data: dict[str, Any] | None = None) -> None:
        payload = {"kind": self.kind, **(data or {})}
        super().__init__(types.ErrorData(code=self.code, message=message, data=payload))


class MissingArgumentError(DesignSystemError):
    """A required tool or prompt argument was absent, null or empty."""

    code = types.INVALID_PARAMS
    kind = "missing-required-argument"

    def __init__(self, operation: str, missing: list[str]) -> None:
        names = ", ".join(missing)
        super().__init__(
            f"Missing required argument(s) for {operation}: {names}",
            data={"operation": operation, "missing": list(missing)},
        )
        self.missing = list(missing)


class InvalidArgumentError(DesignSystemError):
    code = types.INVALID_PARAMS
    kind = "invalid-argument"


class MalformedInputError(DesignSystemError):
    """An argument could not be parsed (for example invalid JSON)."""

    code = types.INVALID_PARAMS
    kind = "malformed-input"


class ResourceNotFoundError(DesignSystemError):
    code = RESOURCE_NOT_FOUND
    kind = "not-found"

    def __init__(self, message: str, *, uri: str) -> None:
        super().__init__(message, data={"uri": uri})
        self.uri = uri


class UnknownOperationError(DesignSystemError):
    """The requested tool or prompt is not registered."""

    code = types.INVALID_PARAMS
    kind = "unknown-operation"


__all__ = [
    "RESOURCE_NOT_FOUND",
    "DesignSystemError",
    "InvalidArgumentError",
    "MalformedInputError",
    "MissingArgumentError",
    "ResourceNotFoundError",
    "UnknownOperationError",
]
