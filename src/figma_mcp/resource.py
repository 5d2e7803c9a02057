# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Static resources: one fixed URI, one zero-argument reader.

The reader runs on every ``resources/read`` and returns the document text.
Registration follows the same binding rules as :mod:`figma_mcp.tool`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .binding import attach_spec, read_spec


ResourceFn = Callable[[], Any]

_RESOURCE_ATTR = "__figma_mcp_resource__"


@dataclass(slots=True)
class ResourceSpec:
    uri: str
    fn: ResourceFn
    name: str | None = None
    description: str | None = None
    mime_type: str | None = None


def resource(
    uri: str,
    *,
    name: str | None = None,
    description: str | None = None,
    mime_type: str | None = None,
) -> Callable[[ResourceFn], ResourceFn]:
    def decorator(fn: ResourceFn) -> ResourceFn:
        spec = ResourceSpec(uri=uri, fn=fn, name=name, description=description, mime_type=mime_type)
        attach_spec(fn, _RESOURCE_ATTR, spec, "register_resource")
        return fn

    return decorator


def extract_resource_spec(fn: ResourceFn) -> ResourceSpec | None:
    return read_spec(fn, _RESOURCE_ATTR, ResourceSpec)


__all__ = ["ResourceSpec", "extract_resource_spec", "resource"]
