# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Normalization helpers for server-facing handler results.

The adapters keep the capability services thin while ensuring all outbound
responses conform to the MCP result structures:

* tools/call      -> ``CallToolResult`` with text content blocks
* resources/read  -> ``ReadResourceResult`` with text contents
* prompts/get     -> ``GetPromptResult`` with ``PromptMessage`` entries
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import json
from typing import Any

from .. import types


def normalize_tool_result(value: Any) -> types.CallToolResult:
    """Coerce tool handler output into ``CallToolResult``."""

    if isinstance(value, types.CallToolResult):
        return value
    return types.CallToolResult(content=_coerce_content_blocks(value))


def _coerce_content_blocks(source: Any) -> list[types.ContentBlock]:
    if source is None:
        return []

    if isinstance(source, (types.TextContent, types.ImageContent, types.EmbeddedResource)):
        return [source]

    if isinstance(source, str):
        return [types.TextContent(type="text", text=source)]

    if isinstance(source, (list, tuple)):
        blocks: list[types.ContentBlock] = []
        for item in source:
            blocks.extend(_coerce_content_blocks(item))
        return blocks

    return [_as_text_content(source)]


def _as_text_content(value: Any) -> types.TextContent:
    try:
        text = json.dumps(value, ensure_ascii=False, indent=2)
    except TypeError:
        text = str(value)
    return types.TextContent(type="text", text=text)


def normalize_resource_payload(uri: str, declared_mime: str | None, payload: Any) -> types.ReadResourceResult:
    """Coerce resource handler output into ``ReadResourceResult``."""

    if isinstance(payload, types.ReadResourceResult):
        return payload

    if isinstance(payload, types.TextResourceContents):
        return types.ReadResourceResult(contents=[payload])

    mime = declared_mime or "text/plain"
    text = payload if isinstance(payload, str) else json.dumps(payload, ensure_ascii=False, indent=2)
    return types.ReadResourceResult(contents=[types.TextResourceContents(uri=uri, mimeType=mime, text=text)])


def normalize_prompt_result(description: str | None, value: Any) -> types.GetPromptResult:
    """Coerce prompt renderer output into ``GetPromptResult``."""

    if isinstance(value, types.GetPromptResult):
        return value

    if isinstance(value, Mapping) and "messages" in value:
        description = value.get("description", description)
        value = value["messages"]

    messages = [_coerce_prompt_message(item) for item in _iter_messages(value)]
    return types.GetPromptResult(description=description, messages=messages)


def _iter_messages(value: Any) -> Iterable[Any]:
    if value is None:
        return []
    if isinstance(value, (str, Mapping, types.PromptMessage)):
        return [value]
    return value


def _coerce_prompt_message(item: Any) -> types.PromptMessage:
    if isinstance(item, types.PromptMessage):
        return item

    if isinstance(item, str):
        role, content = "user", item
    elif isinstance(item, tuple) and len(item) == 2:
        role, content = item
    elif isinstance(item, Mapping):
        role, content = item.get("role", "user"), item.get("content", "")
    else:
        raise TypeError(f"Unsupported prompt message: {item!r}")

    if isinstance(content, str):
        content = types.TextContent(type="text", text=content)
    elif isinstance(content, Mapping):
        content = types.TextContent.model_validate(content)
    return types.PromptMessage(role=role, content=content)


__all__ = ["normalize_prompt_result", "normalize_resource_payload", "normalize_tool_result"]
