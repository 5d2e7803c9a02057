# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Tool capability service.

Implements ``tools/list`` and ``tools/call`` as described in
https://modelcontextprotocol.io/specification/2025-06-18/server/tools.

Input schemas are generated from handler signatures with pydantic.  Before a
handler runs, the arguments are checked against that schema's ``required``
list and bound to the signature, so argument problems surface as
invalid-params protocol errors instead of ``TypeError`` tracebacks.
"""

from __future__ import annotations

from collections.abc import Callable
import inspect
import json
import logging
import time
from typing import Any, get_type_hints

from pydantic import create_model

from ..adapters import normalize_tool_result
from ... import types
from ...errors import InvalidArgumentError, MissingArgumentError, UnknownOperationError
from ...tool import ToolSpec, extract_tool_spec
from ...utils import maybe_await_with_args


class ToolsService:
    """Tool registry plus the ``tools/list`` and ``tools/call`` operations."""

    def __init__(self, *, logger: logging.Logger) -> None:
        self._logger = logger
        self._tool_specs: dict[str, ToolSpec] = {}
        self._tool_defs: dict[str, types.Tool] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def tool_names(self) -> list[str]:
        return sorted(self._tool_defs)

    @property
    def definitions(self) -> dict[str, types.Tool]:
        return self._tool_defs

    def register(self, target: ToolSpec | Callable[..., Any]) -> ToolSpec:
        spec = target if isinstance(target, ToolSpec) else extract_tool_spec(target)
        if spec is None:
            fn = target
            spec = ToolSpec(name=getattr(fn, "__name__", "anonymous"), fn=fn, description=(fn.__doc__ or "").strip())
        self._tool_specs[spec.name] = spec
        self._tool_defs[spec.name] = self._build_definition(spec)
        return spec

    async def list_tools(self) -> types.ListToolsResult:
        return types.ListToolsResult(tools=list(self._tool_defs.values()))

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        spec = self._tool_specs.get(name)
        if spec is None:
            raise UnknownOperationError(f"Unknown tool: {name}", data={"tool": name})

        # null and "" count as absent, so optional fields fall back to defaults
        supplied = {key: value for key, value in (arguments or {}).items() if not _is_blank(value)}
        schema = self._tool_defs[name].inputSchema
        required = schema.get("required", [])
        missing = [field for field in required if field not in supplied]
        if missing:
            raise MissingArgumentError(name, missing)

        try:
            inspect.signature(spec.fn).bind(**supplied)
        except TypeError as exc:
            raise InvalidArgumentError(f"Invalid arguments for {name}: {exc}", data={"tool": name}) from exc

        supplied = _coerce_strings(name, supplied, schema.get("properties", {}))

        started = time.perf_counter()
        result = await maybe_await_with_args(spec.fn, **supplied)
        self._logger.debug(
            "tool %s completed", name, extra={"duration_ms": (time.perf_counter() - started) * 1000}
        )
        return normalize_tool_result(result)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _build_definition(self, spec: ToolSpec) -> types.Tool:
        annotations_payload: dict[str, Any] = dict(spec.annotations or {})
        if spec.title is not None and "title" not in annotations_payload:
            annotations_payload["title"] = spec.title
        annotations = types.ToolAnnotations.model_validate(annotations_payload) if annotations_payload else None

        return types.Tool(
            name=spec.name,
            title=spec.title,
            description=spec.description or None,
            inputSchema=spec.input_schema or build_input_schema(spec.fn),
            annotations=annotations,
        )


def build_input_schema(fn: Callable[..., Any]) -> dict[str, Any]:
    """Derive a JSON schema object from *fn*'s keyword parameters."""
    signature = inspect.signature(fn)
    try:
        hints = get_type_hints(fn, include_extras=True)
    except Exception:
        hints = {}

    fields: dict[str, Any] = {}
    for name, param in signature.parameters.items():
        if param.kind not in (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY):
            return {"type": "object"}
        annotation = hints.get(name, Any if param.annotation is inspect.Parameter.empty else param.annotation)
        default = ... if param.default is inspect.Parameter.empty else param.default
        fields[name] = (annotation, default)

    if not fields:
        return {"type": "object", "properties": {}, "additionalProperties": False}

    model = create_model(f"{fn.__name__.title().replace('_', '')}Input", **fields)
    schema = model.model_json_schema()
    schema.pop("$defs", None)
    _prune_titles(schema)
    schema["type"] = "object"
    schema["additionalProperties"] = False
    return schema


def _coerce_strings(tool: str, arguments: dict[str, Any], properties: dict[str, Any]) -> dict[str, Any]:
    """Render scalar values as text where the schema declares strings.

    ``123`` becomes ``"123"`` and ``true`` becomes ``"true"``.  Objects and
    arrays in a string slot, or a scalar in an array slot, are rejected.
    """
    coerced = dict(arguments)
    for key, value in arguments.items():
        prop = properties.get(key, {})
        if prop.get("type") == "string":
            coerced[key] = _as_text(tool, key, value)
        elif prop.get("type") == "array" and prop.get("items", {}).get("type") == "string":
            if not isinstance(value, list):
                raise InvalidArgumentError(f"Argument '{key}' of {tool} must be an array", data={"tool": tool})
            coerced[key] = [_as_text(tool, key, item) for item in value]
    return coerced


def _as_text(tool: str, key: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return json.dumps(value)
    raise InvalidArgumentError(f"Argument '{key}' of {tool} must be a string", data={"tool": tool})


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _prune_titles(schema: Any) -> None:
    if isinstance(schema, dict):
        schema.pop("title", None)
        for key, value in schema.items():
            if key == "properties" and isinstance(value, dict):
                for prop in value.values():
                    _prune_titles(prop)
            else:
                _prune_titles(value)
    elif isinstance(schema, list):
        for item in schema:
            _prune_titles(item)
