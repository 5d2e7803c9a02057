# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Prompt registration utilities.

A prompt renderer receives the request's ``arguments`` mapping (never ``None``;
an empty dict when the client sent nothing) and returns any of:

* a list of ``(role, text)`` tuples,
* a list of ``{"role": ..., "content": ...}`` mappings,
* a mapping with ``description`` and ``messages`` keys,
* a ready :class:`mcp.types.GetPromptResult`.

Declared required arguments are checked by the prompts service before the
renderer runs.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .binding import attach_spec, read_spec


PromptFn = Callable[[dict[str, str]], Any]


@dataclass(slots=True)
class PromptArgumentSpec:
    name: str
    description: str | None = None
    required: bool = False


@dataclass(slots=True)
class PromptSpec:
    name: str
    fn: PromptFn
    description: str | None = None
    title: str | None = None
    arguments: list[PromptArgumentSpec] = field(default_factory=list)

    @property
    def required_arguments(self) -> list[str]:
        return [argument.name for argument in self.arguments if argument.required]


_PROMPT_ATTR = "__figma_mcp_prompt__"


def _coerce_arguments(arguments: Iterable[PromptArgumentSpec | Mapping[str, Any]] | None) -> list[PromptArgumentSpec]:
    coerced: list[PromptArgumentSpec] = []
    for item in arguments or ():
        if isinstance(item, PromptArgumentSpec):
            coerced.append(item)
            continue
        coerced.append(
            PromptArgumentSpec(
                name=str(item["name"]),
                description=item.get("description"),
                required=bool(item.get("required", False)),
            )
        )
    return coerced


def prompt(
    name: str | None = None,
    *,
    description: str | None = None,
    title: str | None = None,
    arguments: Iterable[PromptArgumentSpec | Mapping[str, Any]] | None = None,
) -> Callable[[PromptFn], PromptFn]:
    """Register a prompt renderer."""

    def decorator(fn: PromptFn) -> PromptFn:
        desc = description if description is not None else (fn.__doc__ or "").strip() or None
        spec = PromptSpec(
            name=name or fn.__name__,
            fn=fn,
            description=desc,
            title=title,
            arguments=_coerce_arguments(arguments),
        )
        attach_spec(fn, _PROMPT_ATTR, spec, "register_prompt")
        return fn

    return decorator


def extract_prompt_spec(fn: PromptFn) -> PromptSpec | None:
    return read_spec(fn, _PROMPT_ATTR, PromptSpec)


__all__ = [
    "PromptArgumentSpec",
    "PromptSpec",
    "extract_prompt_spec",
    "prompt",
]
