# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Prompt capability service.

Implements ``prompts/list`` and ``prompts/get`` as described in
https://modelcontextprotocol.io/specification/2025-06-18/server/prompts.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any

from ..adapters import normalize_prompt_result
from ... import types
from ...errors import MissingArgumentError, UnknownOperationError
from ...prompt import PromptSpec, extract_prompt_spec
from ...utils import maybe_await_with_args


class PromptsService:
    def __init__(self, *, logger: logging.Logger) -> None:
        self._logger = logger
        self._prompt_specs: dict[str, PromptSpec] = {}

    @property
    def names(self) -> list[str]:
        return sorted(self._prompt_specs)

    def register(self, target: PromptSpec | Callable[..., Any]) -> PromptSpec:
        spec = target if isinstance(target, PromptSpec) else extract_prompt_spec(target)
        if spec is None:
            raise TypeError("register_prompt expects a PromptSpec or a function decorated with @prompt")
        self._prompt_specs[spec.name] = spec
        return spec

    async def list_prompts(self) -> types.ListPromptsResult:
        prompts = [
            types.Prompt(
                name=spec.name,
                title=spec.title,
                description=spec.description,
                arguments=[
                    types.PromptArgument(name=arg.name, description=arg.description, required=arg.required)
                    for arg in spec.arguments
                ],
            )
            for spec in self._prompt_specs.values()
        ]
        return types.ListPromptsResult(prompts=prompts)

    async def get_prompt(self, name: str, arguments: dict[str, str] | None) -> types.GetPromptResult:
        spec = self._prompt_specs.get(name)
        if spec is None:
            raise UnknownOperationError(f"Unknown prompt: {name}", data={"prompt": name})

        provided = {key: value for key, value in (arguments or {}).items() if value not in (None, "")}
        missing = [arg for arg in spec.required_arguments if arg not in provided]
        if missing:
            raise MissingArgumentError(name, missing)

        rendered = await maybe_await_with_args(spec.fn, provided)
        self._logger.debug("prompt %s rendered with %s", name, sorted(provided))
        return normalize_prompt_result(spec.description, rendered)

