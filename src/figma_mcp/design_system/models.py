# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Records held by the design-system stores."""

from __future__ import annotations

import json
import re
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


TokenType = Literal["color", "typography", "spacing", "border", "shadow"]
Framework = Literal["react", "vue", "svelte", "html", "angular"]
TemplateLanguage = Literal["typescript", "javascript", "css", "scss"]

TOKEN_TYPES: tuple[str, ...] = ("color", "typography", "spacing", "border", "shadow")

_WHITESPACE = re.compile(r"\s+")


def slugify(name: str) -> str:
    """Return the store key for a token name: lowercase, whitespace runs as ``-``."""
    return _WHITESPACE.sub("-", name.lower())


class DesignToken(BaseModel):
    """A named, typed style value.

    ``type`` is typed as ``str`` rather than :data:`TokenType`: tokens created
    at runtime keep whatever type string the client sent.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    value: str
    description: str | None = None

    @property
    def slug(self) -> str:
        return slugify(self.name)

    @property
    def is_known_type(self) -> bool:
        return self.type in TOKEN_TYPES

    def as_record(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)

    def to_json(self) -> str:
        return json.dumps(self.as_record(), indent=2, ensure_ascii=False)


class CodeTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    framework: Framework
    language: TemplateLanguage
    template: str
    description: str


class ComponentSpec(BaseModel):
    """Component description accepted by the ``generate_code`` tool.

    Unknown keys are kept so clients can pass richer design payloads.
    """

    model_config = ConfigDict(extra="allow")

    name: str = "Component"
    type: str = "component"
    properties: dict[str, Any] = Field(default_factory=dict)
    styles: dict[str, Any] | None = None
    children: list[ComponentSpec] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _default_name(cls, value: Any) -> Any:
        if not value:
            return "Component"
        # scalar names are rendered the way JSON spells them
        return json.dumps(value) if isinstance(value, (bool, int, float)) else value

    @field_validator("properties", "children", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return [] if info.field_name == "children" else {}
        return value


__all__ = [
    "TOKEN_TYPES",
    "CodeTemplate",
    "ComponentSpec",
    "DesignToken",
    "Framework",
    "TemplateLanguage",
    "TokenType",
    "slugify",
]
