# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""In-memory design-system state.

:class:`DesignSystem` owns one mutable :class:`TokenStore` and one read-only
:class:`TemplateStore`.  A server builds a single instance at startup and
passes it to every handler factory; nothing in this package keeps store state
at module level.  Iteration order is insertion order throughout.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .models import CodeTemplate, DesignToken, slugify


DEFAULT_TOKENS: Mapping[str, DesignToken] = MappingProxyType(
    {
        "primary-color": DesignToken(
            name="Primary Color",
            type="color",
            value="#3B82F6",
            description="Main brand color used for primary actions and highlights",
        ),
        "secondary-color": DesignToken(
            name="Secondary Color",
            type="color",
            value="#6B7280",
            description="Secondary color for less prominent elements",
        ),
        "heading-lg": DesignToken(
            name="Large Heading",
            type="typography",
            value="font-size: 32px; font-weight: 700; line-height: 1.2;",
            description="Large heading typography style",
        ),
        "spacing-md": DesignToken(
            name="Medium Spacing",
            type="spacing",
            value="16px",
            description="Standard spacing unit for medium gaps",
        ),
    }
)

_REACT_COMPONENT_TEMPLATE = """\
import React from 'react';
import './{{componentName}}.css';

interface {{componentName}}Props {
  // Add props here
}

const {{componentName}}: React.FC<{{componentName}}Props> = ({
  // destructure props here
}) => {
  return (
    <div className="{{componentName | kebab-case}}">
      {/* Component content */}
    </div>
  );
};

export default {{componentName}};"""

_CSS_COMPONENT_TEMPLATE = """\
.{{componentName | kebab-case}} {
  /* Component styles */
  display: flex;
  flex-direction: column;
  gap: var(--spacing-md);

  /* Add specific styles based on design */
}"""

DEFAULT_TEMPLATES: Mapping[str, CodeTemplate] = MappingProxyType(
    {
        "react-component": CodeTemplate(
            name="React Component",
            framework="react",
            language="typescript",
            template=_REACT_COMPONENT_TEMPLATE,
            description="TypeScript React component template",
        ),
        "css-component": CodeTemplate(
            name="CSS Component",
            framework="html",
            language="css",
            template=_CSS_COMPONENT_TEMPLATE,
            description="CSS component styles template",
        ),
    }
)


class TokenStore:
    """Mutable token map keyed by slug. Entries are added or replaced, never removed."""

    def __init__(self, tokens: Mapping[str, DesignToken] | None = None) -> None:
        self._tokens: dict[str, DesignToken] = dict(tokens or {})

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __contains__(self, token_id: object) -> bool:
        return token_id in self._tokens

    def get(self, token_id: str) -> DesignToken | None:
        return self._tokens.get(token_id)

    def items(self) -> list[tuple[str, DesignToken]]:
        return list(self._tokens.items())

    def put(self, token: DesignToken) -> str:
        """Insert *token* under its slug, silently replacing any existing entry."""
        token_id = slugify(token.name)
        self._tokens[token_id] = token
        return token_id

    def of_type(self, token_type: str) -> list[DesignToken]:
        return [token for token in self._tokens.values() if token.type == token_type]

    def as_records(self) -> dict[str, dict[str, Any]]:
        return {token_id: token.as_record() for token_id, token in self._tokens.items()}


class TemplateStore:
    """Read-only template map fixed at construction."""

    def __init__(self, templates: Mapping[str, CodeTemplate] | None = None) -> None:
        self._templates: Mapping[str, CodeTemplate] = MappingProxyType(dict(templates or {}))

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._templates

    def get(self, template_id: str) -> CodeTemplate | None:
        return self._templates.get(template_id)

    def items(self) -> list[tuple[str, CodeTemplate]]:
        return list(self._templates.items())


@dataclass(slots=True)
class DesignSystem:
    tokens: TokenStore = field(default_factory=lambda: TokenStore(DEFAULT_TOKENS))
    templates: TemplateStore = field(default_factory=lambda: TemplateStore(DEFAULT_TEMPLATES))


__all__ = ["DEFAULT_TEMPLATES", "DEFAULT_TOKENS", "DesignSystem", "TemplateStore", "TokenStore"]
