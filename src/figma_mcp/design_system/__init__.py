# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Design tokens, code templates and the string builders that use them."""

from __future__ import annotations

from .codegen import camel_to_kebab, generate_component_code, parse_component_spec
from .models import TOKEN_TYPES, CodeTemplate, ComponentSpec, DesignToken, TokenType, slugify
from .overview import render_overview
from .store import DEFAULT_TEMPLATES, DEFAULT_TOKENS, DesignSystem, TemplateStore, TokenStore


__all__ = [
    "DEFAULT_TEMPLATES",
    "DEFAULT_TOKENS",
    "TOKEN_TYPES",
    "CodeTemplate",
    "ComponentSpec",
    "DesignSystem",
    "DesignToken",
    "TemplateStore",
    "TokenStore",
    "TokenType",
    "camel_to_kebab",
    "generate_component_code",
    "parse_component_spec",
    "render_overview",
    "slugify",
]
