# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Markdown overview document regenerated from the current token store."""

from __future__ import annotations

from .models import TOKEN_TYPES, DesignToken
from .store import TokenStore


SECTION_TITLES: dict[str, str] = {
    "color": "Colors",
    "typography": "Typography",
    "spacing": "Spacing",
    "border": "Borders",
    "shadow": "Shadows",
}

USAGE_GUIDELINES = """## Usage Guidelines
- Use design tokens consistently across all components
- Follow the component templates for structure
- Maintain accessibility standards
- Test responsive behavior across devices
"""


def _token_line(token: DesignToken) -> str:
    line = f"- **{token.name}**: {token.value}"
    if token.description:
        line += f" - {token.description}"
    return line


def render_overview(tokens: TokenStore) -> str:
    sections = ["# Design System Overview"]
    for token_type in TOKEN_TYPES:
        lines = [_token_line(token) for token in tokens.of_type(token_type)]
        sections.append("\n".join([f"## {SECTION_TITLES[token_type]}", *lines]))

    other = [_token_line(token) for _, token in tokens.items() if not token.is_known_type]
    if other:
        sections.append("\n".join(["## Other", *other]))

    sections.append(USAGE_GUIDELINES)
    return "\n\n".join(sections)
