# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Prompt templates for design-system review and documentation."""

from __future__ import annotations

import json

from ..design_system import DesignSystem
from ..prompt import prompt
from ..server import MCPServer


def register_prompts(server: MCPServer, design_system: DesignSystem) -> None:
    tokens = design_system.tokens

    def token_dump() -> str:
        return json.dumps(tokens.as_records(), indent=2, ensure_ascii=False)

    with server.binding():

        @prompt(
            "analyze_design_system",
            title="Analyze design system",
            description="Analyze the current design system and provide recommendations",
            arguments=[{"name": "focus_area", "description": "Area to focus the analysis on", "required": False}],
        )
        def analyze_design_system(arguments: dict[str, str]) -> list[tuple[str, str]]:
            focus_area = arguments.get("focus_area", "overall")
            text = (
                f"Please analyze the current design system with focus on: {focus_area}\n\n"
                f"Current Design Tokens:\n{token_dump()}\n\n"
                "Please provide:\n"
                "1. Assessment of token consistency\n"
                "2. Recommendations for improvements\n"
                "3. Missing tokens that should be added\n"
                "4. Best practices for token usage"
            )
            return [("user", text)]

        @prompt(
            "generate_component_docs",
            title="Generate component docs",
            description="Generate documentation for a component",
            arguments=[{"name": "component_name", "description": "Name of the component to document", "required": True}],
        )
        def generate_component_docs(arguments: dict[str, str]) -> list[tuple[str, str]]:
            component_name = arguments["component_name"]
            text = (
                f"Generate comprehensive documentation for the {component_name} component.\n\n"
                "Include:\n"
                "1. Component overview and purpose\n"
                "2. Props and their types\n"
                "3. Usage examples\n"
                "4. Accessibility considerations\n"
                "5. Design tokens used\n"
                "6. Responsive behavior\n"
                "7. Testing guidelines\n\n"
                f"Base the documentation on current design system:\n{token_dump()}"
            )
            return [("user", text)]

        @prompt(
            "design_review_checklist",
            title="Design review checklist",
            description="Get a checklist for reviewing design-to-code implementation",
            arguments=[{"name": "component_type", "description": "Type of component being reviewed", "required": False}],
        )
        def design_review_checklist(arguments: dict[str, str]) -> list[tuple[str, str]]:
            component_type = arguments.get("component_type", "general")
            text = (
                f"Create a comprehensive review checklist for {component_type} components.\n\n"
                "The checklist should cover:\n"
                "1. Design fidelity (matches Figma design)\n"
                "2. Responsive behavior\n"
                "3. Accessibility standards\n"
                "4. Performance considerations\n"
                "5. Code quality and maintainability\n"
                "6. Design token usage\n"
                "7. Cross-browser compatibility\n"
                "8. Edge cases and error states\n\n"
                "Format as a practical checklist with clear action items."
            )
            return [("user", text)]


__all__ = ["register_prompts"]
