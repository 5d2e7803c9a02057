# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Design-to-code tools.

Five tools are exposed:

* ``analyze_design`` and ``extract_design_tokens`` return fixed mock payloads
  around the URL they were given;
* ``generate_code`` parses a JSON component description and renders a React
  skeleton;
* ``optimize_code`` echoes the input next to a canned list of claims;
* ``create_design_token`` is the only tool that writes, adding or replacing a
  token and notifying resource observers.

Input schemas are derived from the signatures below, so the ``Literal``
aliases double as the advertised enums.
"""

from __future__ import annotations

from collections.abc import Sequence
import json
from typing import Annotated, Literal

from pydantic import Field

from ..design_system import DesignSystem, DesignToken, generate_component_code, parse_component_spec
from ..design_system.mocks import MOCK_ANALYSIS_TOKENS, MOCK_COMPONENTS, MOCK_EXTRACTED_TOKENS, optimization_claims
from ..server import MCPServer
from ..tool import tool
from ..utils import get_logger


_logger = get_logger("figma_mcp.handlers.tools")

AnalysisType = Literal["full", "components", "styles", "layout"]
Framework = Literal["react", "vue", "svelte", "html", "angular"]
Language = Literal["typescript", "javascript"]
StyleApproach = Literal["css-modules", "styled-components", "tailwind", "css", "scss"]
TokenCategory = Literal["colors", "typography", "spacing", "borders", "shadows"]
OptimizationType = Literal["performance", "accessibility", "maintainability", "all"]
TokenTypeName = Literal["color", "typography", "spacing", "border", "shadow"]

DEFAULT_TOKEN_CATEGORIES: tuple[str, ...] = ("colors", "typography", "spacing")

READ_ONLY = {"readOnlyHint": True}


def register_tools(server: MCPServer, design_system: DesignSystem) -> None:
    """Register every design-to-code tool on *server*."""

    with server.binding():

        @tool(
            title="Analyze design",
            description="Analyze a Figma design and extract components, styles, and structure",
            annotations=READ_ONLY,
        )
        def analyze_design(
            figma_url: Annotated[str, Field(description="Figma design URL or node ID")],
            analysis_type: Annotated[AnalysisType, Field(description="Type of analysis to perform")] = "full",
        ) -> str:
            components = list(MOCK_COMPONENTS)
            tokens = dict(MOCK_ANALYSIS_TOKENS)
            return "\n".join(
                [
                    f"Design Analysis Complete for {figma_url}",
                    "",
                    f"Analysis Type: {analysis_type}",
                    f"Components Found: {len(components)}",
                    f"Color Tokens: {len(tokens['colors'])}",
                    f"Typography Tokens: {len(tokens['typography'])}",
                    f"Spacing Tokens: {len(tokens['spacing'])}",
                    "",
                    "Component Details:",
                    json.dumps(components, indent=2),
                    "",
                    "Extracted Tokens:",
                    json.dumps(tokens, indent=2),
                ]
            )

        @tool(
            title="Generate code",
            description="Generate code from design specifications",
            annotations=READ_ONLY,
        )
        def generate_code(
            component_spec: Annotated[str, Field(description="JSON specification of the component to generate")],
            framework: Annotated[Framework, Field(description="Target framework for code generation")],
            language: Annotated[Language, Field(description="Programming language preference")] = "typescript",
            style_approach: Annotated[StyleApproach, Field(description="Styling approach to use")] = "css",
        ) -> str:
            spec = parse_component_spec(component_spec)
            code = generate_component_code(spec, framework=framework, style_approach=style_approach)
            return f"Code generated successfully for {framework} ({language}):\n\n{code}"

        @tool(
            title="Extract design tokens",
            description="Extract design tokens from a Figma design",
            annotations=READ_ONLY,
        )
        def extract_design_tokens(
            figma_url: Annotated[str, Field(description="Figma design URL")],
            token_types: Annotated[
                Sequence[TokenCategory], Field(description="Types of design tokens to extract")
            ] = DEFAULT_TOKEN_CATEGORIES,
        ) -> str:
            if isinstance(token_types, str):
                extracted = token_types
            else:
                extracted = ", ".join(str(item) for item in token_types)
            return (
                f"Design tokens extracted from {figma_url}:\n\n"
                f"{json.dumps(dict(MOCK_EXTRACTED_TOKENS), indent=2)}\n\n"
                f"Token types extracted: {extracted}"
            )

        @tool(
            title="Optimize code",
            description="Optimize generated code for performance and best practices",
            annotations=READ_ONLY,
        )
        def optimize_code(
            code: Annotated[str, Field(description="Code to optimize")],
            optimization_type: Annotated[OptimizationType, Field(description="Type of optimization to apply")] = "all",
        ) -> str:
            claims = "\n".join(f"- {claim}" for claim in optimization_claims(optimization_type))
            return (
                "Code optimized successfully!\n\n"
                f"Optimizations applied:\n{claims}\n\n"
                f"Original code length: {len(code)} characters\n"
                f"Optimized code:\n{code}"
            )

        @tool(
            title="Create design token",
            description="Create a new design token",
            annotations={"readOnlyHint": False, "destructiveHint": False, "idempotentHint": True},
        )
        async def create_design_token(
            name: Annotated[str, Field(description="Name of the design token")],
            type: Annotated[TokenTypeName, Field(description="Type of design token")],
            value: Annotated[str, Field(description="Value of the design token")],
            description: Annotated[str, Field(description="Description of the design token")] = "",
        ) -> str:
            token = DesignToken(name=name, type=type, value=value, description=description)
            token_id = design_system.tokens.put(token)
            _logger.info("stored design token %s (%s)", token_id, type)
            await server.notify_resources_list_changed()
            return (
                f"Design token created successfully: {name}\n"
                f"Type: {type}\n"
                f"Value: {value}\n"
                f"Description: {description}\n\n"
                f"Token ID: {token_id}"
            )


__all__ = ["register_tools"]
