# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

from __future__ import annotations

import json

from mcp.shared.exceptions import McpError
import pytest

from figma_mcp import DesignSystem, types
from figma_mcp.server import MCPServer
from figma_mcp.tool import tool


EXPECTED_TOOLS = [
    "analyze_design",
    "create_design_token",
    "extract_design_tokens",
    "generate_code",
    "optimize_code",
]


def _text(result: types.CallToolResult) -> str:
    assert not result.isError
    assert len(result.content) == 1
    return result.content[0].text


@pytest.mark.anyio
async def test_all_tools_registered(server: MCPServer) -> None:
    assert server.tool_names == EXPECTED_TOOLS


@pytest.mark.anyio
async def test_tool_definitions_carry_schemas_and_annotations(server: MCPServer) -> None:
    listed = await server.tools.list_tools()
    definitions = {tool.name: tool for tool in listed.tools}

    generate = definitions["generate_code"]
    assert generate.inputSchema["required"] == ["component_spec", "framework"]
    assert generate.inputSchema["additionalProperties"] is False
    assert generate.inputSchema["properties"]["framework"]["enum"] == ["react", "vue", "svelte", "html", "angular"]
    assert generate.inputSchema["properties"]["style_approach"]["default"] == "css"
    assert generate.annotations is not None and generate.annotations.readOnlyHint is True

    extract = definitions["extract_design_tokens"]
    token_types = extract.inputSchema["properties"]["token_types"]
    assert token_types["type"] == "array"
    assert token_types["default"] == ["colors", "typography", "spacing"]
    assert extract.inputSchema["required"] == ["figma_url"]

    create = definitions["create_design_token"]
    assert create.inputSchema["required"] == ["name", "type", "value"]
    assert create.inputSchema["properties"]["type"]["enum"] == ["color", "typography", "spacing", "border", "shadow"]
    assert create.annotations is not None and create.annotations.readOnlyHint is False
    assert create.title == "Create design token"
    assert create.description == "Create a new design token"


@pytest.mark.anyio
async def test_analyze_design_reports_mock_counts(server: MCPServer) -> None:
    text = _text(await server.invoke_tool("analyze_design", figma_url="https://figma.com/file/abc"))

    assert text.startswith("Design Analysis Complete for https://figma.com/file/abc")
    assert "Analysis Type: full" in text
    assert "Components Found: 1" in text
    assert "Color Tokens: 3" in text
    assert "Typography Tokens: 3" in text
    assert "Spacing Tokens: 3" in text
    assert '"name": "Button"' in text


@pytest.mark.anyio
async def test_analyze_design_echoes_analysis_type(server: MCPServer) -> None:
    text = _text(await server.invoke_tool("analyze_design", figma_url="node:1", analysis_type="layout"))
    assert "Analysis Type: layout" in text


@pytest.mark.anyio
async def test_generate_code_react_with_styles(server: MCPServer) -> None:
    spec = {"name": "Btn", "properties": {"text": "Go"}, "styles": {"backgroundColor": "#fff"}}
    text = _text(await server.invoke_tool("generate_code", component_spec=json.dumps(spec), framework="react"))

    assert text.startswith("Code generated successfully for react (typescript):\n\n")
    assert "const Btn: React.FC<BtnProps>" in text
    assert "import './Btn.css';" in text
    assert "text?: string;" in text
    assert "background-color: #fff;" in text
    assert "/* Btn.css */\n.btn {" in text


@pytest.mark.anyio
async def test_generate_code_other_framework_has_empty_body(server: MCPServer) -> None:
    text = _text(
        await server.invoke_tool("generate_code", component_spec='{"name": "Card"}', framework="vue", language="javascript")
    )
    assert text == "Code generated successfully for vue (javascript):\n\n"


@pytest.mark.anyio
async def test_generate_code_non_css_style_skips_stylesheet(server: MCPServer) -> None:
    spec = {"name": "Btn", "styles": {"color": "red"}}
    text = _text(
        await server.invoke_tool(
            "generate_code", component_spec=json.dumps(spec), framework="react", style_approach="tailwind"
        )
    )
    assert "import './Btn.css';" not in text
    assert "Btn.css" not in text
    assert "Content" in text


@pytest.mark.anyio
@pytest.mark.parametrize("payload", ["{not json", "[1, 2]", '"text"'])
async def test_generate_code_malformed_spec(server: MCPServer, payload: str) -> None:
    with pytest.raises(McpError) as exc_info:
        await server.invoke_tool("generate_code", component_spec=payload, framework="react")

    error = exc_info.value.error
    assert error.code == types.INVALID_PARAMS
    assert error.data["kind"] == "malformed-input"
    assert error.message == "Invalid component specification JSON"


@pytest.mark.anyio
async def test_extract_design_tokens_defaults(server: MCPServer) -> None:
    text = _text(await server.invoke_tool("extract_design_tokens", figma_url="https://figma.com/file/xyz"))

    assert text.startswith("Design tokens extracted from https://figma.com/file/xyz:\n\n")
    assert text.endswith("Token types extracted: colors, typography, spacing")
    assert '"heading-lg"' in text


@pytest.mark.anyio
async def test_extract_design_tokens_custom_types(server: MCPServer) -> None:
    text = _text(
        await server.invoke_tool("extract_design_tokens", figma_url="x", token_types=["borders", "shadows"])
    )
    assert text.endswith("Token types extracted: borders, shadows")


@pytest.mark.anyio
async def test_optimize_code_all_groups(server: MCPServer) -> None:
    code = "const a = 1;"
    text = _text(await server.invoke_tool("optimize_code", code=code))

    claims = [line for line in text.splitlines() if line.startswith("- ")]
    assert len(claims) == 6
    assert "- Added ARIA labels and roles" in claims
    assert f"Original code length: {len(code)} characters" in text
    assert text.endswith(code)


@pytest.mark.anyio
async def test_optimize_code_single_group(server: MCPServer) -> None:
    text = _text(await server.invoke_tool("optimize_code", code="x", optimization_type="performance"))
    claims = [line for line in text.splitlines() if line.startswith("- ")]
    assert claims == [
        "- Added React.memo for performance optimization",
        "- Optimized re-renders with useMemo and useCallback",
    ]


@pytest.mark.anyio
async def test_optimize_code_unknown_group_has_no_claims(server: MCPServer) -> None:
    text = _text(await server.invoke_tool("optimize_code", code="x", optimization_type="security"))
    assert not [line for line in text.splitlines() if line.startswith("- ")]


@pytest.mark.anyio
async def test_create_design_token_round_trip(server: MCPServer, design_system: DesignSystem) -> None:
    text = _text(
        await server.invoke_tool(
            "create_design_token", name="Brand Accent", type="color", value="#FF0000", description="Accent"
        )
    )

    assert text.startswith("Design token created successfully: Brand Accent")
    assert text.endswith("Token ID: brand-accent")
    assert "brand-accent" in design_system.tokens

    read = await server.invoke_resource("design-token:///brand-accent")
    assert json.loads(read.contents[0].text) == {
        "name": "Brand Accent",
        "type": "color",
        "value": "#FF0000",
        "description": "Accent",
    }


@pytest.mark.anyio
async def test_create_design_token_slug_collapses_whitespace(server: MCPServer, design_system: DesignSystem) -> None:
    await server.invoke_tool("create_design_token", name="Big   Gap\tSize", type="spacing", value="48px")
    assert "big-gap-size" in design_system.tokens
    assert design_system.tokens.get("big-gap-size").description == ""


@pytest.mark.anyio
async def test_create_design_token_overwrites_existing(server: MCPServer, design_system: DesignSystem) -> None:
    before = len(design_system.tokens)
    await server.invoke_tool("create_design_token", name="Primary Color", type="color", value="#000000")

    assert len(design_system.tokens) == before
    assert design_system.tokens.get("primary-color").value == "#000000"


@pytest.mark.anyio
async def test_create_design_token_accepts_unlisted_type(server: MCPServer, design_system: DesignSystem) -> None:
    await server.invoke_tool("create_design_token", name="Fade", type="motion", value="200ms")
    assert design_system.tokens.get("fade").type == "motion"


@pytest.mark.anyio
@pytest.mark.parametrize(
    "tool_name, arguments, missing",
    [
        ("analyze_design", {}, ["figma_url"]),
        ("analyze_design", {"analysis_type": "layout"}, ["figma_url"]),
        ("generate_code", {"framework": "react"}, ["component_spec"]),
        ("generate_code", {"component_spec": "{}"}, ["framework"]),
        ("generate_code", {}, ["component_spec", "framework"]),
        ("extract_design_tokens", {"token_types": ["colors"]}, ["figma_url"]),
        ("optimize_code", {"optimization_type": "all"}, ["code"]),
        ("optimize_code", {"code": ""}, ["code"]),
        ("create_design_token", {"type": "color", "value": "#fff"}, ["name"]),
        ("create_design_token", {"name": "", "type": "color", "value": "#fff"}, ["name"]),
        ("create_design_token", {"name": "X", "type": None, "value": ""}, ["type", "value"]),
    ],
)
async def test_missing_required_arguments(
    server: MCPServer, design_system: DesignSystem, tool_name: str, arguments: dict, missing: list[str]
) -> None:
    tokens_before = design_system.tokens.as_records()
    templates_before = design_system.templates.items()

    with pytest.raises(McpError) as exc_info:
        await server.tools.call_tool(tool_name, arguments)

    error = exc_info.value.error
    assert error.code == types.INVALID_PARAMS
    assert error.data["kind"] == "missing-required-argument"
    assert error.data["missing"] == missing
    assert design_system.tokens.as_records() == tokens_before
    assert design_system.templates.items() == templates_before


@pytest.mark.anyio
async def test_invoke_tool_forwards_name_argument(server: MCPServer, design_system: DesignSystem) -> None:
    result = await server.invoke_tool("create_design_token", name="Accent", type="color", value="#123456")

    assert _text(result).endswith("Token ID: accent")
    assert design_system.tokens.get("accent").value == "#123456"


@pytest.mark.anyio
async def test_scalar_arguments_are_stringified(server: MCPServer, design_system: DesignSystem) -> None:
    text = _text(await server.tools.call_tool("optimize_code", {"code": 12345}))
    assert "Original code length: 5 characters" in text
    assert text.endswith("12345")

    await server.tools.call_tool("create_design_token", {"name": "Gap", "type": "spacing", "value": 8})
    assert design_system.tokens.get("gap").value == "8"

    await server.tools.call_tool("create_design_token", {"name": "Flag", "type": "color", "value": True})
    assert design_system.tokens.get("flag").value == "true"


@pytest.mark.anyio
@pytest.mark.parametrize(
    "tool_name, arguments",
    [
        ("optimize_code", {"code": {"nested": 1}}),
        ("create_design_token", {"name": ["a"], "type": "color", "value": "#fff"}),
        ("extract_design_tokens", {"figma_url": "x", "token_types": "colors"}),
        ("extract_design_tokens", {"figma_url": "x", "token_types": [["colors"]]}),
    ],
)
async def test_structured_values_in_text_slots_rejected(
    server: MCPServer, design_system: DesignSystem, tool_name: str, arguments: dict
) -> None:
    before = design_system.tokens.as_records()

    with pytest.raises(McpError) as exc_info:
        await server.tools.call_tool(tool_name, arguments)

    assert exc_info.value.error.code == types.INVALID_PARAMS
    assert exc_info.value.error.data["kind"] == "invalid-argument"
    assert design_system.tokens.as_records() == before


@pytest.mark.anyio
async def test_generate_code_numeric_component_name(server: MCPServer) -> None:
    text = _text(await server.invoke_tool("generate_code", component_spec='{"name": 5}', framework="react"))
    assert "const 5: React.FC<5Props>" in text


@pytest.mark.anyio
async def test_generate_code_empty_styles_emit_stylesheet(server: MCPServer) -> None:
    spec = '{"name": "X", "styles": {}}'
    text = _text(await server.invoke_tool("generate_code", component_spec=spec, framework="react"))
    assert text.endswith("/* X.css */\n.x {\n}")


@pytest.mark.anyio
async def test_null_optional_argument_uses_default(server: MCPServer) -> None:
    result = await server.tools.call_tool("analyze_design", {"figma_url": "u", "analysis_type": None})
    assert "Analysis Type: full" in _text(result)


@pytest.mark.anyio
async def test_undeclared_argument_rejected(server: MCPServer) -> None:
    with pytest.raises(McpError) as exc_info:
        await server.invoke_tool("optimize_code", code="x", level="max")

    assert exc_info.value.error.data["kind"] == "invalid-argument"


@pytest.mark.anyio
async def test_unknown_tool(server: MCPServer) -> None:
    with pytest.raises(McpError) as exc_info:
        await server.invoke_tool("delete_everything")

    error = exc_info.value.error
    assert error.data["kind"] == "unknown-operation"
    assert error.message == "Unknown tool: delete_everything"


@pytest.mark.anyio
async def test_call_tool_via_request_handler(server: MCPServer) -> None:
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name="optimize_code", arguments={"code": "abc"}),
    )

    result = await handler(request)
    assert isinstance(result.root, types.CallToolResult)
    assert "Original code length: 3 characters" in result.root.content[0].text


@pytest.mark.anyio
async def test_registering_outside_binding() -> None:
    server = MCPServer("demo")

    @tool(description="Multiply numbers")
    def multiply(a: int, b: int) -> str:
        return str(a * b)

    assert "multiply" not in server.tool_names

    server.register_tool(multiply)
    assert "multiply" in server.tool_names
    result = await server.invoke_tool("multiply", a=3, b=4)
    assert result.content[0].text == "12"


@pytest.mark.anyio
async def test_schema_from_plain_signature() -> None:
    server = MCPServer("demo")

    with server.binding():

        @tool()
        def greet(name: str, excited: bool = False) -> str:
            """Say hello."""
            return f"Hello {name}{'!' if excited else ''}"

    definition = server.tools.definitions["greet"]
    assert definition.description == "Say hello."
    assert definition.inputSchema["required"] == ["name"]
    assert definition.inputSchema["properties"]["excited"] == {"default": False, "type": "boolean"}
