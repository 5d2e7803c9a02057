# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

from __future__ import annotations

import ast
from pathlib import Path

import pytest


PACKAGE_ROOT = Path(__file__).resolve().parents[1] / "src" / "figma_mcp"
SOURCES = sorted(PACKAGE_ROOT.rglob("*.py"))
BANNER = "#                            Licensed under MIT\n"


@pytest.mark.parametrize("path", SOURCES, ids=lambda p: str(p.relative_to(PACKAGE_ROOT)))
def test_module_carries_license_banner(path: Path) -> None:
    head = path.read_text(encoding="utf-8").splitlines(keepends=True)[:5]
    assert BANNER in head


@pytest.mark.parametrize("path", SOURCES, ids=lambda p: str(p.relative_to(PACKAGE_ROOT)))
def test_dunder_all_follows_definitions(path: Path) -> None:
    body = ast.parse(path.read_text(encoding="utf-8")).body
    positions = [
        index
        for index, node in enumerate(body)
        if isinstance(node, ast.Assign) and any(isinstance(t, ast.Name) and t.id == "__all__" for t in node.targets)
    ]
    if not positions:
        return
    definitions = [
        index
        for index, node in enumerate(body)
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef))
    ]
    assert not definitions or positions[-1] > max(definitions)
