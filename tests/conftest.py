# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

import pytest

from figma_mcp import DesignSystem, create_server


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def design_system() -> DesignSystem:
    return DesignSystem()


@pytest.fixture
def server(design_system: DesignSystem):
    return create_server(design_system)
