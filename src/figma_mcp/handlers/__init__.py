# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Tool, resource and prompt handlers for the design-system server."""

from __future__ import annotations

from .prompts import register_prompts
from .resources import OVERVIEW_URI, register_resources
from .tools import register_tools


__all__ = ["OVERVIEW_URI", "register_prompts", "register_resources", "register_tools"]
