# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Canned payloads returned by the analysis, extraction and optimization tools.

None of these values depend on the request: the tools echo their inputs around
the fixed data below and never contact Figma.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Final, Mapping


MOCK_COMPONENTS: Final[tuple[dict[str, Any], ...]] = (
    {
        "name": "Button",
        "type": "component",
        "properties": {"variant": "primary", "size": "medium", "text": "Click me"},
        "styles": {
            "backgroundColor": "#3B82F6",
            "color": "#FFFFFF",
            "padding": "12px 24px",
            "borderRadius": "8px",
            "fontSize": "16px",
        },
    },
)

MOCK_ANALYSIS_TOKENS: Final[Mapping[str, list[str]]] = MappingProxyType(
    {
        "colors": ["#3B82F6", "#6B7280", "#FFFFFF"],
        "typography": ["16px", "14px", "12px"],
        "spacing": ["8px", "16px", "24px"],
    }
)

MOCK_EXTRACTED_TOKENS: Final[Mapping[str, list[dict[str, str]]]] = MappingProxyType(
    {
        "colors": [
            {"name": "primary", "value": "#3B82F6", "description": "Primary brand color"},
            {"name": "secondary", "value": "#6B7280", "description": "Secondary color"},
        ],
        "typography": [
            {"name": "heading-lg", "value": "32px/1.2 Inter", "description": "Large heading"},
            {"name": "body", "value": "16px/1.5 Inter", "description": "Body text"},
        ],
        "spacing": [
            {"name": "xs", "value": "4px", "description": "Extra small spacing"},
            {"name": "sm", "value": "8px", "description": "Small spacing"},
            {"name": "md", "value": "16px", "description": "Medium spacing"},
        ],
    }
)

OPTIMIZATION_CLAIMS: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        "performance": (
            "Added React.memo for performance optimization",
            "Optimized re-renders with useMemo and useCallback",
        ),
        "accessibility": (
            "Added ARIA labels and roles",
            "Improved keyboard navigation support",
        ),
        "maintainability": (
            "Added TypeScript interfaces",
            "Improved code structure and comments",
        ),
    }
)


def optimization_claims(optimization_type: str) -> list[str]:
    """Claims for one group, or every group when ``optimization_type`` is ``all``."""
    if optimization_type == "all":
        return [claim for group in OPTIMIZATION_CLAIMS.values() for claim in group]
    return list(OPTIMIZATION_CLAIMS.get(optimization_type, ()))
