# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Component skeleton generation.

Only React is rendered; every other framework yields an empty body.  The
output is plain string assembly, there is no template engine involved.
"""

from __future__ import annotations

import json
import re
from typing import Any

from pydantic import ValidationError

from .models import ComponentSpec
from ..errors import MalformedInputError


_UPPERCASE = re.compile(r"([A-Z])")


def camel_to_kebab(name: str) -> str:
    """``backgroundColor`` -> ``background-color``."""
    return _UPPERCASE.sub(r"-\1", name).lower()


def parse_component_spec(raw: str) -> ComponentSpec:
    """Parse the JSON component description, raising :class:`MalformedInputError`."""
    try:
        return ComponentSpec.model_validate_json(raw)
    except ValidationError as exc:
        raise MalformedInputError(
            "Invalid component specification JSON",
            data={"errors": [error["msg"] for error in exc.errors()]},
        ) from exc


def _js_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _prop_type(value: Any) -> str:
    return "string" if isinstance(value, str) else "any"


def render_react_component(spec: ComponentSpec, *, style_approach: str = "css") -> str:
    name = spec.name
    class_name = name.lower()
    css_import = f"import './{name}.css';" if style_approach == "css" else ""
    prop_lines = "\n  ".join(f"{key}?: {_prop_type(value)};" for key, value in spec.properties.items())
    prop_names = ", ".join(spec.properties)
    body = spec.properties.get("text") or "Content"

    code = f"""import React from 'react';
{css_import}

interface {name}Props {{
  {prop_lines}
}}

const {name}: React.FC<{name}Props> = ({{
  {prop_names}
}}) => {{
  return (
    <div className="{class_name}">
      {{/* Generated from design */}}
      {_js_text(body)}
    </div>
  );
}};

export default {name};"""

    if style_approach == "css" and spec.styles is not None:
        rules = "".join(f"  {camel_to_kebab(prop)}: {_js_text(value)};\n" for prop, value in spec.styles.items())
        code += f"\n\n/* {name}.css */\n.{class_name} {{\n{rules}}}"

    return code


def generate_component_code(spec: ComponentSpec, *, framework: str, style_approach: str = "css") -> str:
    if framework == "react":
        return render_react_component(spec, style_approach=style_approach)
    return ""


__all__ = ["camel_to_kebab", "generate_component_code", "parse_component_spec", "render_react_component"]
