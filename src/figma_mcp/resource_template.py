# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Parameterised resource registration.

A resource template advertises a URI pattern such as
``design-token:///{token_id}`` via ``resources/templates/list`` and resolves
matching ``resources/read`` requests by calling the decorated function with
the captured parameters as keyword arguments.

Only simple RFC 6570 level-1 expressions are supported: each ``{name}`` captures
one non-empty path segment, which is percent-decoded before the call.

Templates may also declare ``instances``: a callable returning the concrete
resources that currently exist behind the pattern.  Those are expanded into
the ``resources/list`` response, which is how store-backed resources show up
in listings without being registered one by one.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
import re
from typing import Any
from urllib.parse import quote, unquote

from .binding import attach_spec, read_spec


ResourceTemplateFn = Callable[..., Any]

_EXPRESSION = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


@dataclass(slots=True)
class TemplateInstance:
    """One concrete resource behind a template."""

    params: dict[str, str]
    name: str
    description: str | None = None


InstancesFn = Callable[[], Iterable[TemplateInstance]]


@dataclass(slots=True)
class ResourceTemplateSpec:
    name: str
    uri_template: str
    fn: ResourceTemplateFn
    title: str | None = None
    description: str | None = None
    mime_type: str | None = None
    instances: InstancesFn | None = None
    _pattern: re.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        parts: list[str] = []
        position = 0
        for match in _EXPRESSION.finditer(self.uri_template):
            parts.append(re.escape(self.uri_template[position : match.start()]))
            parts.append(f"(?P<{match.group(1)}>[^/?#]+)")
            position = match.end()
        parts.append(re.escape(self.uri_template[position:]))
        self._pattern = re.compile("^" + "".join(parts) + "$")

    def match(self, uri: str) -> dict[str, str] | None:
        """Return the decoded parameters when *uri* fits the template."""
        found = self._pattern.match(uri)
        if found is None:
            return None
        return {key: unquote(value) for key, value in found.groupdict().items()}

    def expand(self, params: dict[str, str]) -> str:
        return _EXPRESSION.sub(lambda m: quote(str(params[m.group(1)]), safe=""), self.uri_template)


_TEMPLATE_ATTR = "__figma_mcp_resource_template__"


def resource_template(
    name: str,
    *,
    uri_template: str,
    title: str | None = None,
    description: str | None = None,
    mime_type: str | None = None,
    instances: InstancesFn | None = None,
) -> Callable[[ResourceTemplateFn], ResourceTemplateFn]:
    """Register a reader for every URI matching ``uri_template``."""

    def decorator(fn: ResourceTemplateFn) -> ResourceTemplateFn:
        spec = ResourceTemplateSpec(
            name=name,
            uri_template=uri_template,
            fn=fn,
            title=title,
            description=description,
            mime_type=mime_type,
            instances=instances,
        )
        attach_spec(fn, _TEMPLATE_ATTR, spec, "register_resource_template")
        return fn

    return decorator


def extract_resource_template_spec(fn: ResourceTemplateFn) -> ResourceTemplateSpec | None:
    return read_spec(fn, _TEMPLATE_ATTR, ResourceTemplateSpec)


__all__ = [
    "ResourceTemplateSpec",
    "TemplateInstance",
    "extract_resource_template_spec",
    "resource_template",
]
