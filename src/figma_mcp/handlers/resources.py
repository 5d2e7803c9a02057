# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Resources backed by the design-system stores.

Tokens and templates are exposed through URI templates whose ``instances``
enumerate the current store contents, so ``resources/list`` always reflects
tokens created at runtime.  The overview document is a single static
resource regenerated on every read.
"""

from __future__ import annotations

from ..design_system import DesignSystem, render_overview
from ..resource import resource
from ..resource_template import TemplateInstance, resource_template
from ..server import MCPServer


OVERVIEW_URI = "design-system:///overview"


def register_resources(server: MCPServer, design_system: DesignSystem) -> None:
    tokens = design_system.tokens
    templates = design_system.templates

    def token_instances() -> list[TemplateInstance]:
        return [
            TemplateInstance(
                params={"token_id": token_id},
                name=token.name,
                description=f"Design token: {token.description or token.name}",
            )
            for token_id, token in tokens.items()
        ]

    def template_instances() -> list[TemplateInstance]:
        return [
            TemplateInstance(
                params={"template_id": template_id},
                name=template.name,
                description=f"{template.framework} {template.language} template: {template.description}",
            )
            for template_id, template in templates.items()
        ]

    with server.binding():

        @resource_template(
            "design-token",
            uri_template="design-token:///{token_id}",
            title="Design token",
            description="A design token record serialized as JSON",
            mime_type="application/json",
            instances=token_instances,
        )
        def read_design_token(token_id: str) -> str | None:
            token = tokens.get(token_id)
            return token.to_json() if token is not None else None

        @resource_template(
            "code-template",
            uri_template="template:///{template_id}",
            title="Template",
            description="Raw code template text with {{placeholder}} markers",
            mime_type="text/plain",
            instances=template_instances,
        )
        def read_code_template(template_id: str) -> str | None:
            template = templates.get(template_id)
            return template.template if template is not None else None

        @resource(
            OVERVIEW_URI,
            name="Design System Overview",
            description="Complete design system documentation and guidelines",
            mime_type="text/markdown",
        )
        def design_system_overview() -> str:
            return render_overview(tokens)


__all__ = ["OVERVIEW_URI", "register_resources"]
