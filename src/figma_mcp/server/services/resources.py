# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Resource capability service.

Implements ``resources/list``, ``resources/templates/list`` and
``resources/read`` as described in
https://modelcontextprotocol.io/specification/2025-06-18/server/resources.

Listings are computed on every request: first the concrete instances of each
template (in registration order), then the static resources.  Reads try an
exact static URI first and then each template pattern.  A template reader
returning ``None`` means the captured key does not exist.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any

from ..adapters import normalize_resource_payload
from ..notifications import NotificationSink, ObserverRegistry
from ... import types
from ...errors import ResourceNotFoundError
from ...resource import ResourceSpec, extract_resource_spec
from ...resource_template import ResourceTemplateSpec, extract_resource_template_spec
from ...utils import maybe_await_with_args


class ResourcesService:
    def __init__(self, *, logger: logging.Logger, notification_sink: NotificationSink) -> None:
        self._logger = logger
        self._resource_specs: dict[str, ResourceSpec] = {}
        self._template_specs: dict[str, ResourceTemplateSpec] = {}
        self.observers = ObserverRegistry(notification_sink)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_resource(self, target: ResourceSpec | Callable[[], Any]) -> ResourceSpec:
        spec = target if isinstance(target, ResourceSpec) else extract_resource_spec(target)
        if spec is None:
            raise TypeError("register_resource expects a ResourceSpec or a function decorated with @resource")
        self._resource_specs[spec.uri] = spec
        return spec

    def register_template(self, target: ResourceTemplateSpec | Callable[..., Any]) -> ResourceTemplateSpec:
        spec = target if isinstance(target, ResourceTemplateSpec) else extract_resource_template_spec(target)
        if spec is None:
            raise TypeError(
                "register_template expects a ResourceTemplateSpec or a function decorated with @resource_template"
            )
        self._template_specs[spec.uri_template] = spec
        return spec

    # ------------------------------------------------------------------
    # Protocol operations
    # ------------------------------------------------------------------

    async def list_resources(self) -> types.ListResourcesResult:
        self.observers.remember_current_session()
        resources: list[types.Resource] = []

        for template in self._template_specs.values():
            if template.instances is None:
                continue
            for instance in template.instances():
                resources.append(
                    types.Resource(
                        uri=template.expand(instance.params),
                        name=instance.name,
                        description=instance.description,
                        mimeType=template.mime_type,
                    )
                )

        for spec in self._resource_specs.values():
            resources.append(
                types.Resource(
                    uri=spec.uri,
                    name=spec.name or spec.uri,
                    description=spec.description,
                    mimeType=spec.mime_type,
                )
            )

        return types.ListResourcesResult(resources=resources)

    async def list_templates(self) -> types.ListResourceTemplatesResult:
        templates = [
            types.ResourceTemplate(
                uriTemplate=spec.uri_template,
                name=spec.name,
                title=spec.title,
                description=spec.description,
                mimeType=spec.mime_type,
            )
            for spec in self._template_specs.values()
        ]
        return types.ListResourceTemplatesResult(resourceTemplates=templates)

    async def read(self, uri: str) -> types.ReadResourceResult:
        spec = self._resource_specs.get(uri)
        if spec is not None:
            payload = await maybe_await_with_args(spec.fn)
            return normalize_resource_payload(uri, spec.mime_type, payload)

        for template in self._template_specs.values():
            params = template.match(uri)
            if params is None:
                continue
            payload = await maybe_await_with_args(template.fn, **params)
            self._logger.debug("resource %s resolved via %s", uri, template.uri_template)
            if payload is None:
                label = template.title or template.name
                key = ", ".join(params.values())
                raise ResourceNotFoundError(f"{label} {key} not found", uri=uri)
            return normalize_resource_payload(uri, template.mime_type, payload)

        raise ResourceNotFoundError(f"Resource not found: {uri}", uri=uri)

    async def notify_list_changed(self) -> None:
        notification = types.ServerNotification(types.ResourceListChangedNotification(params=None))
        await self.observers.broadcast(notification, self._logger)
