# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""The :class:`MCPServer` subclass of the reference SDK's lowlevel server.

Three capability services hold the registries (tools, resources, prompts).
The server installs one request handler per protocol method into the SDK's
``request_handlers`` table and forwards to the owning service, so the SDK's
session loop does the JSON-RPC framing and turns raised ``McpError``
instances into error responses.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

from mcp.server.lowlevel.server import NotificationOptions, Server
from mcp.server.lowlevel.server import lifespan as default_lifespan

from .notifications import DefaultNotificationSink, NotificationSink
from .services import PromptsService, ResourcesService, ToolsService
from .transports import BaseTransport, StdioTransport, TransportFactory
from .. import types
from ..binding import bind_server
from ..prompt import PromptSpec
from ..resource import ResourceSpec
from ..resource_template import ResourceTemplateSpec
from ..tool import ToolSpec
from ..utils import get_logger


if TYPE_CHECKING:  # pragma: no cover - typing only
    from mcp.server.models import InitializationOptions

TransportLiteral = Literal["stdio"]


@dataclass(slots=True)
class NotificationFlags:
    """List-changed notifications advertised at initialization.

    Only the resource list can change after startup (new design tokens), so
    it is the only notification the server knows how to send.
    """

    resources_changed: bool = False


class MCPServer(Server[Any, Any]):
    """Lowlevel SDK server with decorator-based registration.

    ``invoke_tool``, ``invoke_resource`` and ``invoke_prompt`` run the same
    code paths as the protocol handlers without a transport or session.
    """

    def __init__(
        self,
        name: str,
        *,
        version: str | None = None,
        instructions: str | None = None,
        notification_flags: NotificationFlags | None = None,
        lifespan: Callable[[Server[Any, Any]], Any] = default_lifespan,
        notification_sink: NotificationSink | None = None,
    ) -> None:
        super().__init__(name, version=version, instructions=instructions, lifespan=lifespan)
        self._flags = notification_flags or NotificationFlags()
        self._logger = get_logger(f"figma_mcp.server.{name}")

        self.tools = ToolsService(logger=self._logger)
        self.resources = ResourcesService(
            logger=self._logger, notification_sink=notification_sink or DefaultNotificationSink()
        )
        self.prompts = PromptsService(logger=self._logger)

        self._transports: dict[str, TransportFactory] = {}
        self.register_transport("stdio", StdioTransport)

        handlers: dict[type, Callable[[Any], Any]] = {
            types.ListResourcesRequest: self._list_resources,
            types.ListResourceTemplatesRequest: self._list_resource_templates,
            types.ReadResourceRequest: self._read_resource,
            types.ListToolsRequest: self._list_tools,
            types.CallToolRequest: self._call_tool,
            types.ListPromptsRequest: self._list_prompts,
            types.GetPromptRequest: self._get_prompt,
        }
        self.request_handlers.update(handlers)

    # ------------------------------------------------------------------
    # Protocol handlers
    # ------------------------------------------------------------------

    async def _list_resources(self, request: types.ListResourcesRequest) -> types.ServerResult:
        return types.ServerResult(await self.resources.list_resources())

    async def _list_resource_templates(self, request: types.ListResourceTemplatesRequest) -> types.ServerResult:
        return types.ServerResult(await self.resources.list_templates())

    async def _read_resource(self, request: types.ReadResourceRequest) -> types.ServerResult:
        return types.ServerResult(await self.resources.read(str(request.params.uri)))

    async def _list_tools(self, request: types.ListToolsRequest) -> types.ServerResult:
        return types.ServerResult(await self.tools.list_tools())

    async def _call_tool(self, request: types.CallToolRequest) -> types.ServerResult:
        params = request.params
        return types.ServerResult(await self.tools.call_tool(params.name, params.arguments))

    async def _list_prompts(self, request: types.ListPromptsRequest) -> types.ServerResult:
        return types.ServerResult(await self.prompts.list_prompts())

    async def _get_prompt(self, request: types.GetPromptRequest) -> types.ServerResult:
        params = request.params
        return types.ServerResult(await self.prompts.get_prompt(params.name, params.arguments))

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    @property
    def tool_names(self) -> list[str]:
        return self.tools.tool_names

    @property
    def prompt_names(self) -> list[str]:
        return self.prompts.names

    def register_tool(self, target: ToolSpec | Callable[..., Any]) -> ToolSpec:
        return self.tools.register(target)

    def register_resource(self, target: ResourceSpec | Callable[[], Any]) -> ResourceSpec:
        return self.resources.register_resource(target)

    def register_resource_template(self, target: ResourceTemplateSpec | Callable[..., Any]) -> ResourceTemplateSpec:
        return self.resources.register_template(target)

    def register_prompt(self, target: PromptSpec | Callable[..., Any]) -> PromptSpec:
        return self.prompts.register(target)

    @contextmanager
    def binding(self) -> Iterator[MCPServer]:
        """Register every decorated tool, resource and prompt defined inside the block."""
        with bind_server(self):
            yield self

    # ------------------------------------------------------------------
    # Direct invocation
    # ------------------------------------------------------------------

    async def invoke_tool(self, name: str, /, **arguments: Any) -> types.CallToolResult:
        return await self.tools.call_tool(name, arguments)

    async def invoke_resource(self, uri: str) -> types.ReadResourceResult:
        return await self.resources.read(uri)

    async def invoke_prompt(self, name: str, *, arguments: dict[str, str] | None = None) -> types.GetPromptResult:
        return await self.prompts.get_prompt(name, arguments)

    async def notify_resources_list_changed(self) -> None:
        """Tell every session that has listed resources to list them again."""
        if self._flags.resources_changed:
            await self.resources.notify_list_changed()

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def create_initialization_options(
        self,
        notification_options: NotificationOptions | None = None,
        experimental_capabilities: dict[str, dict[str, Any]] | None = None,
    ) -> InitializationOptions:
        options = notification_options or NotificationOptions(resources_changed=self._flags.resources_changed)
        return super().create_initialization_options(
            notification_options=options,
            experimental_capabilities=experimental_capabilities or {},
        )

    # ------------------------------------------------------------------
    # Transports
    # ------------------------------------------------------------------

    def register_transport(self, name: str, factory: TransportFactory) -> None:
        self._transports[name.lower()] = factory

    def _transport_for_name(self, name: str) -> BaseTransport:
        factory = self._transports.get(name.lower())
        if factory is None:
            raise ValueError(f"Unsupported transport '{name}'.")
        transport = factory(self)
        if not isinstance(transport, BaseTransport):
            raise TypeError("Transport factory must return a BaseTransport instance")
        return transport

    async def serve(self, *, transport: TransportLiteral | str = "stdio", verbose: bool = True, **kwargs: Any) -> None:
        """Run until the selected transport's stream closes."""
        selected = self._transport_for_name(transport)
        if verbose:
            self._logger.info("Serving %s via %s", self.name, selected.transport_display_name)
        await selected.run(**kwargs)


__all__ = ["MCPServer", "NotificationFlags", "TransportLiteral"]
