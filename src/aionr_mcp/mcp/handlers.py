"""MCP method handlers for JSON-RPC requests."""

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from aionr_mcp.config.loader import Settings, get_settings
from aionr_mcp.mcp.errors import InvalidParams, MethodNotFound
from aionr_mcp.mcp.models import (
    Capabilities,
    InitializeParams,
    InitializeResult,
    ResourcesListParams,
    ServerInfo,
    ToolCallParams,
    ToolsListResult,
)
from aionr_mcp.mcp.registry import ToolRegistry

if TYPE_CHECKING:
    from aionr_mcp.gateway.base import CapabilityGateway

logger = logging.getLogger(__name__)

# MCP protocol version we support
PROTOCOL_VERSION = "2024-11-05"

# Resource URI served by the gateway's model catalog
MODELS_CATALOG_URI = "aion-r://models/catalog"


def _parse_params(model: type[BaseModel], method: str, params: Any) -> Any:
    """Validate method params, mapping failures to Invalid Params."""
    try:
        return model.model_validate(params if params is not None else {})
    except ValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) or "params" for err in e.errors()]
        details = "; ".join(
            f"{field}: {err['msg']}" for field, err in zip(fields, e.errors())
        )
        raise InvalidParams(
            f"Invalid params for method '{method}': {details}",
            data={"method": method, "fields": fields},
        ) from e


class MCPHandlers:
    """Handlers for MCP protocol methods."""

    def __init__(
        self,
        registry: ToolRegistry,
        gateway: "CapabilityGateway",
        settings: Settings | None = None,
    ):
        self.registry = registry
        self.gateway = gateway
        self.settings = settings or get_settings()
        self._handlers = {
            "initialize": self.handle_initialize,
            "notifications/initialized": self.handle_initialized,
            "tools/list": self.handle_tools_list,
            "tools/call": self.handle_tools_call,
            "resources/list": self.handle_resources_list,
        }

    async def handle_initialize(self, params: Any) -> dict[str, Any]:
        """Handle the initialize request."""
        if params is not None:
            try:
                init_params = InitializeParams.model_validate(params)
                logger.info(
                    f"Client requested protocol {init_params.protocolVersion}"
                )
            except ValidationError as e:
                # Still proceed with defaults
                logger.warning(f"Invalid initialize params: {e}")

        result = InitializeResult(
            protocolVersion=PROTOCOL_VERSION,
            capabilities=Capabilities(tools={}, resources={}),
            serverInfo=ServerInfo(
                name=self.settings.server_name,
                version=self.settings.server_version,
            ),
        )
        return result.model_dump()

    async def handle_initialized(self, params: Any) -> None:
        """Handle the notifications/initialized notification (no response)."""
        logger.info("Client confirmed initialization")
        return None

    async def handle_tools_list(self, params: Any) -> dict[str, Any]:
        """Handle the tools/list request."""
        tools = self.registry.list_tools()
        result = ToolsListResult(tools=tools)
        return result.model_dump()

    async def handle_tools_call(self, params: Any) -> Any:
        """Handle the tools/call request; the gateway payload is the result."""
        call_params: ToolCallParams = _parse_params(ToolCallParams, "tools/call", params)

        logger.info(f"Calling tool: {call_params.name}")
        return await self.registry.call_tool(
            call_params.name, call_params.inputs, self.gateway
        )

    async def handle_resources_list(self, params: Any) -> Any:
        """Handle the resources/list request."""
        list_params: ResourcesListParams = _parse_params(
            ResourcesListParams, "resources/list", params
        )

        if list_params.uri == MODELS_CATALOG_URI:
            return await self.gateway.list_models()

        logger.debug(f"Unknown resource URI: {list_params.uri}")
        return []

    async def dispatch(self, method: str, params: Any) -> Any:
        """
        Dispatch a method call to the appropriate handler.

        Raises:
            MethodNotFound: The method is not one this server implements.
            McpError: Whatever the handler raised, for the caller to map.
        """
        handler = self._handlers.get(method)
        if handler is None:
            raise MethodNotFound(f"Method not found: {method}")

        return await handler(params)
