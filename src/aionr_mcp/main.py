"""stdio MCP server - main application entrypoint."""

import asyncio
import sys

from aionr_mcp.config.loader import Settings, get_settings
from aionr_mcp.gateway.base import CapabilityGateway, GatewayConfigError
from aionr_mcp.gateway.client import ApiGateway
from aionr_mcp.mcp.handlers import MCPHandlers
from aionr_mcp.mcp.jsonrpc import JsonRpcProcessor
from aionr_mcp.mcp.server import McpServer
from aionr_mcp.mcp.transport_stdio import StdioTransport, open_stdio_transport
from aionr_mcp.tools import build_registry
from aionr_mcp.utils.logging import get_logger, setup_logging


def create_server(
    transport: StdioTransport,
    gateway: CapabilityGateway,
    settings: Settings | None = None,
) -> McpServer:
    """Wire the registry, handlers and processor onto a transport."""
    registry = build_registry()
    handlers = MCPHandlers(registry, gateway, settings)
    return McpServer(JsonRpcProcessor(handlers), transport)


async def serve_stdio(gateway: CapabilityGateway, settings: Settings) -> None:
    """Serve MCP on stdin/stdout until stdin is closed."""
    log = get_logger("server")

    transport = await open_stdio_transport()
    server = create_server(transport, gateway, settings)
    log.info(
        "Tool registry ready",
        tool_count=server.processor.handlers.registry.tool_count,
    )

    async with gateway:
        await server.serve()

    log.info(
        "MCP server shut down gracefully",
        messages_handled=server.messages_handled,
    )


def main() -> None:
    """Run the server on stdio."""
    settings = get_settings()
    setup_logging(settings)
    log = get_logger("startup")

    log.info(
        "Starting MCP server",
        server_name=settings.server_name,
        version=settings.server_version,
        api_url=settings.aion_r_api_url,
        auth_enabled=settings.auth_enabled,
    )

    try:
        gateway = ApiGateway.from_settings(settings)
    except GatewayConfigError as e:
        log.error("Could not create API gateway", error=str(e))
        sys.exit(1)

    asyncio.run(serve_stdio(gateway, settings))


if __name__ == "__main__":
    main()
