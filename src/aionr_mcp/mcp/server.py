"""Sequential read-dispatch-write loop serving MCP over a framed transport."""

import logging

from aionr_mcp.mcp.codec import encode_response
from aionr_mcp.mcp.jsonrpc import JsonRpcProcessor
from aionr_mcp.mcp.transport_stdio import StdioTransport

logger = logging.getLogger(__name__)


class McpServer:
    """Serves one transport until its input is exhausted.

    Each message is fully processed, including any awaited gateway call,
    and its response written before the next one is read. Responses
    therefore leave in the same order as the requests arrived.
    """

    def __init__(self, processor: JsonRpcProcessor, transport: StdioTransport):
        self.processor = processor
        self.transport = transport
        self.messages_handled = 0

    async def serve(self) -> None:
        """Run until end of input."""
        while True:
            body = await self.transport.read()
            if body is None:
                logger.info("Input closed, shutting down")
                break

            response = await self.processor.handle_message(body)
            self.messages_handled += 1
            if response is not None:
                self.transport.write(encode_response(response))
