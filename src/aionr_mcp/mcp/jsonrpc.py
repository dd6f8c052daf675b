"""JSON-RPC 2.0 message processing."""

import logging

from aionr_mcp.mcp.codec import decode_request
from aionr_mcp.mcp.errors import McpError, error_from_exception
from aionr_mcp.mcp.handlers import MCPHandlers
from aionr_mcp.mcp.models import JsonRpcRequest, JsonRpcResponse
from aionr_mcp.utils.logging import reset_request_id, set_request_id

logger = logging.getLogger(__name__)


class JsonRpcProcessor:
    """Process JSON-RPC 2.0 messages."""

    def __init__(self, handlers: MCPHandlers):
        self.handlers = handlers

    async def process_request(
        self, request: JsonRpcRequest
    ) -> JsonRpcResponse | None:
        """
        Process a validated JSON-RPC request.

        Returns None for notifications (requests without id), whatever
        the outcome of the dispatch.
        """
        is_notification = request.is_notification
        set_request_id(None if is_notification else str(request.id))

        try:
            result = await self.handlers.dispatch(request.method, request.params)
        except McpError as e:
            error = error_from_exception(e)
            logger.warning(f"Method {request.method} failed: [{error['code']}] {error['message']}")
        except Exception as e:
            error = error_from_exception(e)
            logger.exception(f"Error handling method {request.method}")
        else:
            if is_notification:
                return None
            return JsonRpcResponse.success(request.id, result)

        # Notifications don't get responses, not even errors
        if is_notification:
            return None
        return JsonRpcResponse.failure(request.id, error)

    async def handle_message(self, raw_data: str | bytes) -> JsonRpcResponse | None:
        """
        Handle a raw JSON-RPC message end-to-end.

        Returns a response or None for notifications.
        """
        reset_request_id()
        try:
            request = decode_request(raw_data)
        except McpError as e:
            if e.request_id is not None:
                set_request_id(str(e.request_id))
            logger.warning(f"Rejected message: {e.message}")
            return JsonRpcResponse.failure(e.request_id, error_from_exception(e))

        return await self.process_request(request)
