"""MCP (Model Context Protocol) implementation with JSON-RPC 2.0 over stdio."""

from aionr_mcp.mcp.models import (
    JsonRpcRequest,
    JsonRpcResponse,
    JsonRpcError,
    Tool,
)
from aionr_mcp.mcp.registry import ToolRegistry, ToolDefinition
from aionr_mcp.mcp.errors import (
    PARSE_ERROR,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    INVALID_PARAMS,
    INTERNAL_ERROR,
    TOOL_EXECUTION_ERROR,
    McpError,
)

__all__ = [
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcError",
    "Tool",
    "ToolRegistry",
    "ToolDefinition",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "TOOL_EXECUTION_ERROR",
    "McpError",
]
