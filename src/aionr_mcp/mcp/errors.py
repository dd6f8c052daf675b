"""JSON-RPC 2.0 error codes, exception taxonomy and error object helpers."""

from typing import Any

# Standard JSON-RPC 2.0 error codes
PARSE_ERROR = -32700  # Invalid JSON was received
INVALID_REQUEST = -32600  # The JSON sent is not a valid Request object
METHOD_NOT_FOUND = -32601  # The method does not exist / is not available
INVALID_PARAMS = -32602  # Invalid method parameter(s)
INTERNAL_ERROR = -32603  # Internal JSON-RPC error

# Custom error codes (server-defined, must be between -32000 and -32099)
TOOL_EXECUTION_ERROR = -32000  # Tool execution failed


def error_message(code: int) -> str:
    """Get the standard message for a JSON-RPC error code."""
    messages = {
        PARSE_ERROR: "Parse error",
        INVALID_REQUEST: "Invalid Request",
        METHOD_NOT_FOUND: "Method not found",
        INVALID_PARAMS: "Invalid params",
        INTERNAL_ERROR: "Internal error",
        TOOL_EXECUTION_ERROR: "Tool execution error",
    }
    return messages.get(code, "Unknown error")


def make_error_data(code: int, message: str | None = None, data: Any = None) -> dict[str, Any]:
    """Create an error object for JSON-RPC response."""
    error: dict[str, Any] = {
        "code": code,
        "message": message or error_message(code),
    }
    if data is not None:
        error["data"] = data
    return error


# =============================================================================
# Exceptions
# =============================================================================


class McpError(Exception):
    """Base class for failures that map onto a JSON-RPC error code.

    Subclasses only pick the code; the message is what the client sees in
    ``error.message``. ``request_id`` carries the id salvaged from a
    message that could not be decoded into a request.
    """

    code: int = INTERNAL_ERROR

    def __init__(
        self,
        message: str | None = None,
        data: Any = None,
        request_id: Any = None,
    ):
        self.message = message or error_message(self.code)
        self.data = data
        self.request_id = request_id
        super().__init__(self.message)


class ParseError(McpError):
    code = PARSE_ERROR


class InvalidRequest(McpError):
    code = INVALID_REQUEST


class MethodNotFound(McpError):
    code = METHOD_NOT_FOUND


class InvalidParams(McpError):
    code = INVALID_PARAMS


class ToolExecutionError(McpError):
    """A tool ran but its backend reported a failure."""

    code = TOOL_EXECUTION_ERROR


def error_from_exception(exc: BaseException) -> dict[str, Any]:
    """Map any exception raised while handling a message to an error object.

    This is the only place where failures are turned into JSON-RPC codes.
    """
    if isinstance(exc, McpError):
        return make_error_data(exc.code, exc.message, exc.data)
    return make_error_data(
        INTERNAL_ERROR, f"Internal error: {str(exc) or type(exc).__name__}"
    )
