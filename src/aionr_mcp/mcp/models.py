"""Pydantic models for MCP JSON-RPC 2.0 protocol."""

from typing import Annotated, Any, Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    Field,
    StrictInt,
    StrictStr,
    model_validator,
)

# A request id is a string, a number or null. Booleans, NaN and the
# infinities are rejected.
RequestId = (
    StrictInt
    | Annotated[float, Field(strict=True, allow_inf_nan=False)]
    | StrictStr
    | None
)


# =============================================================================
# JSON-RPC 2.0 Base Models
# =============================================================================


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request object."""

    jsonrpc: Literal["2.0"]
    id: RequestId = None
    method: StrictStr
    params: Any = None

    @property
    def is_notification(self) -> bool:
        """A request without an ``id`` member never gets a response.

        ``"id": null`` is still a request and is answered.
        """
        return "id" not in self.model_fields_set


class JsonRpcError(BaseModel):
    """JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """JSON-RPC 2.0 response object."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: RequestId
    result: Any = None
    error: JsonRpcError | None = None

    @model_validator(mode="before")
    @classmethod
    def _exactly_one_outcome(cls, data: Any) -> Any:
        if isinstance(data, dict):
            has_result = "result" in data
            has_error = data.get("error") is not None
            if has_result == has_error:
                raise ValueError("response must carry exactly one of 'result' or 'error'")
        return data

    @classmethod
    def success(cls, request_id: Any, result: Any) -> "JsonRpcResponse":
        return cls(id=request_id, result=result)

    @classmethod
    def failure(cls, request_id: Any, error: dict[str, Any]) -> "JsonRpcResponse":
        return cls(id=request_id, error=JsonRpcError(**error))

    def model_dump(self, **kwargs: Any) -> dict[str, Any]:
        """Custom serialization to exclude None fields appropriately."""
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump(exclude_none=True)
        else:
            data["result"] = self.result
        return data


# =============================================================================
# MCP Tool Models
# =============================================================================


class Tool(BaseModel):
    """MCP tool definition."""

    name: str = Field(..., description="Tool name (lowercase with underscores)")
    description: str = Field(..., description="Human-readable description")
    inputSchema: dict[str, Any] = Field(
        ..., description="JSON Schema for tool input"
    )


# =============================================================================
# MCP Protocol Models
# =============================================================================


class ClientInfo(BaseModel):
    """Client information sent during initialization."""

    name: str
    version: str


class ServerInfo(BaseModel):
    """Server information returned during initialization."""

    name: str
    version: str


class Capabilities(BaseModel):
    """Server capabilities."""

    tools: dict[str, Any] = Field(default_factory=dict)
    resources: dict[str, Any] = Field(default_factory=dict)


class InitializeParams(BaseModel):
    """Parameters for initialize request."""

    protocolVersion: str
    capabilities: dict[str, Any] = Field(default_factory=dict)
    clientInfo: ClientInfo | None = None


class InitializeResult(BaseModel):
    """Result of initialize request."""

    protocolVersion: str
    capabilities: Capabilities
    serverInfo: ServerInfo


class ToolsListResult(BaseModel):
    """Result of tools/list request."""

    tools: list[Tool]


class ToolCallParams(BaseModel):
    """Parameters for tools/call request.

    ``inputs`` is the native key; the MCP-standard ``arguments`` is
    accepted too.
    """

    name: str
    inputs: dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("inputs", "arguments"),
    )


class ResourcesListParams(BaseModel):
    """Parameters for resources/list request."""

    uri: str
