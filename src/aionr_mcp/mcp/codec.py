"""Encoding and decoding of JSON-RPC 2.0 envelopes to and from wire bytes."""

import json
from typing import Any

from pydantic import TypeAdapter, ValidationError

from aionr_mcp.mcp.errors import InvalidRequest, ParseError
from aionr_mcp.mcp.models import JsonRpcRequest, JsonRpcResponse, RequestId

_request_id_adapter: TypeAdapter[Any] = TypeAdapter(RequestId)


def salvage_id(data: Any) -> Any:
    """Return the envelope id if the decoded body carries a usable one."""
    if not isinstance(data, dict) or "id" not in data:
        return None
    try:
        return _request_id_adapter.validate_python(data["id"])
    except ValidationError:
        return None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a JSON value")


def _load_json(raw_data: str | bytes) -> Any:
    try:
        if isinstance(raw_data, bytes):
            raw_data = raw_data.decode("utf-8")
        return json.loads(raw_data, parse_constant=_reject_constant)
    except UnicodeDecodeError as e:
        raise ParseError(f"Invalid UTF-8 in message body: {e}") from e
    except ValueError as e:
        raise ParseError(f"Invalid JSON: {e}") from e


def decode_request(raw_data: str | bytes) -> JsonRpcRequest:
    """
    Parse a JSON-RPC request from raw message bytes.

    Raises:
        ParseError: The body is not UTF-8 JSON. The id is always null.
        InvalidRequest: The body is JSON but not a request object. The id
            is salvaged from the body when possible.
    """
    data = _load_json(raw_data)

    if not isinstance(data, dict):
        raise InvalidRequest(
            f"Invalid JSON-RPC request: expected an object, got {type(data).__name__}"
        )

    try:
        return JsonRpcRequest.model_validate(data)
    except ValidationError as e:
        raise InvalidRequest(
            f"Invalid JSON-RPC request: {_describe(e)}",
            request_id=salvage_id(data),
        ) from e


def encode_response(response: JsonRpcResponse) -> bytes:
    """Serialize a JSON-RPC response to UTF-8 wire bytes."""
    return json.dumps(
        response.model_dump(), ensure_ascii=False, separators=(",", ":")
    ).encode("utf-8")


def decode_response(raw_data: str | bytes) -> JsonRpcResponse:
    """Parse a JSON-RPC response, as a client of this server would."""
    data = _load_json(raw_data)
    try:
        return JsonRpcResponse.model_validate(data)
    except ValidationError as e:
        raise InvalidRequest(f"Invalid JSON-RPC response: {_describe(e)}") from e


def _describe(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "envelope"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)
