"""Pytest configuration and fixtures."""

import asyncio
import io
import json
from typing import Any

import pytest

from aionr_mcp.config.loader import Settings
from aionr_mcp.gateway.base import CapabilityGateway
from aionr_mcp.mcp.handlers import MCPHandlers
from aionr_mcp.mcp.jsonrpc import JsonRpcProcessor
from aionr_mcp.mcp.transport_stdio import StdioTransport
from aionr_mcp.tools import build_registry


class FakeGateway(CapabilityGateway):
    """In-memory gateway recording calls; set ``fail_with`` to make it fail."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.fail_with: BaseException | None = None
        self.models: Any = [{"id": "universe-brain-v2"}]

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if self.fail_with is not None:
            raise self.fail_with

    async def run_inference(self, model, prompt, params=None):
        self._record("run_inference", model, prompt, params)
        return {"status": "success", "output": f"{model} says hi to: {prompt}"}

    async def data_analysis(self, data, ops):
        self._record("data_analysis", data, ops)
        return {"status": "success", "ops_applied": len(ops)}

    async def list_models(self):
        self._record("list_models")
        return self.models


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def registry():
    """The server's frozen tool registry."""
    return build_registry()


@pytest.fixture
def handlers(registry, gateway, settings):
    return MCPHandlers(registry, gateway, settings)


@pytest.fixture
def processor(handlers):
    return JsonRpcProcessor(handlers)


@pytest.fixture
def sample_jsonrpc_request():
    """Sample JSON-RPC request factory."""
    def _make_request(method: str, params: dict = None, id: int = 1):
        return {
            "jsonrpc": "2.0",
            "id": id,
            "method": method,
            "params": params or {},
        }
    return _make_request


def frame(body: bytes | str | dict) -> bytes:
    """Frame a body the way a client writes it to our stdin."""
    if isinstance(body, dict):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    return b"Content-Length: " + str(len(body)).encode() + b"\r\n\r\n" + body


def read_frames(data: bytes) -> list[dict]:
    """Split what the server wrote to stdout back into JSON messages."""
    messages = []
    while data:
        header, _, rest = data.partition(b"\r\n\r\n")
        assert header.startswith(b"Content-Length: "), header
        length = int(header.split(b":", 1)[1])
        messages.append(json.loads(rest[:length].decode("utf-8")))
        data = rest[length:]
    return messages


@pytest.fixture
def make_transport():
    """Build a transport over canned input bytes and a BytesIO output."""
    def _make(data: bytes) -> tuple[StdioTransport, io.BytesIO]:
        reader = asyncio.StreamReader()
        reader.feed_data(data)
        reader.feed_eof()
        output = io.BytesIO()
        return StdioTransport(reader, output), output
    return _make
