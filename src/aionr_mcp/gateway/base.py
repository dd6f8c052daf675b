"""Capability gateway interface: how tools reach the AION-R backend."""

from abc import ABC, abstractmethod
from typing import Any

from aionr_mcp.mcp.errors import ToolExecutionError


class GatewayError(ToolExecutionError):
    """The backend reported a failure; the message is shown to the client."""


class GatewayConfigError(ValueError):
    """The gateway could not be constructed from the given settings."""


class CapabilityGateway(ABC):
    """Backend capabilities the MCP tools forward to.

    Implementations return the backend's JSON payload unchanged and raise
    GatewayError for failures. Retries and timeouts are theirs to own.
    """

    @abstractmethod
    async def run_inference(
        self, model: str, prompt: str, params: dict[str, Any] | None = None
    ) -> Any:
        """Run AI inference with the given model and prompt."""
        pass

    @abstractmethod
    async def data_analysis(self, data: Any, ops: Any) -> Any:
        """Run the given analysis operations over the data."""
        pass

    @abstractmethod
    async def list_models(self) -> Any:
        """Return the backend's model catalog."""
        pass

    async def aclose(self) -> None:
        """Release any held resources."""
        return None

    async def __aenter__(self) -> "CapabilityGateway":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
