"""AION-R backend API client implementing the capability gateway."""

import logging
from typing import Any

import httpx

from aionr_mcp.config.loader import Settings, get_settings
from aionr_mcp.gateway.base import CapabilityGateway, GatewayConfigError, GatewayError
from aionr_mcp.utils.http import create_http_client, http_retrying

logger = logging.getLogger(__name__)


class ApiGateway(CapabilityGateway):
    """Client for the AION-R HTTP API."""

    INFER_PATH = "/api/v1/infer"
    ANALYZE_PATH = "/api/v1/analyze"
    MODELS_PATH = "/api/v1/models"

    def __init__(
        self,
        api_url: str,
        api_key: str = "",
        timeout: float | None = None,
        retry_attempts: int = 3,
        retry_backoff: float = 1.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_url = self._check_url(api_url)
        self._retry_attempts = retry_attempts
        self._retry_backoff = retry_backoff

        headers: dict[str, str] = {}
        if api_key:
            headers["Authorization"] = self._bearer(api_key)

        self._client = create_http_client(
            timeout=timeout,
            base_url=self.api_url,
            headers=headers,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ApiGateway":
        """Build a gateway from application settings."""
        settings = settings or get_settings()
        return cls(
            api_url=settings.aion_r_api_url,
            api_key=settings.aion_r_api_key,
            timeout=settings.aion_r_api_timeout,
            retry_attempts=settings.aion_r_api_retry_attempts,
            retry_backoff=settings.aion_r_api_retry_backoff,
            transport=transport,
        )

    @staticmethod
    def _check_url(api_url: str) -> str:
        try:
            url = httpx.URL(api_url)
        except httpx.InvalidURL as e:
            raise GatewayConfigError(f"Invalid API URL {api_url!r}: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise GatewayConfigError(
                f"Invalid API URL {api_url!r}: expected an http(s) URL"
            )
        return api_url.rstrip("/")

    @staticmethod
    def _bearer(api_key: str) -> str:
        value = f"Bearer {api_key}"
        if "\r" in value or "\n" in value or not value.isascii():
            raise GatewayConfigError("API key is not a valid HTTP header value")
        return value

    async def _request(
        self, method: str, path: str, body: dict[str, Any] | None = None
    ) -> Any:
        """Send a request, retrying transient transport failures."""
        try:
            async for attempt in http_retrying(self._retry_attempts, self._retry_backoff):
                with attempt:
                    response = await self._client.request(method, path, json=body)
        except httpx.HTTPError as e:
            raise GatewayError(f"API request to {path} failed: {e}") from e

        return self._handle_response(response)

    @staticmethod
    def _handle_response(response: httpx.Response) -> Any:
        if not response.is_success:
            raise GatewayError(
                f"API request failed with status {response.status_code}: {response.text}",
                data={"status": response.status_code},
            )
        try:
            return response.json()
        except ValueError as e:
            raise GatewayError(f"API returned a non-JSON body: {e}") from e

    async def run_inference(
        self, model: str, prompt: str, params: dict[str, Any] | None = None
    ) -> Any:
        """POST the inference request and return the backend payload."""
        body = {"model": model, "prompt": prompt, "params": params}
        return await self._request("POST", self.INFER_PATH, body)

    async def data_analysis(self, data: Any, ops: Any) -> Any:
        """POST the analysis request and return the backend payload."""
        return await self._request("POST", self.ANALYZE_PATH, {"data": data, "ops": ops})

    async def list_models(self) -> Any:
        return await self._request("GET", self.MODELS_PATH)

    async def aclose(self) -> None:
        await self._client.aclose()
        logger.debug("Closed API gateway HTTP client")
