"""HTTP client utilities with retry and timeout handling."""

import logging

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from aionr_mcp.config.loader import get_settings

logger = logging.getLogger(__name__)

# Errors worth another attempt; anything else is final
RETRYABLE_ERRORS = (httpx.ConnectError, httpx.TimeoutException)


def create_http_client(
    timeout: float | None = None,
    base_url: str | None = None,
    headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create an async HTTP client with sensible defaults.

    Args:
        timeout: Request timeout in seconds. Uses default from settings if None.
        base_url: Optional base URL for all requests.
        headers: Extra default headers, e.g. Authorization.
        transport: Optional transport override (tests use httpx.MockTransport).

    Returns:
        Configured httpx.AsyncClient instance.
    """
    settings = get_settings()

    if timeout is None:
        timeout = settings.aion_r_api_timeout

    return httpx.AsyncClient(
        base_url=base_url or "",
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        headers={
            "User-Agent": f"{settings.server_name}/{settings.server_version}",
            **(headers or {}),
        },
        transport=transport,
    )


def http_retrying(attempts: int = 3, backoff: float = 1.0) -> AsyncRetrying:
    """
    Build a retry controller for one HTTP call.

    Usage:
        async for attempt in http_retrying(3, 1.0):
            with attempt:
                response = await client.get(url)

    Only connection failures and timeouts are retried; the last error is
    re-raised once attempts run out.
    """
    return AsyncRetrying(
        stop=stop_after_attempt(max(1, attempts)),
        wait=wait_exponential(multiplier=backoff, min=0, max=10),
        retry=retry_if_exception_type(RETRYABLE_ERRORS),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
