"""Utility modules: logging, HTTP client, retries."""

from aionr_mcp.utils.logging import setup_logging, get_logger
from aionr_mcp.utils.http import create_http_client, http_retrying

__all__ = [
    "setup_logging",
    "get_logger",
    "create_http_client",
    "http_retrying",
]
