"""Capability gateway: the backend the MCP tools forward to."""

from aionr_mcp.gateway.base import CapabilityGateway, GatewayConfigError, GatewayError
from aionr_mcp.gateway.client import ApiGateway

__all__ = ["ApiGateway", "CapabilityGateway", "GatewayConfigError", "GatewayError"]
