"""Tool catalog exposed by the server."""

from aionr_mcp.mcp.registry import ToolRegistry
from aionr_mcp.tools import analytics, inference

# Declaration order is the order tools/list reports
PROVIDERS = (inference, analytics)


def build_registry() -> ToolRegistry:
    """Create the registry with every tool registered, then freeze it."""
    registry = ToolRegistry()
    for provider in PROVIDERS:
        provider.register_tools(registry)
    registry.freeze()
    return registry


__all__ = ["PROVIDERS", "build_registry"]
