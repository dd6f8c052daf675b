"""Configuration loading and management."""

from aionr_mcp.config.loader import Settings, get_settings

__all__ = ["Settings", "get_settings"]
