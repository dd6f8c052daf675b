"""MCP stdio server exposing the AION-R inference and analytics API as tools."""

__version__ = "0.1.0"
