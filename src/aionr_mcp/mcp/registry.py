"""Tool registry for the MCP tools this server exposes."""

import logging
from typing import TYPE_CHECKING, Any, Awaitable, Callable

from aionr_mcp.mcp.errors import InvalidParams, MethodNotFound
from aionr_mcp.mcp.models import Tool

if TYPE_CHECKING:
    from aionr_mcp.gateway.base import CapabilityGateway

logger = logging.getLogger(__name__)

# Type alias for tool handlers
ToolHandler = Callable[["CapabilityGateway", dict[str, Any]], Awaitable[Any]]


class ToolDefinition:
    """A registered tool with its metadata and handler."""

    def __init__(
        self,
        name: str,
        description: str,
        input_schema: dict[str, Any],
        handler: ToolHandler,
    ):
        self.name = name
        self.description = description
        self.input_schema = input_schema
        self.handler = handler

    def to_mcp_tool(self) -> Tool:
        """Convert to MCP Tool model for protocol responses."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )

    def validate_inputs(self, inputs: dict[str, Any]) -> None:
        """
        Check that every field the schema lists as ``required`` is present.

        Values are forwarded to the backend as given; their types are not
        checked here.

        Raises:
            InvalidParams: Naming the tool and the offending field.
        """
        for field in self.input_schema.get("required", []):
            if field not in inputs:
                raise InvalidParams(
                    f"Invalid params for tool '{self.name}': "
                    f"missing required field '{field}'",
                    data={"tool": self.name, "field": field},
                )


class ToolRegistry:
    """Registry of MCP tools, populated once at startup and then frozen."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}
        self._frozen = False

    def register(
        self,
        name: str,
        description: str,
        input_schema: dict[str, Any],
        handler: ToolHandler,
    ) -> None:
        """Register a tool with the registry."""
        if self._frozen:
            raise RuntimeError(f"Cannot register tool '{name}': registry is frozen")
        if name in self._tools:
            raise ValueError(f"Tool '{name}' is already registered")
        self._tools[name] = ToolDefinition(
            name=name,
            description=description,
            input_schema=input_schema,
            handler=handler,
        )
        logger.info(f"Registered tool: {name}")

    def freeze(self) -> None:
        """Make the registry read-only for the rest of the process."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> ToolDefinition | None:
        """Get a tool by name."""
        return self._tools.get(name)

    def list_tools(self) -> list[Tool]:
        """List all registered tools as MCP Tool models, in declaration order."""
        return [tool.to_mcp_tool() for tool in self._tools.values()]

    async def call_tool(
        self, name: str, inputs: dict[str, Any], gateway: "CapabilityGateway"
    ) -> Any:
        """
        Validate inputs and run a tool against the gateway.

        Raises:
            MethodNotFound: No tool with this name.
            InvalidParams: Inputs do not satisfy the tool's schema.
        """
        tool = self.get(name)
        if tool is None:
            raise MethodNotFound(f"Tool not found: {name}", data={"tool": name})

        tool.validate_inputs(inputs)
        return await tool.handler(gateway, inputs)

    @property
    def tool_count(self) -> int:
        """Return the number of registered tools."""
        return len(self._tools)
