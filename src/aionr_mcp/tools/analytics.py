"""data_analysis tool."""

import logging
from typing import Any

from aionr_mcp.gateway.base import CapabilityGateway
from aionr_mcp.mcp.registry import ToolRegistry

logger = logging.getLogger(__name__)


async def data_analysis_handler(
    gateway: CapabilityGateway, inputs: dict[str, Any]
) -> Any:
    """Handle the data_analysis tool call."""
    logger.info("Executing data_analysis tool")
    return await gateway.data_analysis(inputs["data"], inputs["ops"])


def register_tools(registry: ToolRegistry) -> None:
    """Register the analytics tool with the registry."""

    # Tool: data_analysis
    registry.register(
        name="data_analysis",
        description="Runs data analysis by calling the backend AION-R API.",
        input_schema={
            "type": "object",
            "properties": {
                "data": {
                    "description": "The dataset to analyze, any JSON value",
                },
                "ops": {
                    "type": "array",
                    "description": "Analysis operations to apply, in order",
                },
            },
            "required": ["data", "ops"],
        },
        handler=data_analysis_handler,
    )
