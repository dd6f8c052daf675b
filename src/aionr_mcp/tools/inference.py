"""run_inference tool: forwards a prompt to the backend inference API."""

import logging
from typing import Any

from aionr_mcp.gateway.base import CapabilityGateway
from aionr_mcp.mcp.registry import ToolRegistry

logger = logging.getLogger(__name__)

INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "model": {
            "type": "string",
            "description": "Identifier of the backend model to run",
        },
        "prompt": {
            "type": "string",
            "description": "Prompt text sent to the model",
        },
        "params": {
            "type": "object",
            "description": "Optional model parameters, passed through unchanged",
        },
    },
    "required": ["model", "prompt"],
}


async def run_inference_handler(
    gateway: CapabilityGateway, inputs: dict[str, Any]
) -> Any:
    """Handle the run_inference tool call."""
    model = inputs["model"]
    logger.info(f"Executing run_inference tool with model {model}")
    return await gateway.run_inference(model, inputs["prompt"], inputs.get("params"))


def register_tools(registry: ToolRegistry) -> None:
    """Register the inference tool with the registry."""
    registry.register(
        name="run_inference",
        description="Runs AI inference by calling the backend AION-R API.",
        input_schema=INPUT_SCHEMA,
        handler=run_inference_handler,
    )
