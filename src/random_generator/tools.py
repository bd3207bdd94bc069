"""MCP tool descriptors for the random generator tools."""

from __future__ import annotations

from mcp import types

from random_generator.dispatcher import BYTES_TOOL, INT_TOOL
from random_generator.models import Encoding


def bytes_tool(max_byte_size: int) -> types.Tool:
    """Return the MCP tool descriptor for random byte generation."""
    input_schema = {
        "type": "object",
        "properties": {
            "size": {
                "type": "integer",
                "description": f"Number of random bytes to generate (1 to {max_byte_size})",
                "exclusiveMinimum": 0,
                "maximum": max_byte_size,
            },
            "encoding": {
                "type": "string",
                "enum": [item.value for item in Encoding],
                "description": "Output encoding",
                "default": Encoding.HEX.value,
            },
        },
        "required": ["size"],
    }

    return types.Tool(
        name=BYTES_TOOL,
        description="Generates cryptographically secure random bytes",
        inputSchema=input_schema,
        annotations=types.ToolAnnotations(title="Generate Random Bytes", readOnlyHint=True),
    )


def int_tool() -> types.Tool:
    """Return the MCP tool descriptor for random integer generation."""
    input_schema = {
        "type": "object",
        "properties": {
            "min": {
                "type": "integer",
                "description": "Lower bound (inclusive)",
            },
            "max": {
                "type": "integer",
                "description": "Upper bound (inclusive)",
            },
        },
        "required": ["min", "max"],
    }

    return types.Tool(
        name=INT_TOOL,
        description="Generates a random integer within the specified range (inclusive)",
        inputSchema=input_schema,
        annotations=types.ToolAnnotations(title="Generate Random Integer", readOnlyHint=True),
    )


def to_mcp_tools(max_byte_size: int) -> list[types.Tool]:
    """Return descriptors for every tool served."""
    return [bytes_tool(max_byte_size), int_tool()]
