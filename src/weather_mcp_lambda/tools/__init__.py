"""
Tools registry.

Importing a tool module runs its @tool decorator and adds it to TOOL_REGISTRY.
"""
from .base import TOOL_REGISTRY, get_all_tools, get_tool, tool
from .schemas import ToolDefinition, ToolSchema


def register_all_tools() -> dict[str, ToolDefinition]:
    """Import every tool module and return the populated registry."""
    from .weather import tool as weather_tool  # noqa: F401

    return TOOL_REGISTRY


__all__ = [
    "TOOL_REGISTRY",
    "ToolDefinition",
    "ToolSchema",
    "get_all_tools",
    "get_tool",
    "register_all_tools",
    "tool",
]
