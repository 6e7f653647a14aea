"""
Tool registry and decorator.

Tool input definitions are JSON Schema so any MCP-style client can read them,
whatever language it is written in.
"""
import inspect
from typing import Callable, Optional

from .schemas import ToolDefinition

# In-memory storage for all registered tools
TOOL_REGISTRY: dict[str, ToolDefinition] = {}


def get_all_tools() -> list[ToolDefinition]:
    """Return all registered tools."""
    return list(TOOL_REGISTRY.values())


def get_tool(name: str) -> ToolDefinition | None:
    """Get a tool by name."""
    return TOOL_REGISTRY.get(name)


def python_type_to_json_schema(python_type: type) -> str:
    """Convert Python type to JSON Schema type."""
    type_map = {
        str: "string",
        int: "integer",
        float: "number",
        bool: "boolean",
        list: "array",
        dict: "object",
    }
    return type_map.get(python_type, "string")  # Default to string


def build_input_schema(
    func: Callable,
    descriptions: Optional[dict[str, str]] = None
) -> dict:
    """Build a JSON Schema object from the function signature."""
    descriptions = descriptions or {}
    properties = {}
    required = []

    for param_name, param in inspect.signature(func).parameters.items():
        param_type = param.annotation if param.annotation != inspect.Parameter.empty else str

        prop = {"type": python_type_to_json_schema(param_type)}
        if param_name in descriptions:
            prop["description"] = descriptions[param_name]
        properties[param_name] = prop

        # No default value means the argument is required
        if param.default == inspect.Parameter.empty:
            required.append(param_name)

    return {
        "type": "object",
        "properties": properties,
        "required": required
    }


def tool(
    name: str,
    description: str,
    descriptions: Optional[dict[str, str]] = None
) -> Callable:
    """
    Decorator to register a function as a tool.

    Usage:
        @tool(name="echo", description="Returns what you send",
              descriptions={"message": "Text to echo"})
        def echo(message: str) -> str:
            return message

    The function itself is returned unchanged; registration is the only side effect.
    """
    def decorator(func: Callable) -> Callable:
        TOOL_REGISTRY[name] = ToolDefinition(
            name=name,
            description=description,
            input_schema=build_input_schema(func, descriptions),
            function=func
        )
        return func

    return decorator
