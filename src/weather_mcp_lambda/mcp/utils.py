"""
MCP utilities - handler functions and the method table.
"""
from typing import Callable

from .models import (
    RpcRequest,
    RpcResponse,
    reply,
    reply_error,
    ERROR_METHOD_NOT_FOUND
)
from ..config import PROTOCOL_VERSION, SERVER_NAME, SERVER_VERSION
from ..tools.base import get_all_tools, get_tool

MethodHandler = Callable[[RpcRequest], RpcResponse]


def initialize_result() -> dict:
    """Result body shared by the initialize method and GET /mcp."""
    return {
        "protocolVersion": PROTOCOL_VERSION,
        "capabilities": {
            "tools": {}
        },
        "serverInfo": {
            "name": SERVER_NAME,
            "version": SERVER_VERSION
        }
    }


def handle_initialize(request: RpcRequest) -> RpcResponse:
    return reply(request, initialize_result())


def handle_initialized(request: RpcRequest) -> RpcResponse:
    """Acknowledge the client's initialized notification."""
    return reply(request, {})


def handle_tools_list(request: RpcRequest) -> RpcResponse:
    """
    Handle tools/list request.
    Returns all registered tools as descriptors.
    """
    tools_json = [tool.to_schema().model_dump() for tool in get_all_tools()]
    return reply(request, {"tools": tools_json})


def handle_tools_call(request: RpcRequest) -> RpcResponse:
    """
    Handle tools/call request.
    Executes a tool and returns its text output. Failures inside the tool
    propagate to the endpoint, which answers with an internal error.
    """
    if request.params is None:
        raise ValueError("tools/call requires params")

    tool_name = request.params.get("name")
    tool_args = request.params.get("arguments") or {}

    # Names that are not strings (lists, objects, null) can never match a registered tool
    tool = get_tool(tool_name) if isinstance(tool_name, str) else None
    if tool is None:
        return reply_error(request, ERROR_METHOD_NOT_FOUND, f"Unknown tool: {tool_name}")

    result = tool(tool_args)

    return reply(request, {
        "content": [
            {
                "type": "text",
                "text": str(result)
            }
        ]
    })


METHOD_HANDLERS: dict[str, MethodHandler] = {
    "initialize": handle_initialize,
    "initialized": handle_initialized,
    "tools/list": handle_tools_list,
    "tools/call": handle_tools_call,
}


def dispatch(request: RpcRequest) -> RpcResponse:
    """Route a request to its handler by method name."""
    handler = METHOD_HANDLERS.get(request.method) if isinstance(request.method, str) else None
    if handler is None:
        return reply_error(request, ERROR_METHOD_NOT_FOUND, f"Method not found: {request.method}")
    return handler(request)
