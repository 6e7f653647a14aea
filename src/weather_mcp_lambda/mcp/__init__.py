"""
Minimal JSON-RPC (MCP-shaped) protocol layer.
"""
from .server import router

__all__ = ["router"]
