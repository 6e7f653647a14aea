"""
MCP server - FastAPI routes for JSON-RPC requests.
"""
import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from .models import (
    RpcRequest,
    RpcResponse,
    reply_error,
    ERROR_INTERNAL_ERROR
)
from .utils import dispatch, initialize_result

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/mcp")
async def mcp_endpoint(request: Request):
    """
    Main MCP endpoint.
    Routes requests based on the method field.
    """
    try:
        body = await request.json()
        logger.info("MCP Request: %s", json.dumps(body, indent=2, ensure_ascii=False))

        if not isinstance(body, dict):
            raise ValueError("Request body must be a JSON object")

        response = dispatch(RpcRequest.model_validate(body)).to_payload()

        logger.info("MCP Response: %s", json.dumps(response, indent=2, ensure_ascii=False))
        return response

    except Exception as e:
        logger.exception("MCP protocol error")
        error = reply_error(None, ERROR_INTERNAL_ERROR, "Internal error", data=str(e))
        return JSONResponse(status_code=500, content=error.to_payload())


@router.get("/mcp")
async def mcp_initialize_info():
    """Static initialize result for clients probing the endpoint. Carries no id."""
    return RpcResponse(result=initialize_result()).to_payload()
