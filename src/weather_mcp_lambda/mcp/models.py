"""
MCP protocol models - JSON-RPC 2.0 format.
"""
from typing import Any, Optional
from pydantic import BaseModel, Field

# Echoed back untouched, so no coercion: true stays true, "1" stays "1"
RequestId = Any


# ============ BASE MODELS ============

class RpcRequest(BaseModel):
    """Inbound request. Every field is optional; `id` may be absent or any JSON value."""
    jsonrpc: Any = Field(default="2.0")
    id: RequestId = Field(default=None)
    method: Any = Field(default=None)
    params: Optional[dict[str, Any]] = Field(default=None)

    @property
    def has_id(self) -> bool:
        """True when the client sent an `id` member, even if it was null."""
        return "id" in self.model_fields_set


class RpcError(BaseModel):
    """Error structure."""
    code: int = Field(...)
    message: str = Field(...)
    data: Optional[Any] = Field(default=None)


class RpcResponse(BaseModel):
    """Outbound response. Exactly one of result/error is set."""
    jsonrpc: Any = Field(default="2.0")
    id: RequestId = Field(default=None)
    result: Optional[dict[str, Any]] = Field(default=None)
    error: Optional[RpcError] = Field(default=None)

    def to_payload(self) -> dict[str, Any]:
        """
        Serialize for the wire.
        `id` is written only when it was explicitly set, so null ids survive
        and responses to id-less requests carry no id at all.
        """
        payload = self.model_dump(exclude_none=True, exclude={"id"})
        if "id" in self.model_fields_set:
            payload["id"] = self.id
        return payload


def reply(request: RpcRequest, result: dict[str, Any]) -> RpcResponse:
    """Build a success response echoing the request id."""
    if request.has_id:
        return RpcResponse(result=result, id=request.id)
    return RpcResponse(result=result)


def reply_error(
    request: Optional[RpcRequest],
    code: int,
    message: str,
    data: Any = None
) -> RpcResponse:
    """Build an error response. A missing request means it could not be parsed: id is null."""
    error = RpcError(code=code, message=message, data=data)
    if request is None:
        return RpcResponse(error=error, id=None)
    if request.has_id:
        return RpcResponse(error=error, id=request.id)
    return RpcResponse(error=error)


# Error codes
ERROR_METHOD_NOT_FOUND = -32601
ERROR_INTERNAL_ERROR = -32603
