"""
Tool endpoints.

- GET  /v1/tools         - Tool registry with input schemas
- POST /v1/tools/{name}  - Call a tool with a JSON body of arguments
- POST /mcp              - JSON-RPC 2.0 (initialize, tools/list, tools/call)

Every tool returns a single text payload: {"content": [{"type": "text", "text": ...}]}
"""
import logging
from typing import Any, Optional, Union

from fastapi import APIRouter, Body, HTTPException, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ValidationError

from anthropic_docs.config import settings
from anthropic_docs.tools import TOOLS, UnknownToolError, call_tool

logger = logging.getLogger(__name__)

router = APIRouter()

JSONRPC_VERSION = "2.0"
PROTOCOL_VERSION = "2025-06-18"

# JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602


class TextContent(BaseModel):
    type: str = "text"
    text: str


class ToolResponse(BaseModel):
    content: list[TextContent]


def text_payload(text: str) -> dict:
    return {"content": [{"type": "text", "text": text}]}


@router.get("/v1/tools")
async def list_tools():
    """Registered tools with their input schemas."""
    return {"tools": [tool.to_dict() for tool in TOOLS.values()]}


@router.post("/v1/tools/{name}", response_model=ToolResponse)
async def run_tool(name: str, arguments: Optional[dict] = Body(default=None)):
    """Call a tool. The body holds the tool arguments."""
    try:
        text = call_tool(name, arguments or {})
    except UnknownToolError:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {name}")
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))

    return text_payload(text)


def rpc_result(request_id: Union[str, int, None], result: Any) -> dict:
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def rpc_error(request_id: Union[str, int, None], code: int, message: str, data: Any = None) -> dict:
    error = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "error": error}


def handle_rpc(message: Any) -> Optional[dict]:
    """
    Handle one JSON-RPC message.

    Returns:
        Response dict, or None for notifications (messages without an id)
    """
    if not isinstance(message, dict) or message.get("jsonrpc") != JSONRPC_VERSION or "method" not in message:
        request_id = message.get("id") if isinstance(message, dict) else None
        return rpc_error(request_id, INVALID_REQUEST, "Invalid Request")

    method = message["method"]
    params = message.get("params") or {}
    if "id" not in message:
        logger.debug(f"Ignoring notification {method}", extra={"method": method})
        return None
    request_id = message["id"]

    if not isinstance(params, dict):
        return rpc_error(request_id, INVALID_PARAMS, "Invalid params")

    if method == "initialize":
        return rpc_result(request_id, {
            "protocolVersion": params.get("protocolVersion", PROTOCOL_VERSION),
            "capabilities": {"tools": {"listChanged": False}},
            "serverInfo": {"name": settings.SERVER_NAME, "version": settings.SERVER_VERSION},
        })

    if method == "ping":
        return rpc_result(request_id, {})

    if method == "tools/list":
        return rpc_result(request_id, {"tools": [tool.to_dict() for tool in TOOLS.values()]})

    if method == "tools/call":
        name = params.get("name")
        try:
            text = call_tool(name, params.get("arguments") or {})
        except UnknownToolError:
            return rpc_error(request_id, METHOD_NOT_FOUND, f"Unknown tool: {name}")
        except ValidationError as e:
            return rpc_error(
                request_id,
                INVALID_PARAMS,
                "Invalid params",
                e.errors(include_url=False, include_context=False),
            )
        return rpc_result(request_id, text_payload(text))

    return rpc_error(request_id, METHOD_NOT_FOUND, f"Method not found: {method}")


@router.post("/mcp")
async def mcp_endpoint(request: Request):
    """JSON-RPC endpoint. Accepts a single message or a batch."""
    try:
        payload = await request.json()
    except ValueError:
        return JSONResponse(rpc_error(None, PARSE_ERROR, "Parse error"))

    if isinstance(payload, list):
        if not payload:
            return JSONResponse(rpc_error(None, INVALID_REQUEST, "Invalid Request"))
        responses = [r for r in (handle_rpc(m) for m in payload) if r is not None]
        if not responses:
            return Response(status_code=202)
        return JSONResponse(responses)

    response = handle_rpc(payload)
    if response is None:
        return Response(status_code=202)
    return JSONResponse(response)
