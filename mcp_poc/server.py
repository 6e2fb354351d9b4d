"""
MCP Server

FastAPI application exposing the tool registry as an MCP-compliant server.
Handles JSON-RPC 2.0 over HTTP POST, which is one of the transports MCP supports,
plus a plain invoke endpoint for callers that do not speak MCP.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError

from .config import HTTP_HOST, HTTP_PORT, SERVER_NAME, SERVER_VERSION, configure_logging
from .errors import ContractViolation, ToolValidationError
from .models import ErrorCode, InvokeRequest, InvokeResponse, JsonRpcRequest, make_error_response
from .registry import ToolRegistry, create_demo_registry

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Application Lifecycle
# -----------------------------------------------------------------------------

registry: ToolRegistry | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the registry once at startup."""
    global registry
    registry = create_demo_registry()
    logger.info("Serving %d tools", len(registry.tools))
    yield
    registry = None


def _require_registry() -> ToolRegistry:
    if registry is None:
        raise HTTPException(status_code=503, detail="Registry not initialized")
    return registry


# -----------------------------------------------------------------------------
# FastAPI Application
# -----------------------------------------------------------------------------

app = FastAPI(
    title="MCP Proof of Concept",
    description="Four demonstration tools exposed over MCP JSON-RPC.",
    version=SERVER_VERSION,
    lifespan=lifespan,
)


@app.post("/mcp")
async def mcp_endpoint(request: Request) -> Response:
    """
    Main MCP endpoint accepting JSON-RPC 2.0 requests.

    This is where MCP clients send their requests.
    The registry handles routing to the appropriate method handler.
    """
    tools = _require_registry()

    # Parse raw JSON to handle malformed requests gracefully
    try:
        body = await request.json()
    except ValueError:
        error = make_error_response(None, ErrorCode.PARSE_ERROR, "Invalid JSON")
        return JSONResponse(content=error.model_dump(), status_code=200)

    # Notifications carry no id and get no reply
    if isinstance(body, dict) and "id" not in body and isinstance(body.get("method"), str):
        logger.debug("Notification %s acknowledged", body["method"])
        return Response(status_code=202)

    # Validate as JSON-RPC request
    try:
        if not isinstance(body, dict):
            raise TypeError("JSON-RPC request must be an object")
        rpc_request = JsonRpcRequest(**body)
    except (ValidationError, TypeError) as e:
        error = make_error_response(
            body.get("id") if isinstance(body, dict) else None,
            ErrorCode.INVALID_REQUEST,
            f"Invalid request: {e}",
        )
        return JSONResponse(content=error.model_dump(), status_code=200)

    response = tools.handle_request(rpc_request)
    return JSONResponse(content=response.model_dump(), status_code=200)


@app.post("/invoke")
async def invoke(body: InvokeRequest) -> InvokeResponse:
    """
    Call one operation by name and return its raw result.

    Not part of MCP - the bare {"operation", "arguments"} → {"result"} shape.
    """
    tools = _require_registry()

    try:
        value = tools.invoke(body.operation, body.arguments)
    except ToolValidationError as e:
        raise HTTPException(status_code=422, detail={"tool": e.tool_name, "errors": e.errors})
    except ContractViolation as e:
        raise HTTPException(status_code=404, detail=str(e))

    return InvokeResponse(result=value)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/tools")
async def list_tools() -> dict[str, Any]:
    """
    Convenience endpoint to list available tools.

    Not part of MCP spec - just useful for debugging and exploration.
    In production, use the MCP tools/list method instead.
    """
    tools = _require_registry()
    return {"server": SERVER_NAME, "tools": [t.model_dump() for t in tools.list_tools()]}


def main() -> None:
    """Run the HTTP transport under uvicorn."""
    import uvicorn

    configure_logging()
    uvicorn.run(app, host=HTTP_HOST, port=HTTP_PORT)


if __name__ == "__main__":
    main()
