"""
Tool Registry

Exposes a fixed set of operations as MCP tools. The registry:
1. Holds the tool descriptors registered at startup
2. Handles MCP JSON-RPC requests and routes them appropriately
3. Validates arguments before any handler runs
4. Transforms handler results into MCP content blocks

Both transports (HTTP in server.py, stdio in stdio_server.py) delegate here.
"""

from __future__ import annotations

import logging
from typing import Any

from .demo import DemoTools, demo_descriptors
from .errors import ConfigurationError, ContractViolation, ToolValidationError
from .models import (
    ErrorCode,
    InitializeResult,
    JsonRpcErrorResponse,
    JsonRpcRequest,
    JsonRpcResponse,
    ListToolsResult,
    TextContent,
    Tool,
    ToolCallParams,
    ToolCallResult,
    make_error_response,
    make_success_response,
)
from .tools import ToolDescriptor

logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    Mapping from tool name to descriptor, plus MCP request handling.

    Built once at startup and read-only afterwards, so concurrent
    requests need no locking.
    """

    def __init__(self, descriptors: list[ToolDescriptor] | None = None):
        self.tools: dict[str, ToolDescriptor] = {}

        for descriptor in descriptors or []:
            self.register(descriptor)

    def register(self, descriptor: ToolDescriptor) -> None:
        """
        Register a descriptor under its name.

        Re-registering an identical descriptor is a no-op.

        Raises:
            ConfigurationError: If a different descriptor already owns the name
        """
        existing = self.tools.get(descriptor.name)
        if existing is not None:
            if existing == descriptor:
                return
            raise ConfigurationError(
                f"Tool '{descriptor.name}' is already registered with a different definition"
            )
        self.tools[descriptor.name] = descriptor
        logger.info("Registered tool: %s", descriptor.name)

    def list_tools(self) -> list[Tool]:
        """Return all registered tools in MCP format."""
        return [descriptor.to_mcp_tool() for descriptor in self.tools.values()]

    def invoke(self, name: str, arguments: dict[str, Any]) -> Any:
        """
        Run a tool and return its raw result.

        Flow:
        1. Look up descriptor (fail if unknown)
        2. Validate arguments (fail loudly if invalid)
        3. Call the handler

        Raises:
            ContractViolation: Unknown tool name
            ToolValidationError: Arguments fail the descriptor's checks
        """
        descriptor = self.tools.get(name)
        if descriptor is None:
            raise ContractViolation(f"Unknown tool: {name}")

        errors = descriptor.validate_arguments(arguments)
        if errors:
            logger.info("Rejected call to %s: %s", name, errors)
            raise ToolValidationError(name, errors)

        logger.debug("Calling tool %s with %s", name, arguments)
        return descriptor.invoke(arguments)

    def call_tool(self, name: str, arguments: dict[str, Any]) -> ToolCallResult:
        """
        Run a tool and wrap its result as an MCP ToolCallResult.

        Contract violations propagate. A handler that raises anything else
        yields a result with isError set.
        """
        try:
            value = self.invoke(name, arguments)
        except ContractViolation:
            raise
        except Exception as e:
            logger.exception("Tool %s failed", name)
            return ToolCallResult(
                content=[TextContent(text=f"Tool error: {e!s}")],
                isError=True,
            )

        return ToolCallResult(content=[TextContent(text=str(value))])

    def handle_request(
        self, request: JsonRpcRequest
    ) -> JsonRpcResponse | JsonRpcErrorResponse:
        """
        Single entry point for all MCP operations.

        Supported methods:
            initialize  → server capabilities
            tools/list  → available tools
            tools/call  → execute tool
        """
        match request.method:
            case "initialize":
                return make_success_response(
                    request.id,
                    InitializeResult().model_dump(),
                )

            case "tools/list":
                list_result = ListToolsResult(tools=self.list_tools())
                return make_success_response(request.id, list_result.model_dump())

            case "tools/call":
                return self._handle_tools_call(request)

            case _:
                return make_error_response(
                    request.id,
                    ErrorCode.METHOD_NOT_FOUND,
                    f"Unknown method: {request.method}",
                )

    def _handle_tools_call(
        self, request: JsonRpcRequest
    ) -> JsonRpcResponse | JsonRpcErrorResponse:
        """Handle tools/call method."""
        if request.params is None:
            return make_error_response(
                request.id,
                ErrorCode.INVALID_PARAMS,
                "Missing params for tools/call",
            )

        try:
            params = ToolCallParams(**request.params)
        except ValueError as e:
            return make_error_response(
                request.id,
                ErrorCode.INVALID_PARAMS,
                f"Invalid params: {e}",
            )

        try:
            call_result = self.call_tool(params.name, params.arguments)
        except ToolValidationError as e:
            return make_error_response(
                request.id,
                ErrorCode.INVALID_PARAMS,
                str(e),
                data={"tool": e.tool_name, "errors": e.errors},
            )
        except ContractViolation as e:
            return make_error_response(
                request.id,
                ErrorCode.INVALID_PARAMS,
                str(e),
            )

        return make_success_response(request.id, call_result.model_dump())


# -----------------------------------------------------------------------------
# Factory Functions
# -----------------------------------------------------------------------------


def create_demo_registry(tools: DemoTools | None = None) -> ToolRegistry:
    """Create a registry exposing the demo operations."""
    return ToolRegistry(demo_descriptors(tools or DemoTools()))
