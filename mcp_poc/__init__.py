"""MCP proof-of-concept tool server package."""

from .config import (
    HTTP_HOST,
    HTTP_PORT,
    INT32_MAX,
    INT32_MIN,
    LOG_LEVEL,
    MCP_PROTOCOL_VERSION,
    SERVER_NAME,
    SERVER_VERSION,
    configure_logging,
)
from .demo import DemoTools, demo_descriptors, format_time, wrap_int32
from .errors import (
    ConfigurationError,
    ContractViolation,
    ToolServerFailure,
    ToolValidationError,
)
from .models import (
    ErrorCode,
    InitializeResult,
    InvokeRequest,
    InvokeResponse,
    JsonRpcErrorData,
    JsonRpcErrorResponse,
    JsonRpcRequest,
    JsonRpcResponse,
    ListToolsResult,
    TextContent,
    Tool,
    ToolCallParams,
    ToolCallResult,
    ToolInputSchema,
    make_error_response,
    make_success_response,
)
from .registry import ToolRegistry, create_demo_registry
from .tools import ParamType, ToolDescriptor, ToolParameter

__all__ = [
    # Registry
    "ToolRegistry",
    "create_demo_registry",
    "ToolDescriptor",
    "ToolParameter",
    "ParamType",
    # Operations
    "DemoTools",
    "demo_descriptors",
    "format_time",
    "wrap_int32",
    # Config
    "SERVER_NAME",
    "SERVER_VERSION",
    "MCP_PROTOCOL_VERSION",
    "HTTP_HOST",
    "HTTP_PORT",
    "LOG_LEVEL",
    "INT32_MIN",
    "INT32_MAX",
    "configure_logging",
    # Errors
    "ToolServerFailure",
    "ContractViolation",
    "ToolValidationError",
    "ConfigurationError",
    # Models
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcErrorResponse",
    "JsonRpcErrorData",
    "Tool",
    "ToolInputSchema",
    "ToolCallParams",
    "ToolCallResult",
    "TextContent",
    "ListToolsResult",
    "InitializeResult",
    "InvokeRequest",
    "InvokeResponse",
    "ErrorCode",
    "make_error_response",
    "make_success_response",
]
