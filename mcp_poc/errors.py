"""
Tool Server Failure Types

Every failure the registry or its transports raise is one of these types.
Operations themselves define no failure modes.
"""

from __future__ import annotations


class ToolServerFailure(Exception):
    """Base class for all tool server failures."""

    failure_category: str = "unknown"

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ContractViolation(ToolServerFailure):
    """
    The request violates the MCP protocol or a tool's declared contract.

    - Fatality: Fatal to the request.
    - MCP Representation: JSON-RPC error response with INVALID_PARAMS.
    """

    failure_category = "contract_violation"


class ToolValidationError(ContractViolation):
    """
    Arguments for a tool call failed the tool descriptor's checks.

    Carries every problem found, not just the first one.
    """

    failure_category = "tool_validation"

    def __init__(self, tool_name: str, errors: list[str]) -> None:
        super().__init__(f"Invalid arguments for tool '{tool_name}': {'; '.join(errors)}")
        self.tool_name = tool_name
        self.errors = errors


class ConfigurationError(ToolServerFailure):
    """
    The registry was assembled inconsistently.

    - Fatality: Fatal. The server does not start.
    - MCP Representation: Not applicable (startup failure).
    """

    failure_category = "configuration_error"
