"""
Tool descriptor types.

This module contains:
- ParamType: JSON types a tool parameter may declare
- ToolParameter: one named, described parameter
- ToolDescriptor: name, description, parameters and handler of one tool

Concrete operations live in demo.py; the registry aggregates descriptors.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .config import INT32_MAX, INT32_MIN
from .models import Tool, ToolInputSchema


class ParamType(str, Enum):
    """JSON Schema types supported for tool parameters."""

    STRING = "string"
    INTEGER = "integer"


@dataclass(frozen=True)
class ToolParameter:
    """A single tool parameter with the description shown to callers."""

    name: str
    type: ParamType
    description: str
    required: bool = True

    def check(self, value: Any) -> str | None:
        """Return a problem description, or None if the value is acceptable."""
        if self.type is ParamType.STRING:
            if not isinstance(value, str):
                return f"Parameter '{self.name}' must be a string, got {type(value).__name__}"
            return None

        # bool is an int subclass but never a valid integer argument
        if isinstance(value, bool) or not isinstance(value, int):
            return f"Parameter '{self.name}' must be an integer, got {type(value).__name__}"
        if not INT32_MIN <= value <= INT32_MAX:
            return (
                f"Parameter '{self.name}' is out of range: {value} "
                f"is not a signed 32-bit integer"
            )
        return None


@dataclass(frozen=True)
class ToolDescriptor:
    """
    Definition of an operation to expose as an MCP tool.

    - name: wire name callers invoke
    - description: human-readable description for callers
    - parameters: ordered parameter declarations
    - handler: callable receiving the arguments as keywords
    """

    name: str
    description: str
    handler: Callable[..., Any]
    parameters: tuple[ToolParameter, ...] = ()

    def validate_arguments(self, arguments: dict[str, Any]) -> list[str]:
        """
        Validate arguments against this tool's parameters.

        Returns list of validation errors. Empty list = valid.

        - Unknown arguments are rejected
        - Required parameters must be present
        - Present values must match the declared type
        """
        errors: list[str] = []
        known = {param.name: param for param in self.parameters}

        for arg in arguments:
            if arg not in known:
                errors.append(
                    f"Unknown argument '{arg}' - tool '{self.name}' does not accept this parameter"
                )

        for param in self.parameters:
            if param.name not in arguments:
                if param.required:
                    errors.append(f"Missing required parameter: '{param.name}'")
                continue
            problem = param.check(arguments[param.name])
            if problem:
                errors.append(problem)

        return errors

    def invoke(self, arguments: dict[str, Any]) -> Any:
        """Call the handler. Arguments must already be validated."""
        return self.handler(**arguments)

    def to_mcp_tool(self) -> Tool:
        """Convert this descriptor to an MCP Tool."""
        properties: dict[str, dict[str, Any]] = {}
        required: list[str] = []

        for param in self.parameters:
            schema: dict[str, Any] = {
                "type": param.type.value,
                "description": param.description,
            }
            if param.type is ParamType.INTEGER:
                schema["minimum"] = INT32_MIN
                schema["maximum"] = INT32_MAX
            properties[param.name] = schema
            if param.required:
                required.append(param.name)

        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=ToolInputSchema(properties=properties, required=required),
        )
