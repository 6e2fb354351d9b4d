"""
MCP stdio server

Serves the same registry as the HTTP app over stdin/stdout, using the
official MCP SDK. Logs go to stderr; stdout carries protocol frames only.
"""

import asyncio
import logging
from typing import Any

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from .config import SERVER_NAME, configure_logging
from .registry import ToolRegistry, create_demo_registry

logger = logging.getLogger(__name__)


def build_server(registry: ToolRegistry) -> Server:
    """Wire an MCP SDK server to the registry's list and invoke paths."""
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.inputSchema.model_dump(),
            )
            for tool in registry.list_tools()
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        # Failures propagate; the SDK reports them as isError results.
        value = registry.invoke(name, arguments or {})
        return [types.TextContent(type="text", text=str(value))]

    return server


async def serve(registry: ToolRegistry | None = None) -> None:
    """Run the MCP server on stdio until the client disconnects."""
    registry = registry or create_demo_registry()
    server = build_server(registry)
    logger.info("Serving %d tools on stdio", len(registry.tools))

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main() -> None:
    configure_logging()
    asyncio.run(serve())


if __name__ == "__main__":
    main()
