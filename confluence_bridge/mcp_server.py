"""
Confluence Bridge - MCP Server Entry Point

Serves TOOL_REGISTRY over the Model Context Protocol on stdio:
- confluence-bridge-mcp

list_tools and call_tool consult the registry, so tools are declared once
(see confluence_bridge.tools) and dispatched here without per-tool glue.

stdout carries the protocol stream, so logging goes to stderr.
"""

from __future__ import annotations

import asyncio
import sys
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from confluence_bridge import __version__
from confluence_bridge.core.config import get_settings
from confluence_bridge.core.logging import configure_logging, get_logger
from confluence_bridge.core.tracing import configure_tracing
from confluence_bridge.tools import TOOL_REGISTRY, invoke_tool

SERVER_NAME = "Confluence Search Tool"

logger = get_logger(__name__)


def create_server() -> Server:
    """Build an MCP server whose tools come from TOOL_REGISTRY."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=spec.name,
                description=spec.description,
                inputSchema=spec.input_schema(),
            )
            for spec in TOOL_REGISTRY.values()
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        output = await invoke_tool(name, arguments)
        return [types.TextContent(type="text", text=block.text) for block in output.content]

    return server


async def serve() -> None:
    """Run the MCP server on stdio until the client disconnects."""
    server = create_server()
    async with stdio_server() as (read_stream, write_stream):
        logger.info("mcp_server_running", transport="stdio", tools=sorted(TOOL_REGISTRY))
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """Console entry point."""
    settings = get_settings()
    configure_logging(
        log_level=settings.log_level,
        json_output=settings.log_json,
        stream=sys.stderr,
    )
    if settings.tracing_enabled:
        configure_tracing(
            service_name=settings.service_name,
            console_export=settings.tracing_console_export,
            stream=sys.stderr,
        )

    try:
        asyncio.run(serve())
    except Exception:
        logger.exception("mcp_server_fatal")
        sys.exit(1)


if __name__ == "__main__":
    main()
