"""
WBS 4.3: MCP Server Tests

The MCP server lists and dispatches tools straight from TOOL_REGISTRY.
Handlers are exercised through the server's request handler table, without
a stdio transport.
"""

from unittest.mock import AsyncMock, patch

import mcp.types as types
import pytest

from confluence_bridge.mcp_server import SERVER_NAME, create_server
from confluence_bridge.tools import ToolOutput


async def list_tools(server) -> list[types.Tool]:
    handler = server.request_handlers[types.ListToolsRequest]
    result = await handler(types.ListToolsRequest(method="tools/list"))
    return result.root.tools


async def call_tool(server, name: str, arguments: dict) -> types.CallToolResult:
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    result = await handler(request)
    return result.root


class TestServer:
    """Server identity and tool listing."""

    def test_server_name(self) -> None:
        assert create_server().name == SERVER_NAME == "Confluence Search Tool"

    @pytest.mark.asyncio
    async def test_lists_registry_tools(self) -> None:
        tools = await list_tools(create_server())

        assert [tool.name for tool in tools] == ["confluence-search"]
        assert tools[0].inputSchema["properties"]["state"]["type"] == "string"


class TestCallTool:
    """Tool calls return exactly one text block."""

    @pytest.mark.asyncio
    async def test_dispatches_through_registry(self) -> None:
        server = create_server()

        with patch("confluence_bridge.mcp_server.invoke_tool", new_callable=AsyncMock) as mock:
            mock.return_value = ToolOutput.from_text("<p>X</p>\n")
            result = await call_tool(server, "confluence-search", {"state": "confluence x"})

        mock.assert_awaited_once_with("confluence-search", {"state": "confluence x"})
        assert not result.isError
        assert [block.text for block in result.content] == ["<p>X</p>\n"]

    @pytest.mark.asyncio
    async def test_invalid_input_is_text(self) -> None:
        result = await call_tool(create_server(), "confluence-search", {"state": "guide"})

        assert not result.isError
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.content[0].text.startswith("Invalid input.")
