"""
Tests for the FastMCP binding, driven through the in-memory fastmcp Client.
"""

import asyncio

from fastmcp import Client

from revit_mcp.tools.catalog import build_registry
from revit_mcp.tools.mcp_server import RevitCommandTool, create_server

from .conftest import FakeConnections


def with_client(mcp, scenario):
    async def run():
        async with Client(mcp) as client:
            return await scenario(client)

    return asyncio.run(run())


class TestServerAssembly:
    """Tests for tool registration."""

    def test_lists_every_tool_once(self):
        mcp = create_server(connections=FakeConnections())

        async def scenario(client):
            return await client.list_tools()

        tools = with_client(mcp, scenario)
        names = [tool.name for tool in tools]

        assert sorted(names) == sorted(build_registry().names())
        assert len(names) == len(set(names))

    def test_advertised_schema_comes_from_contract(self):
        mcp = create_server(connections=FakeConnections())

        async def scenario(client):
            return {tool.name: tool for tool in await client.list_tools()}

        tools = with_client(mcp, scenario)
        grid = tools["create_grid"]

        assert set(grid.input_schema["required"]) == {"xCount", "xSpacing", "yCount", "ySpacing"}
        assert "data" in tools["operate_element"].input_schema["properties"]
        assert "millimeters" in grid.description

    def test_tool_repr(self):
        registry = build_registry()
        tool = RevitCommandTool(registry.get("create_grid"), dispatcher=None)

        assert repr(tool) == "RevitCommandTool(name='create_grid', command='create_grid')"


class TestToolCalls:
    """Calls routed from the MCP client to the fake plugin."""

    def test_call_returns_text_blocks(self):
        connections = FakeConnections().reply_with(
            response=[{"id": 1, "category": "Walls", "typeName": "Basic Wall"}]
        )
        mcp = create_server(connections=connections)

        async def scenario(client):
            return await client.call_tool("ai_element_filter", {"data": {"filterCategory": "OST_Walls"}})

        result = with_client(mcp, scenario)

        assert [block.type for block in result.content] == ["text", "text"]
        assert result.content[0].text.startswith("Found 1 element(s)")
        assert connections.sent[0][0] == "ai_element_filter"

    def test_invalid_arguments_come_back_as_text(self):
        connections = FakeConnections()
        mcp = create_server(connections=connections)

        async def scenario(client):
            return await client.call_tool(
                "operate_element", {"data": {"elementIds": [1], "action": "SetTransparency",
                                             "transparencyValue": 150}}
            )

        result = with_client(mcp, scenario)

        assert result.content[0].text.startswith("Operation failed: invalid arguments: data.transparencyValue")
        assert connections.sent == []

    def test_remote_failure_comes_back_as_text(self):
        connections = FakeConnections().reply_with(success=False, message="No rooms in model")
        mcp = create_server(connections=connections)

        async def scenario(client):
            return await client.call_tool("export_room_data", {})

        result = with_client(mcp, scenario)

        assert [block.text for block in result.content] == ["Failed to export room data: No rooms in model"]
