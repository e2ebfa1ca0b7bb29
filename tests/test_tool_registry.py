import logging

import pytest
from mcp.server.fastmcp import FastMCP

from core.tool_registry import ToolRegistry
from main import build_server
from tools.weather_tool import WeatherTool

TOOL_NAMES = {"get_current_weather", "get_weather_forecast", "get_weather_alerts"}


@pytest.mark.asyncio
async def test_register_and_describe(weather_client):
    registry = ToolRegistry()
    tool = WeatherTool(weather_client)

    assert registry.get_tool_descriptions() == "No tools registered."
    assert registry.register_tool(tool)
    assert registry.get_all_tools() == [tool]
    assert registry.get_tool_descriptions() == f"- weather_tool: {tool.description}"


@pytest.mark.asyncio
async def test_expose_publishes_every_capability(weather_client):
    registry = ToolRegistry()
    registry.register_tool(WeatherTool(weather_client))

    published = registry.expose(FastMCP("test"))

    assert set(published) == TOOL_NAMES


@pytest.mark.asyncio
async def test_server_lists_weather_tools(weather_client, caplog):
    caplog.set_level(logging.INFO, logger="main")
    server = build_server(weather_client)

    tools = {tool.name: tool for tool in await server.list_tools()}

    assert set(tools) == TOOL_NAMES
    schema = tools["get_current_weather"].inputSchema
    assert schema["required"] == ["city"]
    assert set(schema["properties"]) == {"city", "country_code"}
    assert schema["properties"]["city"]["description"] == "The city name to get weather for"
    assert tools["get_weather_forecast"].description == "Gets weather forecast for the specified city."
    assert "- weather_tool:" in caplog.text


@pytest.mark.asyncio
async def test_each_tool_describes_its_city_parameter(weather_client):
    server = build_server(weather_client)

    tools = {tool.name: tool for tool in await server.list_tools()}

    city = {name: tool.inputSchema["properties"]["city"]["description"] for name, tool in tools.items()}
    assert city == {
        "get_current_weather": "The city name to get weather for",
        "get_weather_forecast": "The city name to get weather forecast for",
        "get_weather_alerts": "The city name to get weather alerts for",
    }
