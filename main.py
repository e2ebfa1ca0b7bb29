#!/usr/bin/env python3
import argparse
import asyncio
import logging
import sys

from mcp.server.fastmcp import FastMCP

from api.openweather_client import OpenWeatherClient
from core.config import load_config, get_weather_settings
from core.logging_config import setup_logging
from core.tool_registry import ToolRegistry
from tools.weather_tool import WeatherTool

SERVER_NAME = "weather"


def build_server(weather_client: OpenWeatherClient) -> FastMCP:
    registry = ToolRegistry()
    registry.register_tool(WeatherTool(weather_client))

    server = FastMCP(SERVER_NAME)
    registry.expose(server)
    logging.getLogger(__name__).info(f"Registered tools:\n{registry.get_tool_descriptions()}")
    return server


async def async_main(config_file_path: str) -> int:
    config = load_config(config_file_path)

    logging_cfg = config.get("logging", {})
    setup_logging(
        console_level=logging_cfg.get("console_level", logging.INFO),
        file_level=logging.DEBUG,
        log_directory=logging_cfg.get("directory", "logs")
    )

    logger = logging.getLogger(__name__)
    logger.info("Weather MCP server starting...")

    settings = get_weather_settings(config)
    if not settings.get("api_key"):
        logger.warning("OpenWeatherMap API key not configured; upstream calls will be rejected.")

    async with OpenWeatherClient.from_settings(settings) as weather_client:
        server = build_server(weather_client)
        logger.info("Serving MCP tools over stdio")
        await server.run_stdio_async()

    logger.info("Weather MCP server stopped")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="OpenWeatherMap tools over MCP stdio")
    parser.add_argument("--config", default="config.yaml", help="Path to the YAML configuration file")
    args = parser.parse_args()

    try:
        return asyncio.run(async_main(args.config))
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())
