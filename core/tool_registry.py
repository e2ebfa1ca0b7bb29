#!/usr/bin/env python3
# core/tool_registry.py - Tool registry for managing available tools

import logging
from typing import Dict, List

from mcp.server.fastmcp import FastMCP

from tools.base_tool import BaseTool


class ToolRegistry:
    """Registry of tools published to the MCP server."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.tools: Dict[str, BaseTool] = {}

    def register_tool(self, tool: BaseTool) -> bool:
        """
        Register a tool with the registry.

        Args:
            tool: The tool instance to register

        Returns:
            bool: True if registration successful, False otherwise
        """
        if not tool.name:
            self.logger.error("Cannot register tool without a name")
            return False

        if tool.name in self.tools:
            self.logger.warning(f"Tool with name '{tool.name}' already registered. Overwriting.")

        self.tools[tool.name] = tool
        self.logger.debug(f"Registered tool: {tool.name}")
        return True

    def get_all_tools(self) -> List[BaseTool]:
        return list(self.tools.values())

    def get_tool_descriptions(self) -> str:
        if not self.tools:
            return "No tools registered."

        descriptions = []
        for name, tool in self.tools.items():
            descriptions.append(f"- {name}: {tool.description}")

        return "\n".join(descriptions)

    def expose(self, server: FastMCP) -> List[str]:
        """
        Publish every capability of every registered tool on an MCP server.

        Args:
            server: The FastMCP server the capabilities are added to

        Returns:
            Names of the published MCP tools
        """
        published = []
        for tool in self.get_all_tools():
            for capability in tool.get_capabilities():
                server.add_tool(
                    getattr(tool, capability),
                    name=capability,
                    description=tool.describe_capability(capability)
                )
                published.append(capability)
                self.logger.info(f"Exposed MCP tool '{capability}' from {tool.name}")
        return published
