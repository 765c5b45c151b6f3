#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
warden-mcp MCP Server Main Module
Implemented using official MCP SDK, exposing Warden environment management tools
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

# Official MCP SDK
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Resource, Tool

from ..core.process_runner import ProcessRunner
from ..tools.catalog import get_tools
from ..tools.environments import get_environment_list
from ..tools.registry import build_handlers, dispatch
from ..utils.config import Config
from ..utils.constants import SERVER_NAME, SERVER_VERSION
from ..utils.helpers import setup_logging

ENVIRONMENTS_URI = "warden://environments"


class WardenMCPServer:
    """
    warden-mcp MCP Server

    Using official MCP SDK to expose warden CLI operations to AI assistants
    """

    def __init__(self, config: Optional[Config] = None,
                 runner: Optional[ProcessRunner] = None):
        """
        Initialize MCP Server

        Args:
            config: Configuration object, uses default configuration when None
            runner: Process runner, built from config when None
        """
        self.config = config or Config()
        self.runner = runner or ProcessRunner(timeout_seconds=self.config.timeout_seconds)
        self.logger = logging.getLogger('warden_mcp.mcp_server')

        # Name -> handler table, fixed for the server lifetime
        self.handlers = build_handlers(self.runner, self.config)

        # Create MCP Server instance
        self.server = Server(SERVER_NAME, version=SERVER_VERSION)

        # Register handlers
        self._register_handlers()

        self.logger.info(f"{SERVER_NAME} initialized with {len(self.handlers)} tools")

    def _register_handlers(self):
        """Register all MCP handlers"""

        @self.server.list_tools()
        async def list_tools() -> List[Tool]:
            """Return available tools list"""
            return get_tools()

        @self.server.call_tool()
        async def call_tool(name: str, arguments: Dict[str, Any]) -> CallToolResult:
            """Handle tool calls"""
            return await self.handle_tool_call(name, arguments)

        @self.server.list_resources()
        async def list_resources() -> List[Resource]:
            """Return available resources list"""
            return self._get_resources()

        @self.server.read_resource()
        async def read_resource(uri) -> List[ReadResourceContents]:
            """Read resource content"""
            return await self._handle_resource_read(uri)

    async def handle_tool_call(self, name: str, arguments: Optional[Dict[str, Any]]) -> CallToolResult:
        """Dispatch a tool call, unknown names raise UnknownToolError"""
        result = await dispatch(self.handlers, name, arguments)
        if result.isError:
            self.logger.warning(f"Tool {name} reported an error")
        return result

    def _get_resources(self) -> List[Resource]:
        """Get resource list"""
        return [
            Resource(
                uri=ENVIRONMENTS_URI,
                name="Running Environments",
                description="Running Warden environments as [{name, path}]",
                mimeType="application/json"
            ),
        ]

    async def _handle_resource_read(self, uri) -> List[ReadResourceContents]:
        """Handle resource reads"""
        if str(uri) == ENVIRONMENTS_URI:
            environments = await get_environment_list(self.runner, self.config)
            body = json.dumps(environments, ensure_ascii=False, indent=2)
            return [ReadResourceContents(content=body, mime_type="application/json")]
        raise ValueError(f"Unknown resource: {uri}")

    async def run(self):
        """Run MCP Server"""
        self.logger.info(f"Starting {SERVER_NAME} on stdio...")

        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options()
            )


async def run_server(config: Optional[Config] = None):
    """Start MCP Server"""
    config = config or Config()
    setup_logging(log_file=config.get_log_file(), level=config.logging.level)

    server = WardenMCPServer(config)
    await server.run()


def main():
    """MCP server entry point"""
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
