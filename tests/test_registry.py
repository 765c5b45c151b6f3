#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Test tool catalog, dispatch and the MCP server binding
"""

import asyncio
import json
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from warden_mcp.core.exceptions import ProcessSpawnError, UnknownToolError
from warden_mcp.core.types import CommandFailure, CommandResult
from warden_mcp.mcp.server import ENVIRONMENTS_URI, WardenMCPServer
from warden_mcp.tools.catalog import get_tools
from warden_mcp.tools.registry import FORMATTERS, build_handlers, dispatch
from warden_mcp.utils.constants import ALL_TOOL_NAMES, INIT_PROJECT_DEFAULTS

STATUS_OUTPUT = """Found the following running environments:
    shop a magento2 project
       Project Directory: /home/dev/shop
       Project URL: https://shop.test
"""


class TestCatalog:
    """Test the declared tool surface"""

    def test_every_tool_has_a_handler(self):
        assert [tool.name for tool in get_tools()] == ALL_TOOL_NAMES
        assert set(FORMATTERS) == set(ALL_TOOL_NAMES)

    def test_required_parameters(self):
        required = {tool.name: tool.inputSchema["required"] for tool in get_tools()}
        assert required["warden_list_environments"] == []
        assert required["warden_db_query"] == ["project_path", "query"]
        assert required["warden_run_unit_tests"] == ["project_path"]
        assert required["warden_init_project"] == ["project_path", "project_name"]

    def test_init_project_defaults(self):
        tool = next(t for t in get_tools() if t.name == "warden_init_project")
        properties = tool.inputSchema["properties"]
        assert len(properties) == 2 + len(INIT_PROJECT_DEFAULTS)
        assert properties["php_version"]["default"] == "8.3"
        assert properties["enable_xdebug"] == {
            "type": "boolean", "description": "Enable Xdebug (default: true)", "default": True}

    def test_database_default(self):
        tool = next(t for t in get_tools() if t.name == "warden_db_query")
        assert tool.inputSchema["properties"]["database"]["default"] == "magento"


class TestDispatch:
    """Test routing by tool name"""

    def test_unknown_tool_raises(self, config, make_runner):
        handlers = build_handlers(make_runner(), config)
        with pytest.raises(UnknownToolError):
            asyncio.run(dispatch(handlers, "warden_destroy_everything", {}))

    def test_routes_to_formatter(self, config, make_runner, project_dir):
        runner = make_runner()
        handlers = build_handlers(runner, config)
        envelope = asyncio.run(dispatch(handlers, "warden_stop_project", {"project_path": str(project_dir)}))
        assert envelope.isError is False
        assert runner.calls[0][1] == ["env", "down"]


class TestListEnvironments:
    """Test warden_list_environments"""

    def test_parsed_json(self, config, make_runner):
        runner = make_runner([CommandResult(STATUS_OUTPUT, "", 0)])
        handlers = build_handlers(runner, config)
        envelope = asyncio.run(dispatch(handlers, "warden_list_environments", None))
        payload = json.loads(envelope.content[0].text)
        assert envelope.isError is False
        assert runner.calls[0][:2] == ("warden", ["status"])
        assert payload["success"] is True
        assert payload["command"] == "warden status"
        assert payload["environments"] == [{"name": "shop", "path": "/home/dev/shop"}]
        assert payload["raw_output"] == STATUS_OUTPUT

    def test_non_zero_exit(self, config, make_runner):
        runner = make_runner([CommandResult("", "", 1)])
        envelope = asyncio.run(build_handlers(runner, config)["warden_list_environments"]({}))
        payload = json.loads(envelope.content[0].text)
        assert envelope.isError is True
        assert payload["environments"] == []
        assert payload["error"] == "Unknown error"

    def test_spawn_failure(self, config, make_runner):
        runner = make_runner(error=ProcessSpawnError(CommandFailure("Failed to spawn command: warden")))
        envelope = asyncio.run(build_handlers(runner, config)["warden_list_environments"]({}))
        payload = json.loads(envelope.content[0].text)
        assert envelope.isError is True
        assert payload["exit_code"] == -1
        assert payload["raw_errors"] == ""


class TestServer:
    """Test WardenMCPServer wiring without a transport"""

    def test_handle_tool_call(self, config, make_runner, project_dir):
        runner = make_runner([CommandResult("", "", 0)])
        server = WardenMCPServer(config, runner=runner)
        envelope = asyncio.run(server.handle_tool_call("warden_start_svc", {"project_path": str(project_dir)}))
        assert envelope.isError is False
        assert runner.calls[0][1] == ["svc", "up"]

    def test_environments_resource(self, config, make_runner):
        runner = make_runner([CommandResult(STATUS_OUTPUT, "", 0)])
        server = WardenMCPServer(config, runner=runner)
        contents = asyncio.run(server._handle_resource_read(ENVIRONMENTS_URI))
        assert len(contents) == 1
        assert contents[0].mime_type == "application/json"
        assert json.loads(contents[0].content) == [{"name": "shop", "path": "/home/dev/shop"}]

    def test_environments_resource_swallows_spawn_failure(self, config, make_runner):
        runner = make_runner(error=ProcessSpawnError(CommandFailure("Failed to spawn command: warden")))
        server = WardenMCPServer(config, runner=runner)
        contents = asyncio.run(server._handle_resource_read(ENVIRONMENTS_URI))
        assert json.loads(contents[0].content) == []

    def test_unknown_resource(self, config, make_runner):
        server = WardenMCPServer(config, runner=make_runner())
        with pytest.raises(ValueError):
            asyncio.run(server._handle_resource_read("warden://nothing"))


class TestPackaging:
    """The server targets the 1.x low-level SDK API"""

    def test_mcp_major_version_pinned(self):
        pyproject = (Path(__file__).parent.parent / "pyproject.toml").read_text(encoding='utf-8')
        assert '"mcp>=1.17,<2"' in pyproject
