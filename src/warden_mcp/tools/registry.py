#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tool registry and dispatcher

The handler table is built once at startup from the runner and config and
passed to dispatch explicitly. Handlers keep no state between calls.
"""

import functools
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from mcp.types import CallToolResult

from ..core.exceptions import UnknownToolError
from ..core.process_runner import ProcessRunner
from ..utils.config import Config
from ..utils import constants as c
from . import composer, database, environments, init_project, lifecycle, php, phpunit

logger = logging.getLogger('warden_mcp.tools.registry')

Handler = Callable[[Optional[Dict[str, Any]]], Awaitable[CallToolResult]]

FORMATTERS = {
    c.TOOL_LIST_ENVIRONMENTS: environments.list_environments,
    c.TOOL_START_PROJECT: lifecycle.start_project,
    c.TOOL_STOP_PROJECT: lifecycle.stop_project,
    c.TOOL_START_SVC: lifecycle.start_services,
    c.TOOL_STOP_SVC: lifecycle.stop_services,
    c.TOOL_DB_QUERY: database.run_db_query,
    c.TOOL_PHP_SCRIPT: php.run_php_script,
    c.TOOL_MAGENTO_CLI: php.run_magento_cli,
    c.TOOL_RUN_UNIT_TESTS: phpunit.run_unit_tests,
    c.TOOL_COMPOSER: composer.run_composer,
    c.TOOL_INIT_PROJECT: init_project.init_project,
}


def build_handlers(runner: ProcessRunner, config: Config) -> Dict[str, Handler]:
    """Bind every formatter to the runner and config"""
    return {
        name: functools.partial(formatter, runner, config)
        for name, formatter in FORMATTERS.items()
    }


async def dispatch(handlers: Dict[str, Handler], name: str,
                   arguments: Optional[Dict[str, Any]]) -> CallToolResult:
    """
    Route a tool call to its handler

    Raises:
        UnknownToolError: name is not in the handler table
    """
    handler = handlers.get(name)
    if handler is None:
        raise UnknownToolError(f"Unknown tool: {name}")

    logger.debug(f"Tool call: {name}, args: {arguments}")
    return await handler(arguments or {})
