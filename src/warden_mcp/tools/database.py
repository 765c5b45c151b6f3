#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Database query tool
Runs a SQL statement through the mysql client of the project's db container
"""

import logging
from typing import Any, Dict, List

from mcp.types import CallToolResult

from ..core.process_runner import ProcessRunner
from ..utils.config import Config
from ..utils.constants import DB_EXEC_PREFIX, REDACTED
from .base import optional_str, require_arg, resolve_project_dir, run_warden, tool_formatter

logger = logging.getLogger('warden_mcp.tools.database')


def build_db_query_args(config: Config, database: str, query: str) -> List[str]:
    """
    Build the warden argument vector for a query

    Credentials come from configuration, never from tool arguments.
    """
    return [
        *DB_EXEC_PREFIX,
        "mysql",
        "-u",
        config.database.user,
        f"-p{config.database.password}",
        database,
        "-e",
        query,
    ]


@tool_formatter
async def run_db_query(runner: ProcessRunner, config: Config,
                       arguments: Dict[str, Any]) -> CallToolResult:
    project_path = require_arg(arguments, 'project_path')
    query = require_arg(arguments, 'query')
    database = optional_str(arguments, 'database', config.database.default_database)
    project_dir = resolve_project_dir(project_path)

    logger.debug(f"Query against {database}: {query}")

    warden_args = build_db_query_args(config, database, query)
    masked = {f"-p{config.database.password}": f"-p{REDACTED}"}
    return await run_warden(runner, config, project_dir, warden_args,
                            f"Running database query in {database}", masked)
