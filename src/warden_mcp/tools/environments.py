#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Environment listing tool
Runs `warden status` and returns the running environments as JSON
"""

import logging
import os
from typing import Any, Dict, List

from mcp.types import CallToolResult

from ..core.exceptions import ProcessSpawnError
from ..core.process_runner import ProcessRunner
from ..parsers.environment_parser import parse_environment_list
from ..utils.config import Config
from ..utils.constants import SPAWN_FAILURE_EXIT_CODE, STATUS_ARGS
from ..utils.helpers import format_command
from .base import json_response

logger = logging.getLogger('warden_mcp.tools.environments')


async def list_environments(runner: ProcessRunner, config: Config,
                            arguments: Dict[str, Any]) -> CallToolResult:
    """List running environments with their project directories"""
    executable = config.warden.executable
    command = format_command(executable, STATUS_ARGS)

    try:
        result = await runner.execute(executable, STATUS_ARGS, os.getcwd())
    except ProcessSpawnError as e:
        logger.error(f"{command} could not run: {e}")
        return json_response({
            "success": False,
            "command": command,
            "exit_code": SPAWN_FAILURE_EXIT_CODE,
            "environments": [],
            "error": str(e),
            "raw_output": e.failure.partial_stdout,
            "raw_errors": e.failure.partial_stderr,
        }, True)

    if not result.success:
        logger.warning(f"{command} exited with code {result.exit_code}")
        return json_response({
            "success": False,
            "command": command,
            "exit_code": result.exit_code,
            "environments": [],
            "error": result.stderr or "Unknown error",
            "raw_output": result.stdout,
        }, True)

    environments = parse_environment_list(result.stdout)
    logger.info(f"Found {len(environments)} running environments")
    return json_response({
        "success": True,
        "command": command,
        "exit_code": result.exit_code,
        "environments": [env.to_dict() for env in environments],
        "raw_output": result.stdout,
    }, False)


async def get_environment_list(runner: ProcessRunner, config: Config) -> List[Dict[str, str]]:
    """
    Running environments as plain {name, path} dicts

    Returns an empty list when warden cannot be run or reports failure.
    """
    try:
        result = await runner.execute(config.warden.executable, STATUS_ARGS, os.getcwd())
    except ProcessSpawnError as e:
        logger.debug(f"Environment lookup failed: {e}")
        return []
    if not result.success:
        return []
    return [env.to_dict() for env in parse_environment_list(result.stdout)]
