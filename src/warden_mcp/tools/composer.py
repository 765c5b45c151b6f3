#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Composer tool

Probes the php-fpm container for Composer 2 before running the requested
command: `composer2` is preferred, otherwise `composer` is accepted only
when `composer --version` reports major version 2.
"""

import logging
from pathlib import Path
from typing import Any, Dict

from mcp.types import CallToolResult

from ..core.exceptions import ProcessSpawnError, UnsupportedVersionError
from ..core.process_runner import ProcessRunner
from ..utils.config import Config
from ..utils.constants import (
    COMPOSER_BINARY,
    COMPOSER_V2_BINARY,
    COMPOSER_V2_MARKER,
    PHP_FPM_EXEC_PREFIX,
)
from .base import (
    render_failure,
    render_result,
    require_arg,
    resolve_project_dir,
    text_response,
    tool_formatter,
)

logger = logging.getLogger('warden_mcp.tools.composer')


async def probe_composer(runner: ProcessRunner, config: Config, project_dir: Path) -> str:
    """
    Find a Composer 2 binary inside the php-fpm container

    Returns:
        Binary name to invoke

    Raises:
        UnsupportedVersionError: No Composer, or not version 2
        ProcessSpawnError: warden itself could not be launched
    """
    executable = config.warden.executable

    v2_check = await runner.execute(
        executable, [*PHP_FPM_EXEC_PREFIX, "which", COMPOSER_V2_BINARY], project_dir)
    if v2_check.success:
        return COMPOSER_V2_BINARY

    generic_check = await runner.execute(
        executable, [*PHP_FPM_EXEC_PREFIX, "which", COMPOSER_BINARY], project_dir)
    if not generic_check.success:
        raise UnsupportedVersionError(
            "Composer not found!\n\n"
            f"Neither '{COMPOSER_V2_BINARY}' nor '{COMPOSER_BINARY}' commands are available "
            "in the php-fpm container.\n\n"
            "Please install Composer version 2 in your container."
        )

    version_check = await runner.execute(
        executable, [*PHP_FPM_EXEC_PREFIX, COMPOSER_BINARY, "--version"], project_dir)
    if not version_check.success:
        raise UnsupportedVersionError(
            "Failed to check Composer version!\n\n"
            f"Command: {COMPOSER_BINARY} --version\n"
            f"Error: {version_check.stderr}"
        )

    if COMPOSER_V2_MARKER not in version_check.stdout.lower():
        raise UnsupportedVersionError(
            "Composer version 2 is required!\n\n"
            f"Found: {version_check.stdout.strip()}\n\n"
            "Please install or upgrade to Composer version 2."
        )

    return COMPOSER_BINARY


@tool_formatter
async def run_composer(runner: ProcessRunner, config: Config,
                       arguments: Dict[str, Any]) -> CallToolResult:
    project_path = require_arg(arguments, 'project_path')
    command = require_arg(arguments, 'command')
    project_dir = resolve_project_dir(project_path)
    display = f"{COMPOSER_BINARY} {command}"

    try:
        composer = await probe_composer(runner, config, project_dir)
        display = f"{composer} {command}"
        warden_args = [*PHP_FPM_EXEC_PREFIX, composer, *command.split()]
        result = await runner.execute(config.warden.executable, warden_args, project_dir)
    except UnsupportedVersionError as e:
        logger.warning(f"Composer probe failed in {project_dir}")
        return text_response(str(e), True)
    except ProcessSpawnError as e:
        logger.error(f"{display} could not run: {e}")
        return render_failure(display, project_dir, str(e),
                              e.failure.partial_stdout, e.failure.partial_stderr,
                              header="Failed to execute Composer command:")

    logger.info(f"{display} finished with exit code {result.exit_code}")
    return render_result("Composer command", display, project_dir, result)
