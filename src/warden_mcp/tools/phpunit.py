#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PHPUnit test runner tool

Runs vendor/phpunit/phpunit/phpunit inside the php-fpm container. When no
configuration file is given, phpunit.xml.dist is preferred over phpunit.xml.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

from mcp.types import CallToolResult

from ..core.exceptions import ConfigurationNotFoundError, ProcessSpawnError
from ..core.process_runner import ProcessRunner
from ..utils.config import Config
from ..utils.constants import (
    NO_ERRORS,
    NO_OUTPUT,
    PHP_FPM_EXEC_PREFIX,
    PHPUNIT_BIN,
    PHPUNIT_CONFIG_CANDIDATES,
)
from ..utils.helpers import format_command, or_placeholder
from .base import (
    optional_str,
    optional_str_list,
    require_arg,
    resolve_project_dir,
    text_response,
    tool_formatter,
)

logger = logging.getLogger('warden_mcp.tools.phpunit')


def detect_phpunit_config(project_dir: Path) -> str:
    """
    Pick the PHPUnit configuration file present in project_dir

    Returns:
        File name relative to the project root

    Raises:
        ConfigurationNotFoundError: No candidate exists
    """
    for candidate in PHPUNIT_CONFIG_CANDIDATES:
        if (project_dir / candidate).exists():
            return candidate
    raise ConfigurationNotFoundError(
        "No PHPUnit configuration file found (phpunit.xml.dist or phpunit.xml)"
    )


def build_phpunit_args(config_file: str, test_path: str, extra_args: List[str]) -> List[str]:
    warden_args = [*PHP_FPM_EXEC_PREFIX, "php", PHPUNIT_BIN, "-c", config_file]
    if test_path:
        warden_args.append(test_path)
    warden_args.extend(extra_args)
    return warden_args


@tool_formatter
async def run_unit_tests(runner: ProcessRunner, config: Config,
                         arguments: Dict[str, Any]) -> CallToolResult:
    project_path = require_arg(arguments, 'project_path')
    test_path = optional_str(arguments, 'test_path').strip()
    extra_args = optional_str_list(arguments, 'extra_args')
    project_dir = resolve_project_dir(project_path)
    config_file = optional_str(arguments, 'config_file') or detect_phpunit_config(project_dir)

    executable = config.warden.executable
    warden_args = build_phpunit_args(config_file, test_path, extra_args)
    command = format_command(executable, warden_args)

    debug_info = (
        "Debug Information:\n"
        f"- Project Path: {project_dir}\n"
        f"- Config File Used: {config_file}\n"
        f"- Test Path: {test_path or '(all tests)'}\n"
        f"- Extra Args: {' '.join(extra_args) if extra_args else '(none)'}\n"
        f"- Full Command: {command}\n"
    )

    try:
        result = await runner.execute(executable, warden_args, project_dir)
    except ProcessSpawnError as e:
        logger.error(f"PHPUnit could not run: {e}")
        text = (
            f"Failed to execute PHPUnit tests:\n{debug_info}\n"
            f"Error: {e}\n\n"
            f"Output:\n{or_placeholder(e.failure.partial_stdout, NO_OUTPUT)}\n\n"
            f"Errors:\n{or_placeholder(e.failure.partial_stderr, NO_ERRORS)}"
        )
        return text_response(text, True)

    logger.info(f"PHPUnit finished with exit code {result.exit_code}")
    status = "completed successfully" if result.success else "failed"
    text = (
        f"Running PHPUnit tests with config: {config_file} {status}!\n{debug_info}\n"
        f"Exit Code: {result.exit_code}\n\n"
        f"Output:\n{or_placeholder(result.stdout, NO_OUTPUT)}\n\n"
        f"Errors:\n{or_placeholder(result.stderr, NO_ERRORS)}"
    )
    return text_response(text, not result.success)
