"""PHP execution tools run inside the php-fpm container."""

from typing import Any, Dict

from mcp.types import CallToolResult

from ..core.process_runner import ProcessRunner
from ..utils.config import Config
from ..utils.constants import MAGENTO_BIN, PHP_FPM_EXEC_PREFIX
from .base import optional_str_list, require_arg, resolve_project_dir, run_warden, tool_formatter


@tool_formatter
async def run_php_script(runner: ProcessRunner, config: Config,
                         arguments: Dict[str, Any]) -> CallToolResult:
    """Run a PHP script, path relative to the project root"""
    project_path = require_arg(arguments, 'project_path')
    script_path = require_arg(arguments, 'script_path')
    script_args = optional_str_list(arguments, 'args')
    project_dir = resolve_project_dir(project_path)

    warden_args = [*PHP_FPM_EXEC_PREFIX, "php", script_path, *script_args]
    return await run_warden(runner, config, project_dir, warden_args,
                            f"Running PHP script: {script_path}")


@tool_formatter
async def run_magento_cli(runner: ProcessRunner, config: Config,
                          arguments: Dict[str, Any]) -> CallToolResult:
    """Run a bin/magento command, given without the bin/magento prefix"""
    project_path = require_arg(arguments, 'project_path')
    command = require_arg(arguments, 'command')
    command_args = optional_str_list(arguments, 'args')
    project_dir = resolve_project_dir(project_path)

    warden_args = [*PHP_FPM_EXEC_PREFIX, "php", MAGENTO_BIN, command, *command_args]
    return await run_warden(runner, config, project_dir, warden_args,
                            f"Running Magento CLI: {MAGENTO_BIN} {command}")
