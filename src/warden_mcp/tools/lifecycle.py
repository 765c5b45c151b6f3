"""Project and system service lifecycle tools: env up/down, svc up/down."""

from typing import Any, Dict

from mcp.types import CallToolResult

from ..core.process_runner import ProcessRunner
from ..utils.config import Config
from ..utils.constants import ENV_DOWN_ARGS, ENV_UP_ARGS, SVC_DOWN_ARGS, SVC_UP_ARGS
from .base import require_arg, resolve_project_dir, run_warden, tool_formatter


@tool_formatter
async def start_project(runner: ProcessRunner, config: Config,
                        arguments: Dict[str, Any]) -> CallToolResult:
    project_dir = resolve_project_dir(require_arg(arguments, 'project_path'))
    return await run_warden(runner, config, project_dir, ENV_UP_ARGS,
                            "Starting Warden project environment")


@tool_formatter
async def stop_project(runner: ProcessRunner, config: Config,
                       arguments: Dict[str, Any]) -> CallToolResult:
    project_dir = resolve_project_dir(require_arg(arguments, 'project_path'))
    return await run_warden(runner, config, project_dir, ENV_DOWN_ARGS,
                            "Stopping Warden project environment")


@tool_formatter
async def start_services(runner: ProcessRunner, config: Config,
                         arguments: Dict[str, Any]) -> CallToolResult:
    project_dir = resolve_project_dir(require_arg(arguments, 'project_path'))
    return await run_warden(runner, config, project_dir, SVC_UP_ARGS,
                            "Starting Warden system services")


@tool_formatter
async def stop_services(runner: ProcessRunner, config: Config,
                        arguments: Dict[str, Any]) -> CallToolResult:
    project_dir = resolve_project_dir(require_arg(arguments, 'project_path'))
    return await run_warden(runner, config, project_dir, SVC_DOWN_ARGS,
                            "Stopping Warden system services")
