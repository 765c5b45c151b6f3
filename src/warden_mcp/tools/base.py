#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared formatter machinery
Argument validation, project directory resolution, warden invocation and
rendering of the uniform text envelope returned by every tool
"""

import functools
import json
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence

from mcp.types import CallToolResult, TextContent

from ..core.exceptions import (
    InvalidInputError,
    ProcessSpawnError,
    ProjectNotFoundError,
    WardenMCPError,
)
from ..core.process_runner import ProcessRunner
from ..core.types import CommandResult
from ..utils.config import Config
from ..utils.constants import NO_ERRORS, NO_OUTPUT
from ..utils.helpers import format_command, normalize_project_path, or_placeholder

logger = logging.getLogger('warden_mcp.tools')

Formatter = Callable[[ProcessRunner, Config, Dict[str, Any]], Awaitable[CallToolResult]]

NOT_RUN = "(not run)"
NOT_PROVIDED = "(not provided)"


# ==================== Envelopes ====================

def text_response(text: str, is_error: bool) -> CallToolResult:
    """Wrap text into the envelope returned to the protocol layer"""
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


def json_response(payload: Dict[str, Any], is_error: bool) -> CallToolResult:
    """Wrap a JSON document into the envelope"""
    return text_response(json.dumps(payload, ensure_ascii=False, indent=2), is_error)


def render_result(description: str, command: str, working_dir: Path,
                  result: CommandResult) -> CallToolResult:
    """Render a finished command, success is exit code 0"""
    status = "completed successfully" if result.success else "failed"
    text = (
        f"{description} {status}!\n\n"
        f"Command: {command}\n"
        f"Working directory: {working_dir}\n"
        f"Exit Code: {result.exit_code}\n\n"
        f"Output:\n{or_placeholder(result.stdout, NO_OUTPUT)}\n\n"
        f"Errors:\n{or_placeholder(result.stderr, NO_ERRORS)}"
    )
    return text_response(text, not result.success)


def render_failure(command: str, working_dir: Any, message: str,
                   stdout: str = "", stderr: str = "",
                   header: str = "Failed to execute command:") -> CallToolResult:
    """Render a command that never produced an exit code"""
    text = (
        f"{header}\n\n"
        f"Command: {command}\n"
        f"Working directory: {working_dir}\n"
        f"Error: {message}\n\n"
        f"Output:\n{or_placeholder(stdout, NO_OUTPUT)}\n\n"
        f"Errors:\n{or_placeholder(stderr, NO_ERRORS)}"
    )
    return text_response(text, True)


# ==================== Argument Validation ====================

def require_arg(arguments: Dict[str, Any], name: str) -> str:
    """
    Fetch a required string argument

    Raises:
        InvalidInputError: Argument absent or blank
    """
    value = arguments.get(name)
    if value is None or not str(value).strip():
        raise InvalidInputError(f"{name} is required")
    return str(value)


def optional_str(arguments: Dict[str, Any], name: str, default: str = "") -> str:
    """Fetch an optional string argument, blank counts as absent"""
    value = arguments.get(name)
    if value is None or not str(value).strip():
        return default
    return str(value)


def optional_str_list(arguments: Dict[str, Any], name: str) -> List[str]:
    """
    Fetch an optional array-of-strings argument

    Raises:
        InvalidInputError: Argument present but not a list
    """
    value = arguments.get(name)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise InvalidInputError(f"{name} must be an array of strings")
    return [str(item) for item in value]


def optional_bool(arguments: Dict[str, Any], name: str, default: bool) -> bool:
    """Fetch an optional boolean argument, accepting common string spellings"""
    value = arguments.get(name)
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def resolve_project_dir(project_path: str) -> Path:
    """
    Strip trailing separators, make absolute and check existence

    Raises:
        ProjectNotFoundError: Directory does not exist
    """
    absolute = normalize_project_path(project_path)
    if not absolute.exists():
        raise ProjectNotFoundError(f"Project directory does not exist: {absolute}")
    return absolute


# ==================== Invocation ====================

async def run_warden(runner: ProcessRunner, config: Config, project_dir: Path,
                     warden_args: Sequence[str], description: str,
                     masked: Optional[Dict[str, str]] = None) -> CallToolResult:
    """
    Run `warden <args>` in project_dir and render the envelope

    Args:
        runner: Process runner
        config: Configuration (warden executable)
        project_dir: Resolved, existing working directory
        warden_args: Arguments after the executable
        description: Leading sentence of the envelope text
        masked: Arguments to hide in the rendered command

    Returns:
        Envelope with isError mirroring the exit code
    """
    executable = config.warden.executable
    command = format_command(executable, warden_args, masked)

    try:
        result = await runner.execute(executable, list(warden_args), project_dir)
    except ProcessSpawnError as e:
        logger.error(f"{command} could not run: {e}")
        return render_failure(command, project_dir, str(e),
                              e.failure.partial_stdout, e.failure.partial_stderr)

    logger.info(f"{command} finished with exit code {result.exit_code}")
    return render_result(description, command, project_dir, result)


def tool_formatter(func: Formatter) -> Formatter:
    """
    Convert any WardenMCPError raised by a formatter into an error envelope

    Validation and resolution failures happen before any process is spawned,
    so the envelope reports the command as not run.
    """
    @functools.wraps(func)
    async def wrapper(runner: ProcessRunner, config: Config,
                      arguments: Optional[Dict[str, Any]]) -> CallToolResult:
        arguments = arguments or {}
        try:
            return await func(runner, config, arguments)
        except WardenMCPError as e:
            logger.warning(f"{func.__name__} rejected: {e}")
            stdout = stderr = ""
            if isinstance(e, ProcessSpawnError):
                stdout, stderr = e.failure.partial_stdout, e.failure.partial_stderr
            return render_failure(
                NOT_RUN,
                arguments.get('project_path') or NOT_PROVIDED,
                str(e),
                stdout,
                stderr,
            )

    return wrapper
