#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Project initializer tool

Creates the project directory, runs `warden env init <name> <type>` and
rewrites the generated .env with the requested runtime versions and
feature toggles.
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict

from mcp.types import CallToolResult

from ..core.exceptions import EnvironmentInitError, ProcessSpawnError
from ..core.process_runner import ProcessRunner
from ..utils.config import Config
from ..utils.constants import (
    ENV_FILE_NAME,
    ENV_TOGGLE_KEYS,
    ENV_VERSION_KEYS,
    INIT_PROJECT_DEFAULTS,
    NO_ERRORS,
    NO_OUTPUT,
)
from ..utils.helpers import normalize_project_path, or_placeholder
from .base import optional_bool, optional_str, require_arg, text_response, tool_formatter

logger = logging.getLogger('warden_mcp.tools.init_project')


def collect_init_settings(arguments: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults to every optional init argument"""
    settings: Dict[str, Any] = {}
    for name, default in INIT_PROJECT_DEFAULTS.items():
        if isinstance(default, bool):
            settings[name] = optional_bool(arguments, name, default)
        else:
            settings[name] = optional_str(arguments, name, default)
    return settings


def build_env_updates(settings: Dict[str, Any]) -> Dict[str, str]:
    """Map init settings onto .env keys, toggles rendered as "1"/"0" """
    updates = {key: str(settings[name]) for key, name in ENV_VERSION_KEYS.items()}
    updates.update({key: "1" if settings[name] else "0" for key, name in ENV_TOGGLE_KEYS.items()})
    return updates


def apply_env_updates(content: str, updates: Dict[str, str]) -> str:
    """
    Replace or append KEY=value lines

    An existing key is matched on a whole line and replaced in place; a
    missing key is appended as a new line.
    """
    for key, value in updates.items():
        line = f"{key}={value}"
        pattern = re.compile(rf"^{re.escape(key)}=.*$", re.MULTILINE)
        if pattern.search(content):
            content = pattern.sub(lambda _: line, content, count=1)
        else:
            if content and not content.endswith("\n"):
                content += "\n"
            content += line + "\n"
    return content


def update_env_file(env_path: Path, updates: Dict[str, str]) -> bool:
    """
    Read-modify-write the .env file

    Returns:
        False when the file does not exist and nothing was written
    """
    if not env_path.exists():
        logger.warning(f"{env_path} not found, skipping configuration update")
        return False

    content = env_path.read_text(encoding='utf-8', errors='surrogateescape')
    env_path.write_text(apply_env_updates(content, updates), encoding='utf-8', errors='surrogateescape')
    logger.info(f"Updated {len(updates)} keys in {env_path}")
    return True


def _enabled(flag: bool) -> str:
    return "enabled" if flag else "disabled"


def render_init_summary(project_dir: Path, project_name: str,
                        settings: Dict[str, Any], stdout: str) -> str:
    s = settings
    return (
        "Warden project initialized successfully!\n\n"
        f"Project Path: {project_dir}\n"
        f"Project Name: {project_name}\n"
        f"Environment Type: {s['environment_type']}\n\n"
        "Configuration:\n"
        f"- PHP Version: {s['php_version']}\n"
        f"- MySQL: {s['mysql_distribution']} {s['mysql_version']}\n"
        f"- Node.js: {s['node_version']}\n"
        f"- Composer: {s['composer_version']}\n"
        f"- OpenSearch: {s['opensearch_version']} ({_enabled(s['enable_opensearch'])})\n"
        f"- Redis: {s['redis_version']} ({_enabled(s['enable_redis'])})\n"
        f"- Varnish: {_enabled(s['enable_varnish'])}\n"
        f"- RabbitMQ: {_enabled(s['enable_rabbitmq'])}\n"
        f"- Xdebug: {_enabled(s['enable_xdebug'])}\n\n"
        "Next steps:\n"
        f"1. Navigate to: {project_dir}\n"
        "2. Run: warden env up\n"
        f"3. Your environment will be available at: https://{project_name}.test\n\n"
        f"Output:\n{stdout}"
    )


@tool_formatter
async def init_project(runner: ProcessRunner, config: Config,
                       arguments: Dict[str, Any]) -> CallToolResult:
    project_path = require_arg(arguments, 'project_path')
    project_name = require_arg(arguments, 'project_name')
    settings = collect_init_settings(arguments)
    project_dir = normalize_project_path(project_path)

    stdout = stderr = ""
    try:
        project_dir.mkdir(parents=True, exist_ok=True)

        result = await runner.execute(
            config.warden.executable,
            ["env", "init", project_name, settings['environment_type']],
            project_dir,
        )
        stdout, stderr = result.stdout, result.stderr
        if not result.success:
            raise EnvironmentInitError(f"Warden init failed: {result.stderr}")

        update_env_file(project_dir / ENV_FILE_NAME, build_env_updates(settings))
    except ProcessSpawnError as e:
        stdout, stderr, message = e.failure.partial_stdout, e.failure.partial_stderr, str(e)
    except (EnvironmentInitError, OSError) as e:
        message = str(e)
    else:
        logger.info(f"Initialized warden project {project_name} in {project_dir}")
        return text_response(render_init_summary(project_dir, project_name, settings, stdout), False)

    logger.warning(f"Initialization of {project_name} failed: {message}")
    text = (
        "Failed to initialize Warden project:\n\n"
        f"Project Path: {project_path}\n"
        f"Project Name: {project_name}\n"
        f"Error: {message}\n\n"
        f"Output:\n{or_placeholder(stdout, NO_OUTPUT)}\n\n"
        f"Errors:\n{or_placeholder(stderr, NO_ERRORS)}"
    )
    return text_response(text, True)
