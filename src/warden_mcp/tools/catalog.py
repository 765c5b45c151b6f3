#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tool catalog
Static MCP tool declarations: names, descriptions and input schemas
"""

from typing import Any, Dict, List

from mcp.types import Tool

from ..utils.constants import (
    DEFAULT_DATABASE,
    INIT_PROJECT_DEFAULTS,
    TOOL_COMPOSER,
    TOOL_DB_QUERY,
    TOOL_INIT_PROJECT,
    TOOL_LIST_ENVIRONMENTS,
    TOOL_MAGENTO_CLI,
    TOOL_PHP_SCRIPT,
    TOOL_RUN_UNIT_TESTS,
    TOOL_START_PROJECT,
    TOOL_START_SVC,
    TOOL_STOP_PROJECT,
    TOOL_STOP_SVC,
)

PROJECT_PATH = {
    "type": "string",
    "description": "Path to the project directory"
}

# Descriptions for warden_init_project optionals, defaults come from INIT_PROJECT_DEFAULTS
INIT_PARAMETER_LABELS = {
    'environment_type': "Environment type",
    'php_version': "PHP version",
    'mysql_distribution': "MySQL distribution",
    'mysql_version': "MySQL version",
    'node_version': "Node.js version",
    'composer_version': "Composer version",
    'opensearch_version': "OpenSearch version",
    'redis_version': "Redis version",
    'enable_redis': "Enable Redis",
    'enable_opensearch': "Enable OpenSearch",
    'enable_varnish': "Enable Varnish",
    'enable_rabbitmq': "Enable RabbitMQ",
    'enable_xdebug': "Enable Xdebug",
}


def _string_array(description: str) -> Dict[str, Any]:
    return {
        "type": "array",
        "description": description,
        "items": {"type": "string"},
        "default": []
    }


def _project_only_schema() -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {"project_path": PROJECT_PATH},
        "required": ["project_path"]
    }


def _init_project_properties() -> Dict[str, Any]:
    properties: Dict[str, Any] = {
        "project_path": {
            "type": "string",
            "description": "Path where the project should be initialized"
        },
        "project_name": {
            "type": "string",
            "description": "Name for the Warden environment"
        },
    }
    for name, default in INIT_PROJECT_DEFAULTS.items():
        label = INIT_PARAMETER_LABELS[name]
        if isinstance(default, bool):
            properties[name] = {
                "type": "boolean",
                "description": f"{label} (default: {str(default).lower()})",
                "default": default
            }
        else:
            properties[name] = {
                "type": "string",
                "description": f"{label} (default: {default})",
                "default": default
            }
    return properties


def get_tools() -> List[Tool]:
    """Get tools list"""
    return [
        Tool(
            name=TOOL_LIST_ENVIRONMENTS,
            description="List all running Warden environments with their directories (returns structured JSON)",
            inputSchema={"type": "object", "properties": {}, "required": []}
        ),
        Tool(
            name=TOOL_START_PROJECT,
            description="Start a Warden project environment",
            inputSchema=_project_only_schema()
        ),
        Tool(
            name=TOOL_STOP_PROJECT,
            description="Stop a Warden project environment",
            inputSchema=_project_only_schema()
        ),
        Tool(
            name=TOOL_START_SVC,
            description="Start Warden system services",
            inputSchema=_project_only_schema()
        ),
        Tool(
            name=TOOL_STOP_SVC,
            description="Stop Warden system services",
            inputSchema=_project_only_schema()
        ),
        Tool(
            name=TOOL_DB_QUERY,
            description="Run a SQL query in the Warden database",
            inputSchema={
                "type": "object",
                "properties": {
                    "project_path": PROJECT_PATH,
                    "query": {
                        "type": "string",
                        "description": "SQL query to execute"
                    },
                    "database": {
                        "type": "string",
                        "description": f"Database name (optional, defaults to {DEFAULT_DATABASE})",
                        "default": DEFAULT_DATABASE
                    }
                },
                "required": ["project_path", "query"]
            }
        ),
        Tool(
            name=TOOL_PHP_SCRIPT,
            description="Run a PHP script inside the php-fpm container",
            inputSchema={
                "type": "object",
                "properties": {
                    "project_path": PROJECT_PATH,
                    "script_path": {
                        "type": "string",
                        "description": "Path to the PHP script relative to project root"
                    },
                    "args": _string_array("Additional arguments to pass to the script")
                },
                "required": ["project_path", "script_path"]
            }
        ),
        Tool(
            name=TOOL_MAGENTO_CLI,
            description="Run bin/magento command inside the php-fpm container",
            inputSchema={
                "type": "object",
                "properties": {
                    "project_path": PROJECT_PATH,
                    "command": {
                        "type": "string",
                        "description": "Magento CLI command (without 'bin/magento' prefix)"
                    },
                    "args": _string_array("Additional arguments for the command")
                },
                "required": ["project_path", "command"]
            }
        ),
        Tool(
            name=TOOL_RUN_UNIT_TESTS,
            description="Run unit tests using PHPUnit in the php-fpm container",
            inputSchema={
                "type": "object",
                "properties": {
                    "project_path": PROJECT_PATH,
                    "config_file": {
                        "type": "string",
                        "description": "PHPUnit configuration file (auto-detects phpunit.xml.dist or phpunit.xml)",
                        "default": ""
                    },
                    "test_path": {
                        "type": "string",
                        "description": "Optional path to specific test file or directory",
                        "default": ""
                    },
                    "extra_args": _string_array("Additional PHPUnit arguments")
                },
                "required": ["project_path"]
            }
        ),
        Tool(
            name=TOOL_COMPOSER,
            description="Run Composer commands inside the php-fpm container",
            inputSchema={
                "type": "object",
                "properties": {
                    "project_path": PROJECT_PATH,
                    "command": {
                        "type": "string",
                        "description": "Composer command to execute (e.g., 'install', 'update', "
                                       "'require symfony/console', 'require-commerce')"
                    }
                },
                "required": ["project_path", "command"]
            }
        ),
        Tool(
            name=TOOL_INIT_PROJECT,
            description="Initialize a new Warden project with Magento 2 environment",
            inputSchema={
                "type": "object",
                "properties": _init_project_properties(),
                "required": ["project_path", "project_name"]
            }
        ),
    ]
