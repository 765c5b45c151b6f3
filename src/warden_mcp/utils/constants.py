#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Constants definition module
Defines tool names, warden command vectors and defaults used across warden-mcp
"""

from typing import Dict, List, Tuple

# ==================== Server Identity ====================

SERVER_NAME = "warden-magento-server"
SERVER_VERSION = "1.0.0"

# ==================== Tool Names ====================

TOOL_LIST_ENVIRONMENTS = "warden_list_environments"
TOOL_START_PROJECT = "warden_start_project"
TOOL_STOP_PROJECT = "warden_stop_project"
TOOL_START_SVC = "warden_start_svc"
TOOL_STOP_SVC = "warden_stop_svc"
TOOL_DB_QUERY = "warden_db_query"
TOOL_PHP_SCRIPT = "warden_php_script"
TOOL_MAGENTO_CLI = "warden_magento_cli"
TOOL_RUN_UNIT_TESTS = "warden_run_unit_tests"
TOOL_COMPOSER = "warden_composer"
TOOL_INIT_PROJECT = "warden_init_project"

ALL_TOOL_NAMES: List[str] = [
    TOOL_LIST_ENVIRONMENTS,
    TOOL_START_PROJECT,
    TOOL_STOP_PROJECT,
    TOOL_START_SVC,
    TOOL_STOP_SVC,
    TOOL_DB_QUERY,
    TOOL_PHP_SCRIPT,
    TOOL_MAGENTO_CLI,
    TOOL_RUN_UNIT_TESTS,
    TOOL_COMPOSER,
    TOOL_INIT_PROJECT,
]

# ==================== Warden Command Surface ====================

WARDEN_EXECUTABLE = "warden"

STATUS_ARGS: List[str] = ["status"]
ENV_UP_ARGS: List[str] = ["env", "up"]
ENV_DOWN_ARGS: List[str] = ["env", "down"]
SVC_UP_ARGS: List[str] = ["svc", "up"]
SVC_DOWN_ARGS: List[str] = ["svc", "down"]

# Prefixes for commands run inside a project container
DB_EXEC_PREFIX: List[str] = ["env", "exec", "-T", "db"]
PHP_FPM_EXEC_PREFIX: List[str] = ["env", "exec", "-T", "php-fpm"]

MAGENTO_BIN = "bin/magento"
PHPUNIT_BIN = "vendor/phpunit/phpunit/phpunit"

# ==================== Database ====================

DEFAULT_DB_USER = "root"
DEFAULT_DB_PASSWORD = "magento"   # Stock warden magento2 root password
DEFAULT_DATABASE = "magento"
DB_PASSWORD_ENV_VAR = "WARDEN_MCP_DB_PASSWORD"
REDACTED = "****"

# ==================== PHPUnit ====================

# Probed in this order when no config file is given
PHPUNIT_CONFIG_CANDIDATES: Tuple[str, ...] = ("phpunit.xml.dist", "phpunit.xml")

# ==================== Composer ====================

COMPOSER_V2_BINARY = "composer2"
COMPOSER_BINARY = "composer"
COMPOSER_V2_MARKER = "composer version 2"

# ==================== Project Initialization ====================

ENV_FILE_NAME = ".env"
DEFAULT_ENVIRONMENT_TYPE = "magento2"

# Tool argument defaults for warden_init_project
INIT_PROJECT_DEFAULTS: Dict[str, object] = {
    'environment_type': DEFAULT_ENVIRONMENT_TYPE,
    'php_version': "8.3",
    'mysql_distribution': "mariadb",
    'mysql_version': "10.6",
    'node_version': "20",
    'composer_version': "2",
    'opensearch_version': "2.12",
    'redis_version': "7.2",
    'enable_redis': True,
    'enable_opensearch': True,
    'enable_varnish': True,
    'enable_rabbitmq': True,
    'enable_xdebug': True,
}

# .env key -> init argument, in the order they are written
ENV_VERSION_KEYS: Dict[str, str] = {
    'PHP_VERSION': 'php_version',
    'MYSQL_DISTRIBUTION': 'mysql_distribution',
    'MYSQL_DISTRIBUTION_VERSION': 'mysql_version',
    'NODE_VERSION': 'node_version',
    'COMPOSER_VERSION': 'composer_version',
    'OPENSEARCH_VERSION': 'opensearch_version',
    'REDIS_VERSION': 'redis_version',
}

ENV_TOGGLE_KEYS: Dict[str, str] = {
    'WARDEN_REDIS': 'enable_redis',
    'WARDEN_OPENSEARCH': 'enable_opensearch',
    'WARDEN_VARNISH': 'enable_varnish',
    'WARDEN_RABBITMQ': 'enable_rabbitmq',
    'PHP_XDEBUG_3': 'enable_xdebug',
}

# ==================== Rendering ====================

NO_OUTPUT = "(no output)"
NO_ERRORS = "(no errors)"
SPAWN_FAILURE_EXIT_CODE = -1

# ==================== Configuration ====================

CONFIG_PATH_ENV_VAR = "WARDEN_MCP_CONFIG"
CONFIG_DIR_NAME = ".warden-mcp"
CONFIG_FILE_NAME = "config.yaml"
