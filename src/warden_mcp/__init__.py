#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
warden-mcp - Warden development environment MCP server
Lets an AI assistant drive Warden managed Magento environments through MCP tools

Version: 1.0.0
Author: warden-mcp Development Team
"""

__version__ = "1.0.0"
__author__ = "warden-mcp Development Team"
__description__ = "MCP server exposing Warden environment management as tools"

from .core.process_runner import ProcessRunner
from .core.types import CommandResult, EnvironmentRecord
from .parsers.environment_parser import parse_environment_list

__all__ = [
    "ProcessRunner",
    "CommandResult",
    "EnvironmentRecord",
    "parse_environment_list",
]
