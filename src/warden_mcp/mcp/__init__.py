#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
warden-mcp MCP Server Module
Provides Model Context Protocol support, letting AI assistants drive Warden
"""

from .server import WardenMCPServer, run_server

__all__ = ['WardenMCPServer', 'run_server']
