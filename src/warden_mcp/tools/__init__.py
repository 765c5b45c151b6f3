#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tool formatters module

One formatter per tool family, plus the static catalog and the dispatcher
"""

from .catalog import get_tools
from .registry import FORMATTERS, build_handlers, dispatch

__all__ = [
    'get_tools',
    'FORMATTERS',
    'build_handlers',
    'dispatch',
]
