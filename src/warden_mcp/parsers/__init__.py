#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Output parsers module

Turns text printed by the warden CLI into structured records
"""

from .environment_parser import EnvironmentListParser, parse_environment_list

__all__ = [
    'EnvironmentListParser',
    'parse_environment_list',
]
