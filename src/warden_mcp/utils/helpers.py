#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Common utility functions
Provides logging setup, project path resolution and command formatting
"""

import logging
import os
import sys
from pathlib import Path
from typing import Dict, Iterable, Optional

from .constants import REDACTED


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None,
                  level: str = "INFO") -> logging.Logger:
    """
    Setup logging system

    Console output goes to stderr because stdout carries the MCP stdio stream.

    Args:
        verbose: Whether to enable verbose logging mode
        log_file: Optional file receiving DEBUG level output
        level: Level name used when not verbose

    Returns:
        Configured logger object
    """
    log_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO)

    # Create log format
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Configure package logger
    logger = logging.getLogger('warden_mcp')
    logger.setLevel(logging.DEBUG if log_file else log_level)

    # Avoid duplicate handlers
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


def normalize_project_path(project_path: str) -> Path:
    """
    Strip trailing separators and make the path absolute

    Args:
        project_path: Path as supplied by the caller

    Returns:
        Absolute path, not checked for existence
    """
    stripped = project_path.rstrip("/" + os.sep) or os.sep
    return Path(os.path.abspath(stripped))


def format_command(executable: str, args: Iterable[str],
                   masked: Optional[Dict[str, str]] = None) -> str:
    """
    Render an argument vector as a single display string

    Args:
        executable: Program name
        args: Argument vector
        masked: Exact argument values mapped to what should be shown instead

    Returns:
        Space joined command line
    """
    masked = masked or {}
    return " ".join([executable, *(masked.get(arg, arg) for arg in args)])


def or_placeholder(text: str, placeholder: str) -> str:
    """Return text, or placeholder when text is empty"""
    return text if text else placeholder
