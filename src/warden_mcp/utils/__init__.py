# Utility Module

from .config import Config
from .helpers import setup_logging, normalize_project_path, format_command

__all__ = [
    'Config',
    'setup_logging',
    'normalize_project_path',
    'format_command',
]
