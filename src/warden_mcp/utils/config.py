#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration management module
Handles configuration file loading and management for warden-mcp
"""

import os
import logging
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass

from .constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    CONFIG_PATH_ENV_VAR,
    DB_PASSWORD_ENV_VAR,
    DEFAULT_DATABASE,
    DEFAULT_DB_PASSWORD,
    DEFAULT_DB_USER,
    WARDEN_EXECUTABLE,
)


@dataclass
class WardenConfig:
    """Warden CLI configuration"""
    executable: str = WARDEN_EXECUTABLE
    timeout_seconds: float = 0   # 0 disables the timeout


@dataclass
class DatabaseConfig:
    """Database credentials used by warden_db_query"""
    user: str = DEFAULT_DB_USER
    password: str = DEFAULT_DB_PASSWORD
    default_database: str = DEFAULT_DATABASE


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    file: Optional[str] = None


class Config:
    """Main configuration class"""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration

        Args:
            config_path: Configuration file path, if None use WARDEN_MCP_CONFIG or the default path
        """
        self.logger = logging.getLogger('warden_mcp.config')
        self.config_path = self._resolve_config_path(config_path)
        self.config_dir = self.config_path.parent

        # Load configuration
        self._load_config()

    def _resolve_config_path(self, config_path: Optional[str]) -> Path:
        """Resolve configuration file path"""
        config_path = config_path or os.environ.get(CONFIG_PATH_ENV_VAR)
        if config_path:
            return Path(config_path).expanduser()
        return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME

    def _default_config(self) -> Dict[str, Any]:
        """Built-in defaults"""
        return {
            'warden': {
                'executable': WARDEN_EXECUTABLE,
                'timeout_seconds': 0
            },
            'database': {
                'user': DEFAULT_DB_USER,
                'password': DEFAULT_DB_PASSWORD,
                'default_database': DEFAULT_DATABASE
            },
            'logging': {
                'level': 'INFO',
                'file': None
            }
        }

    def _load_config(self):
        """Load configuration file"""
        default_config = self._default_config()

        # If config file exists, load and merge
        if self.config_path.exists():
            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    user_config = yaml.safe_load(f) or {}
                if not isinstance(user_config, dict):
                    raise yaml.YAMLError("top level must be a mapping")
                # Deep merge configuration
                self._config_data = self._deep_merge(default_config, user_config)
            except (OSError, yaml.YAMLError) as e:
                self.logger.warning(f"Failed to load configuration file {self.config_path}: {e}")
                self._config_data = default_config
        else:
            # Use default configuration and create config file
            self._config_data = default_config
            self._create_default_config()

        # Create configuration objects
        self.warden = WardenConfig(**self._config_data['warden'])
        self.database = DatabaseConfig(**self._config_data['database'])
        self.logging = LoggingConfig(**self._config_data['logging'])

        # Secrets from the environment win over the file
        env_password = os.environ.get(DB_PASSWORD_ENV_VAR)
        if env_password:
            self.database.password = env_password

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries"""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def _create_default_config(self):
        """Create default configuration file"""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, 'w', encoding='utf-8') as f:
                yaml.dump(self._config_data, f, default_flow_style=False,
                          allow_unicode=True, indent=2)
            self.logger.info(f"Created default configuration file: {self.config_path}")
        except OSError as e:
            self.logger.warning(f"Failed to create configuration file: {e}")

    @property
    def timeout_seconds(self) -> Optional[float]:
        """Process timeout, None when disabled"""
        return self.warden.timeout_seconds or None

    def get_log_file(self) -> Optional[Path]:
        """Get log file path, None when file logging is off"""
        if not self.logging.file:
            return None
        log_file = Path(self.logging.file).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        return log_file
