"""Application-level exception types for warden-mcp."""

from __future__ import annotations

from .types import CommandFailure


class WardenMCPError(Exception):
    """Base exception for warden-mcp."""


class InvalidInputError(WardenMCPError):
    """Raised when a required tool argument is missing or empty."""


class ProjectNotFoundError(WardenMCPError):
    """Raised when the resolved project directory does not exist."""


class ConfigurationNotFoundError(WardenMCPError):
    """Raised when no PHPUnit configuration file can be found."""


class UnsupportedVersionError(WardenMCPError):
    """Raised when the installed Composer is not major version 2."""


class EnvironmentInitError(WardenMCPError):
    """Raised when `warden env init` exits non-zero."""


class UnknownToolError(WardenMCPError):
    """Raised when dispatch receives a tool name outside the catalog."""


class ProcessSpawnError(WardenMCPError):
    """Raised when the external executable could not be launched."""

    def __init__(self, failure: CommandFailure) -> None:
        super().__init__(failure.message)
        self.failure = failure


class CommandTimeoutError(ProcessSpawnError):
    """Raised when a process outlives the configured timeout and is killed."""
