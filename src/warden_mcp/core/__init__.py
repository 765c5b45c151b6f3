# Core Command Execution Module

from .types import CommandResult, CommandFailure, EnvironmentRecord
from .process_runner import ProcessRunner
from .exceptions import (
    WardenMCPError,
    InvalidInputError,
    ProjectNotFoundError,
    ConfigurationNotFoundError,
    UnsupportedVersionError,
    ProcessSpawnError,
    CommandTimeoutError,
    EnvironmentInitError,
    UnknownToolError,
)

__all__ = [
    'CommandResult',
    'CommandFailure',
    'EnvironmentRecord',
    'ProcessRunner',
    'WardenMCPError',
    'InvalidInputError',
    'ProjectNotFoundError',
    'ConfigurationNotFoundError',
    'UnsupportedVersionError',
    'ProcessSpawnError',
    'CommandTimeoutError',
    'EnvironmentInitError',
    'UnknownToolError',
]
