#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Core data types
Results produced by the process runner and records recovered from warden output
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one finished external process"""
    stdout: str
    stderr: str
    exit_code: int

    @property
    def success(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True)
class CommandFailure:
    """Payload of a run that never produced an exit code"""
    message: str
    partial_stdout: str = ""
    partial_stderr: str = ""


@dataclass(frozen=True)
class EnvironmentRecord:
    """One running warden environment"""
    name: str
    path: str
    raw_line: str = ""

    def to_dict(self) -> Dict[str, str]:
        """Convert to the public {name, path} shape"""
        return {'name': self.name, 'path': self.path}
