#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared test fixtures
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from warden_mcp.core.types import CommandResult
from warden_mcp.utils.config import Config


class RecordingRunner:
    """Process runner stand-in that records calls and replays canned results"""

    def __init__(self, results=None, error=None):
        self.calls = []
        self.results = list(results or [])
        self.error = error

    async def execute(self, command, args, cwd):
        self.calls.append((command, list(args), Path(cwd)))
        if self.error is not None:
            raise self.error
        if self.results:
            return self.results.pop(0)
        return CommandResult(stdout="", stderr="", exit_code=0)


@pytest.fixture
def config(tmp_path, monkeypatch):
    """Config backed by a throwaway file"""
    monkeypatch.delenv("WARDEN_MCP_DB_PASSWORD", raising=False)
    return Config(str(tmp_path / "settings" / "config.yaml"))


@pytest.fixture
def make_runner():
    return RecordingRunner


@pytest.fixture
def project_dir(tmp_path):
    path = tmp_path / "shop"
    path.mkdir()
    return path
