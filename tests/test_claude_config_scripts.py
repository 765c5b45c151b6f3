#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Test Claude client registration scripts
"""

import json
import sys
from pathlib import Path

# Add scripts to path
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

import cleanup_claude_config
import setup_claude_config


class TestClaudeConfigScripts:
    """Test setup and cleanup against a temporary home directory"""

    def test_setup_then_cleanup(self, tmp_path):
        settings_path = tmp_path / ".claude" / "settings.json"
        settings_path.parent.mkdir()
        settings_path.write_text(json.dumps({"permissions": {"allow": ["Bash(ls)"]}}))

        assert setup_claude_config.main(home=tmp_path) == 0

        config = json.loads((tmp_path / ".claude.json").read_text())
        assert config["mcpServers"]["warden"]["args"] == ["-m", "warden_mcp.mcp.server"]
        settings = json.loads(settings_path.read_text())
        assert "mcp__warden__warden_db_query" in settings["permissions"]["allow"]
        assert "Bash(ls)" in settings["permissions"]["allow"]

        # Running twice does not duplicate permissions
        setup_claude_config.main(home=tmp_path)
        allow = json.loads(settings_path.read_text())["permissions"]["allow"]
        assert len(allow) == len(set(allow))

        assert cleanup_claude_config.main(home=tmp_path) == 0

        config = json.loads((tmp_path / ".claude.json").read_text())
        assert "warden" not in config["mcpServers"]
        settings = json.loads(settings_path.read_text())
        assert settings["permissions"]["allow"] == ["Bash(ls)"]
        assert "warden" not in settings["mcpServers"]
