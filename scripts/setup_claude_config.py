#!/usr/bin/env python3
"""warden-mcp Claude Code MCP Configuration Script"""

import json
import sys
from pathlib import Path

SERVER_KEY = "warden"

# Tool permissions granted to the assistant
WARDEN_TOOLS = [
    # Environment lifecycle
    "mcp__warden__warden_list_environments",
    "mcp__warden__warden_start_project",
    "mcp__warden__warden_stop_project",
    "mcp__warden__warden_start_svc",
    "mcp__warden__warden_stop_svc",

    # Container commands
    "mcp__warden__warden_db_query",
    "mcp__warden__warden_php_script",
    "mcp__warden__warden_magento_cli",
    "mcp__warden__warden_run_unit_tests",
    "mcp__warden__warden_composer",

    # Project setup
    "mcp__warden__warden_init_project",
]


def server_entry(python_path: str) -> dict:
    return {
        "command": python_path,
        "args": ["-m", "warden_mcp.mcp.server"],
        "env": {}
    }


def load_json(path: Path) -> dict:
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    return {}


def save_json(path: Path, data: dict):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def main(home: Path = None):
    home = home or Path.home()
    # Use sys.executable to get the actual Python path currently running
    python_path = sys.executable

    # Claude Code may read mcpServers from either location depending on version
    config_path = home / ".claude.json"
    config = load_json(config_path)
    config.setdefault("mcpServers", {})[SERVER_KEY] = server_entry(python_path)
    save_json(config_path, config)

    settings_path = home / ".claude" / "settings.json"
    settings = load_json(settings_path)
    settings.setdefault("mcpServers", {})[SERVER_KEY] = server_entry(python_path)

    allow = settings.setdefault("permissions", {}).setdefault("allow", [])
    existing = set(allow)
    for tool in WARDEN_TOOLS:
        if tool not in existing:
            allow.append(tool)

    save_json(settings_path, settings)

    print("  [OK] Claude Code MCP configured")
    print(f"  [OK] Added {len(WARDEN_TOOLS)} warden tool permissions")
    return 0


if __name__ == "__main__":
    sys.exit(main())
