#!/usr/bin/env python3
"""warden-mcp Claude Code MCP Uninstallation Script"""

import json
import sys
from pathlib import Path

SERVER_KEY = "warden"
PERMISSION_PREFIX = "mcp__warden__"


def main(home: Path = None):
    home = home or Path.home()

    # Remove warden from ~/.claude.json
    config_path = home / ".claude.json"
    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
            if SERVER_KEY in config.get("mcpServers", {}):
                del config["mcpServers"][SERVER_KEY]
                with open(config_path, "w", encoding="utf-8") as f:
                    json.dump(config, f, indent=2, ensure_ascii=False)
                print("  [OK] warden MCP configuration removed")
            else:
                print("  [INFO] No warden MCP configuration found")
        except (OSError, json.JSONDecodeError) as e:
            print(f"  [ERROR] Failed to remove MCP config: {e}")

    # Remove warden server entry and permissions from ~/.claude/settings.json
    settings_path = home / ".claude" / "settings.json"
    if settings_path.exists():
        try:
            with open(settings_path, "r", encoding="utf-8") as f:
                settings = json.load(f)

            settings.get("mcpServers", {}).pop(SERVER_KEY, None)

            if "permissions" in settings and "allow" in settings["permissions"]:
                original_count = len(settings["permissions"]["allow"])
                settings["permissions"]["allow"] = [
                    tool for tool in settings["permissions"]["allow"]
                    if not tool.startswith(PERMISSION_PREFIX)
                ]
                removed_perms = original_count - len(settings["permissions"]["allow"])
                if removed_perms > 0:
                    print(f"  [OK] Removed {removed_perms} warden permissions")

            with open(settings_path, "w", encoding="utf-8") as f:
                json.dump(settings, f, indent=2, ensure_ascii=False)

        except (OSError, json.JSONDecodeError) as e:
            print(f"  [ERROR] Failed to clean settings: {e}")

    print("  [OK] Claude Code cleanup completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
