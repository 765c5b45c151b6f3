#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Test project initialization and .env rewriting
"""

import asyncio
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from warden_mcp.core.types import CommandResult
from warden_mcp.tools.init_project import (
    apply_env_updates,
    build_env_updates,
    collect_init_settings,
    init_project,
    update_env_file,
)


class TestEnvUpdates:
    """Test KEY=value replacement"""

    def test_existing_key_replaced_in_place(self):
        content = "WARDEN_ENV_NAME=shop\nPHP_VERSION=8.1\nNODE_VERSION=18\n"
        updated = apply_env_updates(content, {"PHP_VERSION": "8.3"})
        assert updated == "WARDEN_ENV_NAME=shop\nPHP_VERSION=8.3\nNODE_VERSION=18\n"
        assert updated.splitlines().count("PHP_VERSION=8.3") == 1

    def test_missing_key_appended_once(self):
        content = "PHP_VERSION=8.1\n"
        updated = apply_env_updates(content, {"REDIS_VERSION": "7.2"})
        assert updated == "PHP_VERSION=8.1\nREDIS_VERSION=7.2\n"

    def test_append_without_trailing_newline(self):
        updated = apply_env_updates("PHP_VERSION=8.1", {"REDIS_VERSION": "7.2"})
        assert updated.splitlines() == ["PHP_VERSION=8.1", "REDIS_VERSION=7.2"]

    def test_match_is_anchored_to_whole_key(self):
        content = "MYSQL_DISTRIBUTION_VERSION=10.4\n"
        updated = apply_env_updates(content, {"MYSQL_DISTRIBUTION": "mysql"})
        assert updated.splitlines() == ["MYSQL_DISTRIBUTION_VERSION=10.4", "MYSQL_DISTRIBUTION=mysql"]

    def test_commented_key_is_not_replaced(self):
        updated = apply_env_updates("#PHP_VERSION=7.4\n", {"PHP_VERSION": "8.3"})
        assert updated.splitlines() == ["#PHP_VERSION=7.4", "PHP_VERSION=8.3"]

    def test_toggles_render_as_digits(self):
        settings = collect_init_settings({"enable_varnish": False, "enable_xdebug": "false"})
        updates = build_env_updates(settings)
        assert updates["WARDEN_VARNISH"] == "0"
        assert updates["PHP_XDEBUG_3"] == "0"
        assert updates["WARDEN_REDIS"] == "1"
        assert updates["PHP_VERSION"] == "8.3"
        assert updates["MYSQL_DISTRIBUTION_VERSION"] == "10.6"
        assert len(updates) == 12

    def test_update_env_file_skips_missing_file(self, tmp_path):
        assert update_env_file(tmp_path / ".env", {"PHP_VERSION": "8.3"}) is False
        assert not (tmp_path / ".env").exists()


class TestInitProject:
    """Test warden_init_project"""

    def test_creates_directory_and_runs_init(self, config, make_runner, tmp_path):
        target = tmp_path / "new" / "shop"
        runner = make_runner([CommandResult("Initialized", "", 0)])
        envelope = asyncio.run(init_project(runner, config, {
            "project_path": str(target), "project_name": "shop"}))
        assert target.is_dir()
        assert runner.calls == [("warden", ["env", "init", "shop", "magento2"], target)]
        assert envelope.isError is False
        text = envelope.content[0].text
        assert text.startswith("Warden project initialized successfully!")
        assert "https://shop.test" in text
        assert "- MySQL: mariadb 10.6" in text

    def test_rewrites_generated_env(self, config, make_runner, project_dir):
        env_file = project_dir / ".env"
        env_file.write_text("WARDEN_ENV_NAME=shop\nPHP_VERSION=8.1\n")
        runner = make_runner()
        asyncio.run(init_project(runner, config, {
            "project_path": str(project_dir),
            "project_name": "shop",
            "php_version": "8.3",
            "redis_version": "7.2",
            "enable_rabbitmq": False,
        }))
        lines = env_file.read_text().splitlines()
        assert lines.count("PHP_VERSION=8.3") == 1
        assert "PHP_VERSION=8.1" not in lines
        assert lines.count("REDIS_VERSION=7.2") == 1
        assert "WARDEN_RABBITMQ=0" in lines
        assert lines[0] == "WARDEN_ENV_NAME=shop"

    def test_non_utf8_env_is_rewritten(self, config, make_runner, project_dir):
        env_file = project_dir / ".env"
        env_file.write_bytes(b"PHP_VERSION=8.1\nNAME=caf\xe9\n")
        runner = make_runner([CommandResult("Initialized", "", 0)])
        envelope = asyncio.run(init_project(runner, config, {
            "project_path": str(project_dir), "project_name": "shop", "php_version": "8.3"}))
        assert envelope.isError is False
        content = env_file.read_bytes()
        assert b"PHP_VERSION=8.3\n" in content
        assert b"NAME=caf\xe9\n" in content

    def test_init_failure_is_error(self, config, make_runner, project_dir):
        env_file = project_dir / ".env"
        env_file.write_text("PHP_VERSION=8.1\n")
        runner = make_runner([CommandResult("", "environment already exists", 1)])
        envelope = asyncio.run(init_project(runner, config, {
            "project_path": str(project_dir), "project_name": "shop"}))
        assert envelope.isError is True
        text = envelope.content[0].text
        assert text.startswith("Failed to initialize Warden project:")
        assert "Warden init failed: environment already exists" in text
        assert env_file.read_text() == "PHP_VERSION=8.1\n"

    def test_custom_environment_type(self, config, make_runner, project_dir):
        runner = make_runner()
        asyncio.run(init_project(runner, config, {
            "project_path": str(project_dir), "project_name": "blog", "environment_type": "laravel"}))
        assert runner.calls[0][1] == ["env", "init", "blog", "laravel"]
