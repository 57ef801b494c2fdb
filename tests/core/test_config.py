"""Tests for config loading with precedence: flags > env > file > defaults."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from gitshift.core.config import GitShiftConfig, default_config_dir
from gitshift.core.exceptions import ConfigError


class TestDefaultConfigDir:
    def test_linux_uses_xdg_config_home(self, monkeypatch, tmp_path):
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        assert default_config_dir() == tmp_path / "xdg" / "gitshift"

    def test_linux_falls_back_to_dot_config(self, monkeypatch, tmp_path):
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        with patch.object(Path, "home", return_value=tmp_path):
            assert default_config_dir() == tmp_path / ".config" / "gitshift"

    def test_relative_xdg_is_ignored(self, monkeypatch, tmp_path):
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", "relative/dir")
        with patch.object(Path, "home", return_value=tmp_path):
            assert default_config_dir() == tmp_path / ".config" / "gitshift"

    def test_macos(self, monkeypatch, tmp_path):
        monkeypatch.setattr(sys, "platform", "darwin")
        with patch.object(Path, "home", return_value=tmp_path):
            assert default_config_dir() == tmp_path / "Library" / "Application Support" / "gitshift"

    def test_windows_uses_appdata(self, monkeypatch, tmp_path):
        monkeypatch.setattr(sys, "platform", "win32")
        monkeypatch.setenv("APPDATA", str(tmp_path / "Roaming"))
        assert default_config_dir() == tmp_path / "Roaming" / "gitshift" / "config"


class TestGitShiftConfigDefaults:
    def test_defaults(self, tmp_path):
        config = GitShiftConfig(config_dir=tmp_path)
        assert config.output == "text"
        assert config.default_algorithm == "ed25519"
        assert config.ssh_program == "ssh"
        assert config.log_level == "WARNING"

    def test_derived_paths(self, tmp_path):
        config = GitShiftConfig(config_dir=tmp_path)
        assert config.accounts_file == tmp_path / "config.json"
        assert config.state_file == tmp_path / "state.json"
        assert config.ssh_key_dir == tmp_path / "ssh_keys"
        assert config.settings_file == tmp_path / "settings.toml"

    def test_load_without_settings_file(self, tmp_path):
        config = GitShiftConfig.load(config_dir=tmp_path)
        assert config.config_dir == tmp_path
        assert config.output == "text"

    def test_load_uses_platform_default(self, tmp_path):
        # conftest points XDG_CONFIG_HOME at tmp_path / "xdg"
        with patch("gitshift.core.config.default_config_dir", return_value=tmp_path / "d"):
            config = GitShiftConfig.load()
        assert config.config_dir == tmp_path / "d"


class TestGitShiftConfigFile:
    def test_load_from_toml(self, tmp_path):
        (tmp_path / "settings.toml").write_text(
            'output = "json"\ndefault_algorithm = "rsa"\nssh_program = "/usr/bin/ssh"\nlog_level = "info"\n'
        )
        config = GitShiftConfig.load(config_dir=tmp_path)
        assert config.output == "json"
        assert config.default_algorithm == "rsa"
        assert config.ssh_program == "/usr/bin/ssh"
        assert config.log_level == "INFO"

    def test_partial_toml(self, tmp_path):
        (tmp_path / "settings.toml").write_text('ssh_program = "ssh -o IdentitiesOnly=yes"\n')
        config = GitShiftConfig.load(config_dir=tmp_path)
        assert config.output == "text"
        assert config.ssh_program == "ssh -o IdentitiesOnly=yes"

    def test_invalid_output_in_toml_ignored(self, tmp_path):
        (tmp_path / "settings.toml").write_text('output = "csv"\n')
        config = GitShiftConfig.load(config_dir=tmp_path)
        assert config.output == "text"

    def test_invalid_toml_raises(self, tmp_path):
        (tmp_path / "settings.toml").write_text("output = \n")
        with pytest.raises(ConfigError) as exc_info:
            GitShiftConfig.load(config_dir=tmp_path)
        assert "settings.toml" in exc_info.value.message


class TestGitShiftConfigEnv:
    def test_env_config_dir(self, tmp_path):
        with patch.dict(os.environ, {"GITSHIFT_CONFIG_DIR": str(tmp_path / "env")}):
            config = GitShiftConfig.load()
        assert config.config_dir == tmp_path / "env"

    def test_env_overrides_file(self, tmp_path):
        (tmp_path / "settings.toml").write_text('output = "text"\nssh_program = "file-ssh"\n')
        env = {"GITSHIFT_OUTPUT": "json", "GITSHIFT_SSH_PROGRAM": "env-ssh", "GITSHIFT_LOG_LEVEL": "debug"}
        with patch.dict(os.environ, env):
            config = GitShiftConfig.load(config_dir=tmp_path)
        assert config.output == "json"
        assert config.ssh_program == "env-ssh"
        assert config.log_level == "DEBUG"

    def test_env_invalid_output_ignored(self, tmp_path):
        with patch.dict(os.environ, {"GITSHIFT_OUTPUT": "xml"}):
            config = GitShiftConfig.load(config_dir=tmp_path)
        assert config.output == "text"


class TestGitShiftConfigFlags:
    def test_flag_config_dir_beats_env(self, tmp_path):
        with patch.dict(os.environ, {"GITSHIFT_CONFIG_DIR": str(tmp_path / "env")}):
            config = GitShiftConfig.load(config_dir=tmp_path / "flag")
        assert config.config_dir == tmp_path / "flag"

    def test_flags_override_env(self, tmp_path):
        with patch.dict(os.environ, {"GITSHIFT_OUTPUT": "text", "GITSHIFT_LOG_LEVEL": "ERROR"}):
            config = GitShiftConfig.load(config_dir=tmp_path, output="json", log_level="debug")
        assert config.output == "json"
        assert config.log_level == "DEBUG"


class TestConfigDirIsAbsolute:
    def test_relative_flag_is_anchored_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = GitShiftConfig.load(config_dir=Path("cfg"))
        assert config.config_dir.is_absolute()
        assert config.config_dir == tmp_path / "cfg"
        assert config.ssh_key_dir == tmp_path / "cfg" / "ssh_keys"

    def test_relative_env_is_anchored_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("GITSHIFT_CONFIG_DIR", "envcfg")
        assert GitShiftConfig.load().config_dir == tmp_path / "envcfg"

    def test_direct_construction(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert GitShiftConfig(config_dir=Path("x")).config_dir == tmp_path / "x"

    def test_home_is_expanded(self, tmp_path):
        with patch.dict(os.environ, {"HOME": str(tmp_path)}):
            config = GitShiftConfig(config_dir=Path("~/gs"))
        assert config.config_dir == tmp_path / "gs"


class TestLogFileSetting:
    def test_default_is_none(self, tmp_path):
        assert GitShiftConfig.load(config_dir=tmp_path).log_file is None

    def test_from_toml(self, tmp_path):
        (tmp_path / "settings.toml").write_text(f'log_file = "{tmp_path / "gs.log"}"\n')
        assert GitShiftConfig.load(config_dir=tmp_path).log_file == str(tmp_path / "gs.log")

    def test_env_overrides_toml(self, tmp_path):
        (tmp_path / "settings.toml").write_text('log_file = "/nowhere/file.log"\n')
        with patch.dict(os.environ, {"GITSHIFT_LOG_FILE": str(tmp_path / "env.log")}):
            config = GitShiftConfig.load(config_dir=tmp_path)
        assert config.log_file == str(tmp_path / "env.log")
