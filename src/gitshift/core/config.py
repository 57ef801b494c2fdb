# SPDX-License-Identifier: MIT
# Copyright (c) 2026 GitShift Contributors

"""gitshift configuration: resolved paths and user settings.

One :class:`GitShiftConfig` is built per invocation and handed to the
identity engine; nothing reads the configuration location from globals.

Settings precedence: CLI flags > env vars > settings.toml > defaults.
"""

from __future__ import annotations

import os
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path

from .exceptions import ConfigError

APP_NAME = "gitshift"

ACCOUNTS_FILENAME = "config.json"
STATE_FILENAME = "state.json"
SETTINGS_FILENAME = "settings.toml"
SSH_KEY_DIRNAME = "ssh_keys"

_OUTPUT_FORMATS = ("text", "json")
_DEFAULT_OUTPUT = "text"
_DEFAULT_ALGORITHM = "ed25519"
_DEFAULT_SSH_PROGRAM = "ssh"
_DEFAULT_LOG_LEVEL = "WARNING"


def default_config_dir() -> Path:
    """Return the platform's per-user configuration directory for gitshift."""
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
        return base / APP_NAME / "config"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME
    xdg = os.environ.get("XDG_CONFIG_HOME")
    # XDG spec: relative values are invalid and must be ignored
    if xdg and Path(xdg).is_absolute():
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


@dataclass
class GitShiftConfig:
    """Configuration for one gitshift invocation."""

    config_dir: Path
    output: str = _DEFAULT_OUTPUT
    default_algorithm: str = _DEFAULT_ALGORITHM
    ssh_program: str = _DEFAULT_SSH_PROGRAM
    log_level: str = _DEFAULT_LOG_LEVEL
    log_file: str | None = None

    def __post_init__(self) -> None:
        # Stored key paths derive from this and must not depend on the cwd
        self.config_dir = Path(self.config_dir).expanduser().absolute()

    @property
    def accounts_file(self) -> Path:
        return self.config_dir / ACCOUNTS_FILENAME

    @property
    def state_file(self) -> Path:
        return self.config_dir / STATE_FILENAME

    @property
    def ssh_key_dir(self) -> Path:
        return self.config_dir / SSH_KEY_DIRNAME

    @property
    def settings_file(self) -> Path:
        return self.config_dir / SETTINGS_FILENAME

    @classmethod
    def load(
        cls,
        config_dir: Path | None = None,
        output: str | None = None,
        log_level: str | None = None,
    ) -> GitShiftConfig:
        """Load config with precedence: flags > env > file > defaults."""
        # The directory itself is resolved first since the settings file lives in it
        if config_dir is None:
            env_dir = os.environ.get("GITSHIFT_CONFIG_DIR")
            config_dir = Path(env_dir) if env_dir else default_config_dir()
        config = cls(config_dir=Path(config_dir))

        # 1. Load from file
        if config.settings_file.exists():
            config._load_from_file(config.settings_file)

        # 2. Override from env
        if out := os.environ.get("GITSHIFT_OUTPUT"):
            if out in _OUTPUT_FORMATS:
                config.output = out
        if lvl := os.environ.get("GITSHIFT_LOG_LEVEL"):
            config.log_level = lvl.upper()
        if prog := os.environ.get("GITSHIFT_SSH_PROGRAM"):
            config.ssh_program = prog
        if log_file := os.environ.get("GITSHIFT_LOG_FILE"):
            config.log_file = str(Path(log_file).expanduser())

        # 3. Override from flags (highest precedence)
        if output is not None:
            config.output = output
        if log_level is not None:
            config.log_level = log_level.upper()

        return config

    def _load_from_file(self, path: Path) -> None:
        """Parse the TOML settings file."""
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid settings file {path}: {e}", path) from e
        except OSError as e:
            raise ConfigError(f"Cannot read settings file {path}: {e}", path) from e

        if "output" in data and data["output"] in _OUTPUT_FORMATS:
            self.output = str(data["output"])
        if "default_algorithm" in data:
            self.default_algorithm = str(data["default_algorithm"])
        if "ssh_program" in data:
            self.ssh_program = str(data["ssh_program"])
        if "log_level" in data:
            self.log_level = str(data["log_level"]).upper()
        if "log_file" in data:
            self.log_file = str(Path(str(data["log_file"])).expanduser())
