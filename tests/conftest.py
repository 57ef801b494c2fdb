"""Global test fixtures for the gitshift test suite."""

from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from gitshift.core.config import GitShiftConfig
from gitshift.identity.engine import IdentityEngine


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path: Path):
    """Keep tests away from the real user's configuration."""
    for var in (
        "GITSHIFT_CONFIG_DIR",
        "GITSHIFT_OUTPUT",
        "GITSHIFT_LOG_LEVEL",
        "GITSHIFT_SSH_PROGRAM",
        "GITSHIFT_LOG_FILE",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    return tmp_path / "gitshift"


@pytest.fixture
def config(config_dir: Path) -> GitShiftConfig:
    return GitShiftConfig(config_dir=config_dir)


@pytest.fixture
def engine(config: GitShiftConfig) -> IdentityEngine:
    return IdentityEngine(config)


@pytest.fixture
def make_args(config: GitShiftConfig):
    """Build an argparse namespace carrying the test config."""

    def _make(**kwargs) -> argparse.Namespace:
        kwargs.setdefault("config", config)
        return argparse.Namespace(**kwargs)

    return _make
