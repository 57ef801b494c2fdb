# SPDX-License-Identifier: MIT
# Copyright (c) 2026 GitShift Contributors

"""Ambient pieces shared by the engine and the CLI: config, errors, logging."""

from .config import GitShiftConfig, default_config_dir
from .exceptions import (
    AccountValidationError,
    ConfigError,
    CorruptStoreError,
    DanglingActiveAccountError,
    DuplicateAccountError,
    GitShiftError,
    InvalidSelectorError,
    KeyGenerationError,
    NoActiveAccountError,
    NotFoundError,
    StorageIOError,
)

__all__ = [
    "AccountValidationError",
    "ConfigError",
    "CorruptStoreError",
    "DanglingActiveAccountError",
    "DuplicateAccountError",
    "GitShiftConfig",
    "GitShiftError",
    "InvalidSelectorError",
    "KeyGenerationError",
    "NoActiveAccountError",
    "NotFoundError",
    "StorageIOError",
    "default_config_dir",
]
