# SPDX-License-Identifier: MIT
# Copyright (c) 2026 GitShift Contributors

"""Exception hierarchy for gitshift.

Every failure the identity engine can report is a subclass of
:class:`GitShiftError`, so the CLI can catch one type and still print a
specific, human-readable message.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class GitShiftError(Exception):
    """Base exception for all gitshift errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigError(GitShiftError):
    """Exception for configuration errors.

    Raised when:
    - The settings file cannot be read
    - The settings file is not valid TOML
    """

    def __init__(self, message: str, path: Path | None = None):
        details = {}
        if path is not None:
            details["path"] = str(path)
        super().__init__(message, details)
        self.path = path


class AccountValidationError(GitShiftError):
    """Raised when an account field fails validation."""

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        super().__init__(message, details)
        self.field = field
        self.value = value


class DuplicateAccountError(GitShiftError):
    """Raised when adding an account whose name is already taken."""

    def __init__(self, name: str):
        super().__init__(f"Account '{name}' already exists", {"name": name})
        self.name = name


class NotFoundError(GitShiftError):
    """Raised when an account reference does not resolve.

    Raised when:
    - activate/info/remove names an unknown account
    - a positional selector is out of range (see InvalidSelectorError)
    """

    def __init__(self, message: str, selector: str | int | None = None):
        details = {}
        if selector is not None:
            details["selector"] = selector
        super().__init__(message, details)
        self.selector = selector

    @classmethod
    def for_account(cls, name: str) -> NotFoundError:
        return cls(f"Account '{name}' not found", selector=name)


class InvalidSelectorError(NotFoundError):
    """Raised for a positional selector outside ``1..len(accounts)``."""

    def __init__(self, position: int, count: int):
        if count:
            message = f"Invalid account number {position}: expected 1-{count}"
        else:
            message = f"Invalid account number {position}: no accounts configured"
        super().__init__(message, selector=position)
        self.details["count"] = count
        self.position = position
        self.count = count


class NoActiveAccountError(GitShiftError):
    """Raised when an operation needs an active account and none is set."""

    def __init__(self, message: str = "No active account. Use 'gitshift activate <name>' first"):
        super().__init__(message)


class DanglingActiveAccountError(GitShiftError):
    """Raised when the activation state names an account missing from the store.

    Only arises when the state files were edited outside gitshift.
    """

    def __init__(self, name: str):
        super().__init__(
            f"Active account '{name}' not found in config; "
            "activate another account or run 'gitshift deactivate'",
            {"name": name},
        )
        self.name = name


class CorruptStoreError(GitShiftError):
    """Raised when a backing file exists but cannot be parsed."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Failed to parse {path}: {reason}", {"path": str(path), "reason": reason})
        self.path = path
        self.reason = reason


class KeyGenerationError(GitShiftError):
    """Raised when a keypair cannot be generated."""

    def __init__(self, message: str, algorithm: str | None = None):
        details = {}
        if algorithm:
            details["algorithm"] = algorithm
        super().__init__(message, details)
        self.algorithm = algorithm


class StorageIOError(GitShiftError):
    """Raised when reading, writing, deleting or chmod-ing a file fails."""

    def __init__(self, operation: str, path: Path, cause: OSError | None = None):
        message = f"Failed to {operation} {path}"
        if cause is not None:
            message += f": {cause.strerror or cause}"
        super().__init__(message, {"operation": operation, "path": str(path)})
        self.operation = operation
        self.path = path
        self.cause = cause
