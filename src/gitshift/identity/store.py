# SPDX-License-Identifier: MIT
# Copyright (c) 2026 GitShift Contributors

"""Account store backed by a JSON file.

The file holds an ordered list of account records and is rewritten in full
on every add/remove. Nothing is cached between calls: each operation
re-reads the file, so separate invocations always see the latest state.

There is no locking between processes. Two invocations adding or removing
accounts at the same moment race, and the later save wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.exceptions import (
    AccountValidationError,
    CorruptStoreError,
    DuplicateAccountError,
    GitShiftError,
    InvalidSelectorError,
    NotFoundError,
)
from ..core.jsonfile import atomic_write_json, read_json
from .keyfiles import discard_keypair, ensure_key_dir, remove_keypair, save_keypair
from .keys import KeyAlgorithm, generate_keypair

logger = logging.getLogger(__name__)

_RECORD_FIELDS = ("name", "ssh_key_path", "email", "public_key")


@dataclass
class Account:
    """A configured identity."""

    name: str
    ssh_key_path: Path
    email: str
    public_key: str

    @property
    def private_key_path(self) -> Path:
        return self.ssh_key_path

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            "name": self.name,
            "ssh_key_path": str(self.ssh_key_path),
            "email": self.email,
            "public_key": self.public_key,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Account:
        """Create from dictionary. All fields are required."""
        return cls(
            name=data["name"],
            ssh_key_path=Path(data["ssh_key_path"]),
            email=data["email"],
            public_key=data["public_key"],
        )


def validate_account_name(name: str) -> str:
    """Check that ``name`` can serve as an account key and a file name prefix.

    Raises:
        AccountValidationError: If the name is empty or could escape the key directory.
    """
    if not name or not name.strip():
        raise AccountValidationError("Account name must not be empty", field="name", value=name)
    if any(ch in name for ch in ("/", "\\", "\0")):
        raise AccountValidationError(
            f"Account name '{name}' must not contain path separators", field="name", value=name
        )
    if name in (".", ".."):
        raise AccountValidationError(f"Account name '{name}' is reserved", field="name", value=name)
    return name


class AccountStore:
    """File-based storage of accounts, in insertion order."""

    def __init__(self, accounts_file: Path):
        self.accounts_file = accounts_file

    def load(self) -> list[Account]:
        """Load all accounts. A missing file means no accounts.

        Raises:
            CorruptStoreError: If the file exists but does not hold a valid account list.
        """
        data = read_json(self.accounts_file, missing=[])
        if not isinstance(data, list):
            raise CorruptStoreError(self.accounts_file, "expected a list of accounts")

        accounts: list[Account] = []
        seen: set[str] = set()
        for i, record in enumerate(data, 1):
            if not isinstance(record, dict):
                raise CorruptStoreError(self.accounts_file, f"record {i} is not an object")
            for field_name in _RECORD_FIELDS:
                if not isinstance(record.get(field_name), str):
                    raise CorruptStoreError(
                        self.accounts_file, f"record {i} has missing or invalid '{field_name}'"
                    )
            account = Account.from_dict(record)
            if account.name in seen:
                raise CorruptStoreError(self.accounts_file, f"duplicate account name '{account.name}'")
            seen.add(account.name)
            accounts.append(account)

        logger.debug(f"Loaded {len(accounts)} accounts from {self.accounts_file}")
        return accounts

    def save(self, accounts: list[Account]) -> None:
        """Overwrite the store with ``accounts``."""
        atomic_write_json([a.to_dict() for a in accounts], self.accounts_file)
        logger.debug(f"Saved {len(accounts)} accounts to {self.accounts_file}")

    def list(self) -> list[Account]:
        return self.load()

    def find(self, name: str) -> Account | None:
        for account in self.load():
            if account.name == name:
                return account
        return None

    def add(
        self,
        name: str,
        email: str,
        algorithm: KeyAlgorithm | str,
        key_dir: Path,
    ) -> Account:
        """Create an account with a fresh keypair.

        Args:
            name: Unique account name.
            email: Email, embedded as the public key comment.
            algorithm: Key algorithm.
            key_dir: Directory for the key files.

        Returns:
            The stored Account.

        Raises:
            AccountValidationError: If the name is not usable.
            DuplicateAccountError: If the name is taken. Nothing is generated.
            KeyGenerationError: If key generation fails.
            StorageIOError: If key files or the store cannot be written.
        """
        validate_account_name(name)
        accounts = self.load()
        if any(a.name == name for a in accounts):
            raise DuplicateAccountError(name)

        keypair = generate_keypair(algorithm, email)
        ensure_key_dir(key_dir)
        private_path, _ = save_keypair(name, key_dir, keypair.private_key, keypair.public_key)

        account = Account(
            name=name,
            ssh_key_path=private_path,
            email=email,
            public_key=keypair.public_key,
        )
        accounts.append(account)
        try:
            self.save(accounts)
        except GitShiftError:
            # Key files without a store entry would be orphans
            discard_keypair(private_path)
            raise

        logger.info(f"Added account '{name}' ({keypair.algorithm.display_name()})")
        return account

    def remove(self, selector: int | str, key_dir: Path) -> Account:
        """Remove an account and its key files.

        The private key is deleted before the store is rewritten. If the
        deletion fails the store is left untouched.

        Args:
            selector: 1-based position, or an account name. A string that
                matches no name but is all digits is read as a position.
            key_dir: Directory the account's key files were created in.

        Returns:
            The removed Account.

        Raises:
            NotFoundError: If no account has the given name.
            InvalidSelectorError: If the position is out of range.
            StorageIOError: If the private key cannot be deleted, or is
                missing from a path outside ``key_dir``.
        """
        accounts = self.load()
        index = self._resolve_index(accounts, selector)
        account = accounts[index]

        remove_keypair(account.ssh_key_path, key_dir)

        del accounts[index]
        self.save(accounts)
        logger.info(f"Removed account '{account.name}'")
        return account

    @staticmethod
    def _resolve_index(accounts: list[Account], selector: int | str) -> int:
        """Turn a selector into a 0-based index into ``accounts``."""
        if isinstance(selector, str):
            for i, account in enumerate(accounts):
                if account.name == selector:
                    return i
            if not selector.isdecimal():
                raise NotFoundError.for_account(selector)
            selector = int(selector)

        if isinstance(selector, bool) or not isinstance(selector, int):
            raise NotFoundError(f"Invalid account selector: {selector!r}", selector=str(selector))
        if selector < 1 or selector > len(accounts):
            raise InvalidSelectorError(selector, len(accounts))
        return selector - 1
