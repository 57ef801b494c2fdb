# SPDX-License-Identifier: MIT
# Copyright (c) 2026 GitShift Contributors

"""Identity engine: account operations on top of the two stores.

Typical workflow::

    engine = IdentityEngine(GitShiftConfig.load())

    engine.add_account("work", "me@work.example")
    engine.activate("work")

    invocation = engine.derive_git_invocation("git@github.com:org/repo.git")
    subprocess.run(invocation.argv, env={**os.environ, **invocation.env()})

The engine never spawns git itself; it only returns what to run.
"""

from __future__ import annotations

import logging
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.config import GitShiftConfig
from ..core.exceptions import (
    DanglingActiveAccountError,
    NoActiveAccountError,
    NotFoundError,
    StorageIOError,
)
from .activation import ActivationTracker
from .keyfiles import ensure_key_dir
from .keys import KeyAlgorithm
from .store import Account, AccountStore

logger = logging.getLogger(__name__)

GIT_SSH_COMMAND_ENV = "GIT_SSH_COMMAND"


@dataclass
class AccountInfo:
    """An account plus whether it is the active one."""

    name: str
    email: str
    ssh_key_path: Path
    public_key: str
    is_active: bool

    @classmethod
    def from_account(cls, account: Account, is_active: bool) -> AccountInfo:
        return cls(
            name=account.name,
            email=account.email,
            ssh_key_path=account.ssh_key_path,
            public_key=account.public_key,
            is_active=is_active,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "email": self.email,
            "ssh_key_path": str(self.ssh_key_path),
            "public_key": self.public_key,
            "is_active": self.is_active,
        }


@dataclass
class RemovalResult:
    """Outcome of removing an account."""

    account: Account
    cleared_active: bool = False


@dataclass
class GitInvocation:
    """Parameters for running ``git clone`` as the active account."""

    repo_url: str
    ssh_command: str
    account: str

    @property
    def argv(self) -> list[str]:
        return ["git", "clone", self.repo_url]

    def env(self) -> dict[str, str]:
        """Environment overrides to merge into git's environment."""
        return {GIT_SSH_COMMAND_ENV: self.ssh_command}


class IdentityEngine:
    """Orchestrates account storage, key generation and activation."""

    def __init__(self, config: GitShiftConfig) -> None:
        self.config = config
        try:
            config.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageIOError("create config directory", config.config_dir, e) from e
        ensure_key_dir(config.ssh_key_dir)

        self.store = AccountStore(config.accounts_file)
        self.tracker = ActivationTracker(config.state_file, self.store)

    # -- Queries -------------------------------------------------------------

    def list_accounts(self) -> list[str]:
        """Account names in insertion order."""
        return [a.name for a in self.store.list()]

    def accounts(self) -> list[Account]:
        return self.store.list()

    def get_info(self, name: str) -> AccountInfo:
        """Look up one account.

        Raises:
            NotFoundError: If no account has this name.
        """
        account = self.store.find(name)
        if account is None:
            raise NotFoundError.for_account(name)
        return AccountInfo.from_account(account, is_active=self.active_name() == name)

    def active_name(self) -> str | None:
        """Name of the active account, or None. Not checked against the store."""
        return self.tracker.get()

    def active_account(self) -> Account | None:
        """Resolve the active account.

        Returns None when nothing is active.

        Raises:
            DanglingActiveAccountError: If the active name is not in the store.
        """
        active = self.active_name()
        if active is None:
            return None
        account = self.store.find(active)
        if account is None:
            raise DanglingActiveAccountError(active)
        return account

    # -- Mutations -----------------------------------------------------------

    def add_account(
        self,
        name: str,
        email: str,
        algorithm: KeyAlgorithm | str = KeyAlgorithm.ED25519,
    ) -> Account:
        """Create an account with a new keypair under the configured key directory."""
        return self.store.add(name, email, algorithm, self.config.ssh_key_dir)

    def remove_account(self, selector: int | str) -> RemovalResult:
        """Remove an account, clearing activation if it was the active one."""
        active = self.active_name()
        account = self.store.remove(selector, self.config.ssh_key_dir)

        cleared = active == account.name
        if cleared:
            self.tracker.clear()
        return RemovalResult(account=account, cleared_active=cleared)

    def activate(self, name: str) -> Account:
        """Make ``name`` the active account.

        Raises:
            NotFoundError: If no account has this name. Activation is unchanged.
        """
        account = self.store.find(name)
        if account is None:
            raise NotFoundError.for_account(name)
        self.tracker.set(name)
        return account

    def deactivate(self) -> str | None:
        """Clear activation. Returns the previously active name, if any."""
        previous = self.active_name()
        if previous is not None:
            self.tracker.clear()
        return previous

    # -- git -----------------------------------------------------------------

    def derive_git_invocation(self, repo_url: str) -> GitInvocation:
        """Build the git invocation that authenticates as the active account.

        Raises:
            NoActiveAccountError: If nothing is active.
            DanglingActiveAccountError: If the active name is not in the store.
        """
        account = self.active_account()
        if account is None:
            raise NoActiveAccountError()

        ssh_command = f"{self.config.ssh_program} -i {shlex.quote(str(account.ssh_key_path))}"
        logger.debug(f"Using {GIT_SSH_COMMAND_ENV}={ssh_command} for {repo_url}")
        return GitInvocation(repo_url=repo_url, ssh_command=ssh_command, account=account.name)
