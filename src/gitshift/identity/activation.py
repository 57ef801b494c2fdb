# SPDX-License-Identifier: MIT
# Copyright (c) 2026 GitShift Contributors

"""Single-slot record of which account is active.

The state file holds a JSON string (the account name) or ``null``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.exceptions import CorruptStoreError, NotFoundError
from ..core.jsonfile import atomic_write_json, read_json
from .store import AccountStore

logger = logging.getLogger(__name__)


class ActivationTracker:
    """Reads and writes the active account name."""

    def __init__(self, state_file: Path, store: AccountStore):
        self.state_file = state_file
        self.store = store

    def get(self) -> str | None:
        """Return the active account name, or None."""
        data = read_json(self.state_file, missing=None)
        if data is not None and not isinstance(data, str):
            raise CorruptStoreError(self.state_file, "expected an account name or null")
        return data

    def set(self, name: str) -> None:
        """Make ``name`` the active account.

        Raises:
            NotFoundError: If ``name`` is not in the account store. The
                state file is left as it was.
        """
        if self.store.find(name) is None:
            raise NotFoundError.for_account(name)
        atomic_write_json(name, self.state_file)
        logger.info(f"Activated account '{name}'")

    def clear(self) -> None:
        atomic_write_json(None, self.state_file)
        logger.info("Cleared active account")
