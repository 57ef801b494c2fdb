# SPDX-License-Identifier: MIT
# Copyright (c) 2026 GitShift Contributors

"""Identity store and activation engine."""

from .activation import ActivationTracker
from .engine import AccountInfo, GitInvocation, IdentityEngine, RemovalResult
from .keys import KeyAlgorithm, KeyPair, generate_keypair
from .store import Account, AccountStore

__all__ = [
    "Account",
    "AccountInfo",
    "AccountStore",
    "ActivationTracker",
    "GitInvocation",
    "IdentityEngine",
    "KeyAlgorithm",
    "KeyPair",
    "RemovalResult",
    "generate_keypair",
]
