# SPDX-License-Identifier: MIT
# Copyright (c) 2026 GitShift Contributors

"""gitshift - switch between git identities.

Each account pairs a name and email with its own SSH keypair. One account
at a time is "active"; ``gitshift clone`` runs git with that account's key
through ``GIT_SSH_COMMAND``, so no ~/.ssh/config juggling is needed.

Layout:
  core      configuration, exceptions, logging, JSON file helpers
  identity  key generation, key files, account store, activation, engine
  cli       argparse front end (``gitshift`` console script)
"""

__version__ = "0.1.0"
