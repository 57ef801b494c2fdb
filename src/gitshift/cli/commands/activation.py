# SPDX-License-Identifier: MIT
# Copyright (c) 2026 GitShift Contributors

"""Activation commands: activate, deactivate, current."""

from __future__ import annotations

import argparse

from ..output import output_json
from ..utils import get_engine, handle_errors, wants_json


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register activation commands on the CLI parser."""
    activate_parser = subparsers.add_parser("activate", help="Activate a specific account")
    activate_parser.add_argument("account_name", help="Account to use for git operations")
    activate_parser.set_defaults(func=cmd_activate)

    deactivate_parser = subparsers.add_parser("deactivate", help="Clear the active account")
    deactivate_parser.set_defaults(func=cmd_deactivate)

    current_parser = subparsers.add_parser("current", help="Show the active account")
    current_parser.set_defaults(func=cmd_current)


@handle_errors
def cmd_activate(args: argparse.Namespace) -> int:
    engine = get_engine(args)
    account = engine.activate(args.account_name)

    if wants_json(args):
        output_json({"active": account.name})
    else:
        print(f"Activated account: {account.name}")
    return 0


@handle_errors
def cmd_deactivate(args: argparse.Namespace) -> int:
    engine = get_engine(args)
    previous = engine.deactivate()

    if wants_json(args):
        output_json({"active": None, "previous": previous})
    elif previous is None:
        print("No account was active.")
    else:
        print(f"Deactivated account: {previous}")
    return 0


@handle_errors
def cmd_current(args: argparse.Namespace) -> int:
    """Print the active account, failing loudly if it no longer exists."""
    engine = get_engine(args)
    account = engine.active_account()

    if wants_json(args):
        output_json({"active": account.to_dict() if account else None})
    elif account is None:
        print("No active account.")
    else:
        print(f"{account.name} <{account.email}>")
    return 0
