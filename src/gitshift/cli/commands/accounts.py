# SPDX-License-Identifier: MIT
# Copyright (c) 2026 GitShift Contributors

"""Account commands: ls, add, remove, info.

Commands:
  gitshift ls
  gitshift add [name] [--email EMAIL] [--algorithm ALG]
  gitshift remove [name-or-number]
  gitshift info <name>

``add`` and ``remove`` prompt for whatever was not given on the command line.
"""

from __future__ import annotations

import argparse

from ...identity.keys import KeyAlgorithm
from ..output import output_json
from ..utils import get_config, get_engine, handle_errors, prompt, wants_json


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register account commands on the CLI parser."""
    ls_parser = subparsers.add_parser("ls", help="List all available accounts")
    ls_parser.set_defaults(func=cmd_ls)

    add_parser = subparsers.add_parser("add", help="Add a new account with a fresh SSH keypair")
    add_parser.add_argument("name", nargs="?", help="Account name (prompted if omitted)")
    add_parser.add_argument("--email", "-e", help="Email for this account (prompted if omitted)")
    add_parser.add_argument(
        "--algorithm",
        "-a",
        choices=[a.value for a in KeyAlgorithm],
        default=None,
        help="Key algorithm (default: ed25519, or default_algorithm from settings.toml)",
    )
    add_parser.set_defaults(func=cmd_add)

    remove_parser = subparsers.add_parser("remove", aliases=["rm"], help="Remove an account and its keys")
    remove_parser.add_argument(
        "selector",
        nargs="?",
        help="Account name or number from 'gitshift ls' (prompted if omitted)",
    )
    remove_parser.set_defaults(func=cmd_remove)

    info_parser = subparsers.add_parser("info", help="Get information about a specific account")
    info_parser.add_argument("account_name", help="Account name")
    info_parser.set_defaults(func=cmd_info)


@handle_errors
def cmd_ls(args: argparse.Namespace) -> int:
    """List all accounts, marking the active one."""
    engine = get_engine(args)
    accounts = engine.accounts()
    active = engine.active_name()

    if wants_json(args):
        output_json(
            {
                "accounts": [
                    {"number": i, "name": a.name, "email": a.email, "active": a.name == active}
                    for i, a in enumerate(accounts, 1)
                ],
                "active": active,
            }
        )
        return 0

    if not accounts:
        print("No accounts configured.")
        return 0

    print("Available accounts:")
    for i, account in enumerate(accounts, 1):
        marker = " (active)" if account.name == active else ""
        print(f"{i}: {account.name}{marker}")
    return 0


@handle_errors
def cmd_add(args: argparse.Namespace) -> int:
    """Add an account, prompting for name and email when missing."""
    config = get_config(args)
    engine = get_engine(args)

    algorithm = KeyAlgorithm.parse(args.algorithm or config.default_algorithm)
    name = args.name if args.name is not None else prompt("Enter a name for this account: ")
    email = args.email if args.email is not None else prompt("Enter email for this account: ")

    account = engine.add_account(name, email, algorithm)

    if wants_json(args):
        data = account.to_dict()
        data["algorithm"] = algorithm.value
        output_json(data)
        return 0

    print()
    print("🔐 Keys stored in:")
    print(f"  {config.ssh_key_dir}")
    print()
    print("🔑 Public key (can be shared safely):")
    print(account.public_key)
    print()
    print(f"✓ Added new account '{account.name}' with {algorithm.display_name()} keys")
    return 0


@handle_errors
def cmd_remove(args: argparse.Namespace) -> int:
    """Remove an account by name or number."""
    engine = get_engine(args)

    selector = args.selector
    if selector is None:
        accounts = engine.accounts()
        if not accounts:
            print("No accounts to remove.")
            return 0
        print("Available accounts:")
        for i, account in enumerate(accounts, 1):
            print(f"{i}: {account.name}")
        selector = prompt("Enter the number to remove the account: ")

    result = engine.remove_account(selector)

    if wants_json(args):
        output_json({"removed": result.account.to_dict(), "cleared_active": result.cleared_active})
        return 0

    if result.cleared_active:
        print("Cleared active account state.")
    print(f"✓ Removed account '{result.account.name}' successfully")
    return 0


@handle_errors
def cmd_info(args: argparse.Namespace) -> int:
    """Show one account's details and public key."""
    engine = get_engine(args)
    info = engine.get_info(args.account_name)

    if wants_json(args):
        output_json(info.to_dict())
        return 0

    print("Account Information:")
    print(f"  Name:          {info.name}")
    print(f"  Email:         {info.email}")
    print(f"  SSH Key Path:  {info.ssh_key_path}")
    print(f"  Status:        {'Active' if info.is_active else 'Inactive'}")
    print()
    print("Public Key:")
    print(info.public_key)
    return 0
