#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 GitShift Contributors
"""
gitshift CLI - Switch between git identities, one SSH key per account.

Commands:
  gitshift ls                  List all available accounts
  gitshift add [name]          Add a new account with a fresh SSH keypair
  gitshift remove [selector]   Remove an account by name or number
  gitshift activate <name>     Activate a specific account
  gitshift deactivate          Clear the active account
  gitshift current             Show the active account
  gitshift info <name>         Get information about a specific account
  gitshift clone <repo_url>    Clone a repository using the active account
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..core.config import GitShiftConfig
from ..core.exceptions import ConfigError
from ..core.logging import configure_logging
from .commands import COMMAND_MODULES
from .output import output_error

logger = logging.getLogger(__name__)


def app() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gitshift",
        description="Switch between git identities, one SSH key per account",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gitshift add work --email me@work.example   Create an account and keypair
  gitshift activate work                      Use it for future clones
  gitshift clone git@github.com:org/repo.git  Clone as the active account
  gitshift remove 2                           Remove the second account

Environment Variables:
  GITSHIFT_CONFIG_DIR     Configuration directory
  GITSHIFT_OUTPUT         Output format (text or json)
  GITSHIFT_LOG_LEVEL      Log level (default: WARNING)
  GITSHIFT_SSH_PROGRAM    ssh executable used in GIT_SSH_COMMAND
  GITSHIFT_LOG_FILE       Also write JSON logs to this file
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Configuration directory (default: per-user config location)",
    )
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose (debug) logging")

    subparsers = parser.add_subparsers(dest="command", required=True)
    for module in COMMAND_MODULES:
        module.register(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = app()
    args = parser.parse_args(argv)

    try:
        config = GitShiftConfig.load(
            config_dir=args.config_dir,
            output="json" if args.json else None,
            log_level="DEBUG" if args.verbose else None,
        )
    except ConfigError as e:
        output_error(e, "json" if args.json else "text")
        return 1

    try:
        configure_logging(
            config.log_level,
            json_format=config.output == "json",
            log_file=config.log_file,
        )
    except OSError as e:
        output_error(ConfigError(f"Cannot open log file {config.log_file}: {e}"), config.output)
        return 1

    logger.debug(f"Using config directory {config.config_dir}")
    args.config = config

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
