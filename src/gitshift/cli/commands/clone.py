# SPDX-License-Identifier: MIT
# Copyright (c) 2026 GitShift Contributors

"""Clone command: run ``git clone`` with the active account's SSH key."""

from __future__ import annotations

import argparse
import logging
import os
import subprocess

from ..output import output_error
from ..utils import get_config, get_engine, handle_errors, wants_json

logger = logging.getLogger(__name__)


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the clone command on the CLI parser."""
    clone_parser = subparsers.add_parser("clone", help="Clone a repository using the active account")
    clone_parser.add_argument("repo_url", help="Repository URL (SSH form, e.g. git@github.com:org/repo.git)")
    clone_parser.add_argument(
        "git_args",
        nargs=argparse.REMAINDER,
        help="Extra arguments passed through to git clone (e.g. target directory)",
    )
    clone_parser.set_defaults(func=cmd_clone)


@handle_errors
def cmd_clone(args: argparse.Namespace) -> int:
    """Clone a repository; exit status is git's."""
    engine = get_engine(args)
    invocation = engine.derive_git_invocation(args.repo_url)

    argv = invocation.argv + list(args.git_args or [])
    env = {**os.environ, **invocation.env()}

    if not wants_json(args):
        print(f"Cloning {invocation.repo_url} as '{invocation.account}'")
    logger.debug(f"Running {argv}")
    try:
        completed = subprocess.run(argv, env=env, check=False)
    except FileNotFoundError:
        output_error("git executable not found on PATH", get_config(args).output)
        return 1

    if completed.returncode != 0:
        logger.warning(f"git clone exited with status {completed.returncode}")
    return completed.returncode
