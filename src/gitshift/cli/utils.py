# SPDX-License-Identifier: MIT
# Copyright (c) 2026 GitShift Contributors

"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import argparse
import functools
import logging
from collections.abc import Callable

from ..core.config import GitShiftConfig
from ..core.exceptions import GitShiftError
from ..identity.engine import IdentityEngine
from .output import output_error

logger = logging.getLogger(__name__)


def get_config(args: argparse.Namespace) -> GitShiftConfig:
    """Config attached by main(), or loaded from defaults when absent."""
    config = getattr(args, "config", None)
    if config is None:
        config = GitShiftConfig.load()
        args.config = config
    return config


def get_engine(args: argparse.Namespace) -> IdentityEngine:
    return IdentityEngine(get_config(args))


def wants_json(args: argparse.Namespace) -> bool:
    return get_config(args).output == "json"


def prompt(label: str) -> str:
    """Read one line from stdin; end of input yields an empty answer."""
    try:
        return input(label).strip()
    except EOFError:
        print()
        return ""


def handle_errors(fn: Callable[[argparse.Namespace], int]) -> Callable[[argparse.Namespace], int]:
    """Turn GitShiftError from a command into an error message and exit status 1."""

    @functools.wraps(fn)
    def wrapper(args: argparse.Namespace) -> int:
        try:
            return fn(args)
        except GitShiftError as e:
            logger.debug(f"{fn.__name__} failed", exc_info=True)
            output_error(e, get_config(args).output)
            return 1

    return wrapper
