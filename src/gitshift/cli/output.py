# SPDX-License-Identifier: MIT
# Copyright (c) 2026 GitShift Contributors

"""Output formatting for CLI commands.

Handles JSON vs plain text output based on the configured format.
"""

from __future__ import annotations

import json
import sys
from typing import Any

from ..core.exceptions import GitShiftError


def output_json(data: Any) -> None:
    """Pretty-print data as JSON on stdout."""
    print(json.dumps(data, indent=2, default=str))


def output_error(error: GitShiftError | str, output_format: str = "text") -> None:
    """Print an error to stderr, as JSON when the output format asks for it."""
    if output_format == "json":
        if isinstance(error, GitShiftError):
            payload = error.to_dict()
        else:
            payload = {"error": "Error", "message": error, "details": {}}
        print(json.dumps(payload, indent=2, default=str), file=sys.stderr)
        return

    message = error.message if isinstance(error, GitShiftError) else error
    print(f"Error: {message}", file=sys.stderr)
