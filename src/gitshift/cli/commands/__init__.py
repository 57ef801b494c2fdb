"""CLI command modules for gitshift.

Each module exposes a ``register(subparsers)`` function that wires up
its argparse sub-commands and sets ``parser.set_defaults(func=handler)``.
"""

from . import accounts, activation, clone
from .accounts import cmd_add, cmd_info, cmd_ls, cmd_remove
from .activation import cmd_activate, cmd_current, cmd_deactivate
from .clone import cmd_clone

# All command modules with register() functions, in registration order.
COMMAND_MODULES = [
    accounts,
    activation,
    clone,
]

__all__ = [
    "COMMAND_MODULES",
    "cmd_activate",
    "cmd_add",
    "cmd_clone",
    "cmd_current",
    "cmd_deactivate",
    "cmd_info",
    "cmd_ls",
    "cmd_remove",
]
