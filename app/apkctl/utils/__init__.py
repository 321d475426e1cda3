"""Utility modules for apkctl.

This module exports commonly used utility functions.
"""

from apkctl.utils.formatting import (
    console,
    create_app_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from apkctl.utils.ids import short_id
from apkctl.utils.shell import (
    BinaryResult,
    CommandResult,
    command_exists,
    run_binary,
    run_command,
)

__all__ = [
    "BinaryResult",
    "CommandResult",
    "command_exists",
    "console",
    "create_app_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_binary",
    "run_command",
    "short_id",
]
