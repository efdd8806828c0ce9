"""Utility modules for fsview.

This module exports commonly used utility functions.
"""

from fsview.utils.formatting import (
    SizeUnits,
    console,
    err_console,
    format_size,
    human_readable_size,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from fsview.utils.naming import create_non_existing_name
from fsview.utils.paths import (
    add_trailing_slash,
    base_name_of,
    extension_of,
    is_relative_path,
    remove_trailing_slash,
    to_relative_path,
)
from fsview.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "SizeUnits",
    "add_trailing_slash",
    "base_name_of",
    "command_exists",
    "console",
    "create_non_existing_name",
    "err_console",
    "extension_of",
    "format_size",
    "human_readable_size",
    "is_relative_path",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "remove_trailing_slash",
    "run_command",
    "to_relative_path",
]
