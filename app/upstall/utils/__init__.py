"""Utility modules for upstall.

This module exports commonly used utility functions.
"""

from upstall.utils.formatting import (
    console,
    create_package_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from upstall.utils.logging import setup_logging
from upstall.utils.shell import command_exists, run_interactive

__all__ = [
    "command_exists",
    "console",
    "create_package_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_interactive",
    "setup_logging",
]
