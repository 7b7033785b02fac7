"""Utility modules for fsnode.

This module exports commonly used utility functions.
"""

from fsnode.utils.formatting import (
    console,
    format_size,
    print_error,
    print_info,
    print_success,
)

__all__ = [
    "console",
    "format_size",
    "print_error",
    "print_info",
    "print_success",
]
