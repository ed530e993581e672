"""Utility functions"""

from .console import (
    THEME,
    console,
    print_dim,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "THEME",
    "console",
    "print_dim",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
