"""CLI utilities"""

from .output import (
    format_operation_result,
    format_status_table,
    print_error,
    print_warning,
)

__all__ = [
    "format_operation_result",
    "format_status_table",
    "print_error",
    "print_warning",
]
