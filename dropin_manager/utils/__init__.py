"""Utility functions for dropin-manager"""

from .version_utils import (
    version_key,
    compare_versions,
    is_newer,
    is_valid_version,
)

__all__ = [
    "version_key",
    "compare_versions",
    "is_newer",
    "is_valid_version",
]
