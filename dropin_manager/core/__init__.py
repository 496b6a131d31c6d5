"""Core functionality for dropin-manager"""

from .path_resolver import PathResolver
from .settings_adapter import SettingsAdapter

__all__ = [
    "PathResolver",
    "SettingsAdapter",
]
