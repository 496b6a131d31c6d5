# dropin_manager/api/__init__.py
"""API layer for dropin-manager"""

from .exceptions import (
    DropinManagerError,
    ConfigError,
    ValidationError,
    FilesystemInitError,
    TeardownError,
    DeploymentNotFoundError,
)
from .manager import DropinManager, on_activate, on_deactivate

__all__ = [
    # Main class
    "DropinManager",

    # Lifecycle hooks
    "on_activate",
    "on_deactivate",

    # Exceptions
    "DropinManagerError",
    "ConfigError",
    "ValidationError",
    "FilesystemInitError",
    "TeardownError",
    "DeploymentNotFoundError",
]
