"""Drop-in Manager - keeps a versioned file deployed in a privileged directory.

Copies a source file into a drop-in directory only when it is missing or
outdated, and remembers the installed version in a settings store.
"""

from .__version__ import __version__, __author__, __email__, __license__

# Core API
from .api import DropinManager, on_activate, on_deactivate

# Data models
from .models import (
    DeploymentSpec,
    InstallRecord,
    OperationResult,
    OperationStatus,
    FailureKind,
)

# Capabilities
from .storage import (
    Filesystem,
    SettingsStore,
    InstalledListing,
    LocalFilesystem,
    DirectoryListing,
    MemorySettingsStore,
    YamlSettingsStore,
)

# Services
from .services import NoticeService, ConfigService
from .core.triggers import TriggerRegistry, register_manager

# Exceptions
from .api.exceptions import (
    DropinManagerError,
    ConfigError,
    ValidationError,
    FilesystemInitError,
    TeardownError,
    DeploymentNotFoundError,
)

__all__ = [
    # Version information
    "__version__",
    "__author__",
    "__email__",
    "__license__",

    # Main class and lifecycle hooks
    "DropinManager",
    "on_activate",
    "on_deactivate",

    # Data models
    "DeploymentSpec",
    "InstallRecord",
    "OperationResult",
    "OperationStatus",
    "FailureKind",

    # Capabilities
    "Filesystem",
    "SettingsStore",
    "InstalledListing",
    "LocalFilesystem",
    "DirectoryListing",
    "MemorySettingsStore",
    "YamlSettingsStore",

    # Services
    "NoticeService",
    "ConfigService",
    "TriggerRegistry",
    "register_manager",

    # Exceptions
    "DropinManagerError",
    "ConfigError",
    "ValidationError",
    "FilesystemInitError",
    "TeardownError",
    "DeploymentNotFoundError",
]
