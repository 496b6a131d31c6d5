# dropin_manager/models/__init__.py
"""Data models for dropin-manager"""

from .result import OperationResult, OperationStatus, FailureKind
from .record import InstallRecord
from .spec import DeploymentSpec
from .config import ManagerConfig, DeploymentConfig

__all__ = [
    # Result models
    "OperationResult",
    "OperationStatus",
    "FailureKind",

    # Persisted state
    "InstallRecord",

    # Deployment models
    "DeploymentSpec",

    # Config models
    "ManagerConfig",
    "DeploymentConfig",
]
