"""Operation result models"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from ..constants import ErrorCode


class OperationStatus(Enum):
    """Operation status"""
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


class FailureKind(Enum):
    """Why a filesystem operation failed"""
    DIR_NOT_CREATED = "dir_not_created"
    NOT_WRITABLE = "not_writable"
    FILESYSTEM_INIT_FAILED = "filesystem_init_failed"

    @property
    def error_code(self) -> str:
        return {
            FailureKind.DIR_NOT_CREATED: ErrorCode.DIR_NOT_CREATED,
            FailureKind.NOT_WRITABLE: ErrorCode.NOT_WRITABLE,
            FailureKind.FILESYSTEM_INIT_FAILED: ErrorCode.FILESYSTEM_INIT_FAILED,
        }[self]


@dataclass(frozen=True)
class OperationResult:
    """Tagged outcome of check/install/remove

    ``kind`` and ``message`` are only set for failures.
    """

    status: OperationStatus
    kind: Optional[FailureKind] = None
    message: str = ""
    timestamp: datetime = field(default_factory=datetime.now, compare=False)

    @classmethod
    def success(cls, message: str = "") -> 'OperationResult':
        return cls(status=OperationStatus.SUCCESS, message=message)

    @classmethod
    def skipped(cls, message: str = "") -> 'OperationResult':
        return cls(status=OperationStatus.SKIPPED, message=message)

    @classmethod
    def failure(cls, kind: FailureKind, message: str) -> 'OperationResult':
        return cls(status=OperationStatus.FAILED, kind=kind, message=message)

    @property
    def is_success(self) -> bool:
        """Check if operation was successful"""
        return self.status == OperationStatus.SUCCESS

    @property
    def is_skipped(self) -> bool:
        """Check if operation was a no-op"""
        return self.status == OperationStatus.SKIPPED

    @property
    def is_failed(self) -> bool:
        """Check if operation failed"""
        return self.status == OperationStatus.FAILED

    @property
    def error_code(self) -> Optional[str]:
        return self.kind.error_code if self.kind else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "status": self.status.value,
            "timestamp": self.timestamp.isoformat(),
        }

        if self.kind:
            data["kind"] = self.kind.value
            data["error_code"] = self.error_code
        if self.message:
            data["message"] = self.message

        return data
