"""Exception definitions for dropin-manager API"""

from ..constants import ErrorCode, MSG_TEARDOWN_FAILED


class DropinManagerError(Exception):
    """Base exception for dropin-manager"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(DropinManagerError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class ValidationError(DropinManagerError):
    """Validation error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.VALIDATION_FAILED)


class FilesystemInitError(DropinManagerError):
    """Filesystem capability could not be initialized"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.FILESYSTEM_INIT_FAILED)


class TeardownError(DropinManagerError):
    """Removal failed during a strict teardown"""

    def __init__(self, message: str):
        super().__init__(MSG_TEARDOWN_FAILED.format(message=message), ErrorCode.TEARDOWN_FAILED)
        self.reason = message


class DeploymentNotFoundError(DropinManagerError):
    """Named deployment missing from configuration"""

    def __init__(self, name: str):
        message = f"Deployment not found: {name}"
        super().__init__(message, ErrorCode.DEPLOYMENT_NOT_FOUND)
        self.name = name
