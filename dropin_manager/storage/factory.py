"""Filesystem capability factory"""

from typing import Any, Dict, Type

from .base import Filesystem
from .filesystem import LocalFilesystem
from ..api.exceptions import FilesystemInitError
from ..constants import FilesystemMethod


class FilesystemFactory:
    """Factory for creating filesystem capability instances"""

    # Registry of filesystem methods
    _methods: Dict[FilesystemMethod, Type[Filesystem]] = {
        FilesystemMethod.DIRECT: LocalFilesystem,
    }

    @classmethod
    def create(cls, method: str, config: Dict[str, Any] = None) -> Filesystem:
        """Create filesystem capability for an access method

        Args:
            method: Access method name
            config: Configuration dictionary

        Returns:
            Filesystem instance

        Raises:
            FilesystemInitError: If the method is unknown or construction fails
        """
        try:
            method_enum = FilesystemMethod(method)
        except ValueError:
            raise FilesystemInitError(f"Invalid filesystem method: {method}")

        if method_enum not in cls._methods:
            raise FilesystemInitError(f"Unsupported filesystem method: {method}")

        try:
            return cls._methods[method_enum](config)
        except Exception as e:
            raise FilesystemInitError(str(e)) from e

