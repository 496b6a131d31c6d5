# dropin_manager/storage/base.py
"""Abstract capabilities consumed by the drop-in manager"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

PathLike = Union[str, Path]


class Filesystem(ABC):
    """Filesystem capability

    Every operation reports success as a boolean; implementations log
    and swallow their own I/O errors.
    """

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize filesystem capability

        Args:
            config: Implementation-specific configuration
        """
        self.config = config or {}

    @abstractmethod
    def exists(self, path: PathLike) -> bool:
        """Check if a file or directory exists"""
        pass

    @abstractmethod
    def is_dir(self, path: PathLike) -> bool:
        """Check if path is a directory"""
        pass

    @abstractmethod
    def mkdir(self, path: PathLike) -> bool:
        """
        Create directory

        Args:
            path: Directory to create

        Returns:
            True if successful
        """
        pass

    @abstractmethod
    def copy(self, source: PathLike, destination: PathLike) -> bool:
        """
        Copy a file, overwriting the destination

        Args:
            source: Source file
            destination: Destination file

        Returns:
            True if successful
        """
        pass

    @abstractmethod
    def delete(self, path: PathLike) -> bool:
        """
        Delete a file

        Args:
            path: File to delete

        Returns:
            True if successful
        """
        pass

    @abstractmethod
    def is_writable(self, path: PathLike) -> bool:
        """Check if path is writable"""
        pass


class SettingsStore(ABC):
    """Key-value settings store holding mapping records"""

    @abstractmethod
    def get(self, name: str) -> Optional[Dict[str, Any]]:
        """
        Get a settings record

        Args:
            name: Record name

        Returns:
            Stored mapping or None if absent
        """
        pass

    @abstractmethod
    def set(self, name: str, value: Mapping[str, Any]) -> bool:
        """
        Replace a settings record

        Args:
            name: Record name
            value: Mapping to store

        Returns:
            True if successful
        """
        pass


class InstalledListing(ABC):
    """Enumeration of files the host currently recognizes as installed"""

    @abstractmethod
    def list_installed(self) -> List[str]:
        """
        List installed drop-ins

        Returns:
            Filenames or paths of installed drop-ins
        """
        pass
