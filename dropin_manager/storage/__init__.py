# dropin_manager/storage/__init__.py
"""Filesystem and settings capabilities for dropin-manager"""

from .base import Filesystem, SettingsStore, InstalledListing
from .filesystem import LocalFilesystem
from .listing import DirectoryListing
from .settings import MemorySettingsStore, YamlSettingsStore
from .factory import FilesystemFactory

__all__ = [
    'Filesystem',
    'SettingsStore',
    'InstalledListing',
    'LocalFilesystem',
    'DirectoryListing',
    'MemorySettingsStore',
    'YamlSettingsStore',
    'FilesystemFactory',
]
