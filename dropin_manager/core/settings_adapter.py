"""Read/merge/write access to the persisted install record"""

import logging
from typing import Any, Optional

from ..models.record import InstallRecord
from ..storage.base import SettingsStore

logger = logging.getLogger(__name__)


class SettingsAdapter:
    """Wraps one settings record

    Reads are memoized after first access. Writes always merge into a fresh
    read-through copy so keys written by others survive.
    """

    def __init__(self, store: Optional[SettingsStore], settings_key: Optional[str]):
        """Initialize settings adapter

        Args:
            store: Settings store (None disables persistence)
            settings_key: Record name (None disables persistence)
        """
        self.store = store
        self.settings_key = settings_key
        self._record: Optional[InstallRecord] = None

    @property
    def enabled(self) -> bool:
        """Whether this adapter persists anything"""
        return self.store is not None and bool(self.settings_key)

    def read(self) -> InstallRecord:
        """Get the record, loading it on first access"""
        if self._record is None:
            self._record = self._fetch()
        return self._record

    def refresh(self) -> InstallRecord:
        """Drop the cached record and read again"""
        self._record = None
        return self.read()

    @property
    def installed_version(self) -> Optional[str]:
        return self.read().installed_version

    def write(self, **changes: Any) -> bool:
        """
        Merge changes into the freshest record and persist

        A value of None removes the key.

        Args:
            **changes: Keys to set or remove

        Returns:
            True if the store accepted the write
        """
        if not self.enabled:
            return False

        data = self._fetch().to_dict()
        for key, value in changes.items():
            if value is None:
                data.pop(key, None)
            else:
                data[key] = value

        record = InstallRecord.from_dict(data)
        if not self.store.set(self.settings_key, record.to_dict()):
            logger.warning(f"Settings write failed for '{self.settings_key}'")
            self._record = None
            return False

        self._record = record
        return True

    def set_installed_version(self, version: str) -> bool:
        """Persist the installed version"""
        return self.write(installed_version=version)

    def clear_installed_version(self) -> bool:
        """
        Remove the installed version key, leaving the rest of the record

        Returns:
            True if the key was removed and persisted
        """
        if not self.enabled:
            return False

        if not self._fetch().has_version:
            self._record = None
            return False

        return self.write(installed_version=None)

    def _fetch(self) -> InstallRecord:
        if not self.enabled:
            return InstallRecord()
        return InstallRecord.from_dict(self.store.get(self.settings_key))
