"""Persisted install record model"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..constants import INSTALLED_VERSION_KEY


@dataclass
class InstallRecord:
    """Settings record with a typed version field

    The record lives in a host-owned mapping that may hold unrelated keys;
    those are kept in ``extra`` and written back untouched.
    """

    installed_version: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'InstallRecord':
        """Create from a stored mapping (None or non-mapping yields an empty record)"""
        if not isinstance(data, Mapping):
            return cls()

        extra = {k: v for k, v in data.items() if k != INSTALLED_VERSION_KEY}
        version = data.get(INSTALLED_VERSION_KEY)

        return cls(
            installed_version=str(version) if version is not None else None,
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = dict(self.extra)
        if self.installed_version is not None:
            data[INSTALLED_VERSION_KEY] = self.installed_version
        return data

    @property
    def has_version(self) -> bool:
        return self.installed_version is not None
