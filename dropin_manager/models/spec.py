"""Deployment specification model"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..api.exceptions import ValidationError
from ..utils.version_utils import is_valid_version


@dataclass(frozen=True)
class DeploymentSpec:
    """What to deploy, where, and under which settings record

    ``settings_key`` may be None, in which case nothing is persisted and
    every check treats an update as required.
    """

    source_path: Path
    dest_dir: Path
    dest_filename: str
    version: str
    settings_key: Optional[str] = None
    strict_on_teardown: bool = False

    def __post_init__(self):
        """Normalize paths and validate fields"""
        object.__setattr__(self, "source_path", Path(self.source_path))
        object.__setattr__(self, "dest_dir", Path(self.dest_dir))

        if not self.dest_filename:
            raise ValidationError("Destination filename is required")
        if "/" in self.dest_filename or "\\" in self.dest_filename:
            raise ValidationError(
                f"Destination filename must not contain path separators: {self.dest_filename}"
            )
        if not self.version:
            raise ValidationError("Version is required")
        if not is_valid_version(self.version):
            raise ValidationError(f"Invalid version format: {self.version}")

    @classmethod
    def create(cls,
               source: Union[str, Path],
               dest_filename: str,
               version: str,
               settings_key: Optional[str] = None,
               dest_dir: Union[str, Path, None] = None,
               strict_on_teardown: bool = False) -> 'DeploymentSpec':
        """
        Build a spec, resolving the drop-in directory when not given

        Args:
            source: File to deploy
            dest_filename: Filename inside the drop-in directory
            version: Version this spec installs
            settings_key: Settings record name (optional)
            dest_dir: Drop-in directory override
            strict_on_teardown: Raise when removal fails on deactivation

        Returns:
            DeploymentSpec
        """
        from ..core.path_resolver import PathResolver

        return cls(
            source_path=Path(source),
            dest_dir=PathResolver(dest_dir).dropin_dir,
            dest_filename=dest_filename,
            version=version,
            settings_key=settings_key,
            strict_on_teardown=strict_on_teardown,
        )

    @property
    def dest_path(self) -> Path:
        """Full path of the deployed file"""
        return self.dest_dir / self.dest_filename

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "source_path": str(self.source_path),
            "dest_dir": str(self.dest_dir),
            "dest_filename": self.dest_filename,
            "version": self.version,
            "settings_key": self.settings_key,
            "strict_on_teardown": self.strict_on_teardown,
        }
