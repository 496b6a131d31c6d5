"""Configuration data models"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..api.exceptions import ConfigError
from ..constants import (
    CONFIG_VERSION,
    DEFAULT_SETTINGS_FILE,
    DEFAULT_FILESYSTEM_METHOD,
    DEPLOYMENT_NAME_PATTERN,
)


@dataclass
class DeploymentConfig:
    """Configuration for a single drop-in deployment"""

    name: str
    source: str
    filename: str
    version: str
    settings_key: Optional[str] = None
    strict_on_teardown: bool = False

    def __post_init__(self):
        """Validate deployment configuration"""
        if not DEPLOYMENT_NAME_PATTERN.match(self.name or ""):
            raise ConfigError(f"Invalid deployment name: {self.name!r}")

        missing = [key for key in ("source", "filename", "version") if not getattr(self, key)]
        if missing:
            raise ConfigError(
                f"Deployment '{self.name}' is missing required fields: {', '.join(missing)}"
            )

    def source_path(self, base_dir: Path) -> Path:
        """Resolve source relative to the config file directory"""
        path = Path(self.source)
        if path.is_absolute():
            return path
        return (base_dir / path).resolve()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "name": self.name,
            "source": self.source,
            "filename": self.filename,
            "version": self.version,
        }

        if self.settings_key:
            data["settings_key"] = self.settings_key
        if self.strict_on_teardown:
            data["strict_on_teardown"] = True

        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeploymentConfig':
        """Create from dictionary"""
        if not isinstance(data, dict):
            raise ConfigError(f"Deployment entry must be a mapping, got {type(data).__name__}")

        return cls(
            name=data.get("name", ""),
            source=data.get("source", ""),
            filename=data.get("filename", ""),
            # YAML reads 1.0 as a float
            version=str(data["version"]) if data.get("version") is not None else "",
            settings_key=data.get("settings_key"),
            strict_on_teardown=bool(data.get("strict_on_teardown", False)),
        )


@dataclass
class ManagerConfig:
    """Top-level dropin-manager configuration"""

    version: str = CONFIG_VERSION
    debug: bool = False
    dropin_dir: Optional[str] = None
    settings_file: str = DEFAULT_SETTINGS_FILE
    filesystem_method: str = DEFAULT_FILESYSTEM_METHOD
    deployments: List[DeploymentConfig] = field(default_factory=list)

    def get_deployment(self, name: str) -> Optional[DeploymentConfig]:
        """Get deployment by name"""
        for deployment in self.deployments:
            if deployment.name == name:
                return deployment
        return None

    def add_deployment(self, deployment: DeploymentConfig) -> None:
        """Add or replace a deployment"""
        self.deployments = [d for d in self.deployments if d.name != deployment.name]
        self.deployments.append(deployment)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "version": self.version,
            "debug": self.debug,
            "settings_file": self.settings_file,
            "filesystem_method": self.filesystem_method,
        }

        if self.dropin_dir:
            data["dropin_dir"] = self.dropin_dir

        data["deployments"] = [d.to_dict() for d in self.deployments]
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ManagerConfig':
        """Create from dictionary"""
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigError("Configuration root must be a mapping")

        deployments = [DeploymentConfig.from_dict(d) for d in data.get("deployments") or []]

        names = [d.name for d in deployments]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ConfigError(f"Duplicate deployment names: {', '.join(duplicates)}")

        return cls(
            version=str(data.get("version", CONFIG_VERSION)),
            debug=bool(data.get("debug", False)),
            dropin_dir=data.get("dropin_dir"),
            settings_file=data.get("settings_file") or DEFAULT_SETTINGS_FILE,
            filesystem_method=data.get("filesystem_method") or DEFAULT_FILESYSTEM_METHOD,
            deployments=deployments,
        )
