"""Configuration management service"""

import os
import shutil
from pathlib import Path
from typing import List, Optional, Tuple, Union

import yaml

from ..api.exceptions import ConfigError, DeploymentNotFoundError
from ..constants import ENV_CONFIG_PATH, PROJECT_CONFIG_FILE
from ..core.path_resolver import PathResolver
from ..models.config import DeploymentConfig, ManagerConfig
from ..models.spec import DeploymentSpec
from ..storage.settings import YamlSettingsStore
from .notice_service import NoticeService


class ConfigService:
    """Loads configuration and builds drop-in managers from it"""

    def __init__(self, config_path: Union[str, Path, None] = None):
        """Initialize config service

        Args:
            config_path: Config file (default: $DROPIN_MANAGER_CONFIG or
                ./.dropin-manager.yaml)
        """
        if config_path is None:
            config_path = os.environ.get(ENV_CONFIG_PATH) or PROJECT_CONFIG_FILE

        self.config_path = Path(config_path).expanduser().resolve()
        self.base_dir = self.config_path.parent
        self._config: Optional[ManagerConfig] = None

    @property
    def config(self) -> ManagerConfig:
        """Get current configuration (lazy load)"""
        if self._config is None:
            self.load_config()
        return self._config

    def load_config(self) -> ManagerConfig:
        """Load configuration from file

        Returns:
            Loaded configuration

        Raises:
            ConfigError: If the file is missing or malformed
        """
        if not self.config_path.exists():
            raise ConfigError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            content = f.read()

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}")

        self._config = ManagerConfig.from_dict(data)
        return self._config

    def save_config(self, config: Optional[ManagerConfig] = None) -> None:
        """Save configuration to file

        Args:
            config: Configuration to save (uses current if not provided)
        """
        if config:
            self._config = config

        if not self._config:
            raise ValueError("No configuration to save")

        # Create backup
        if self.config_path.exists():
            backup_path = self.config_path.with_suffix('.yaml.bak')
            shutil.copy2(self.config_path, backup_path)

        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(self._config.to_dict(), f, default_flow_style=False, sort_keys=False)

    def select_deployments(self, names: Optional[List[str]] = None) -> List[DeploymentConfig]:
        """Get deployments by name, or all of them

        Raises:
            DeploymentNotFoundError: If a requested name is not configured
        """
        if not names:
            return list(self.config.deployments)

        selected = []
        for name in names:
            deployment = self.config.get_deployment(name)
            if deployment is None:
                raise DeploymentNotFoundError(name)
            selected.append(deployment)
        return selected

    def build_spec(self, deployment: DeploymentConfig) -> DeploymentSpec:
        """Build the deployment spec for a configured deployment"""
        resolver = PathResolver(self.config.dropin_dir, base_dir=self.base_dir)

        return DeploymentSpec(
            source_path=deployment.source_path(self.base_dir),
            dest_dir=resolver.dropin_dir,
            dest_filename=deployment.filename,
            version=deployment.version,
            settings_key=deployment.settings_key,
            strict_on_teardown=deployment.strict_on_teardown,
        )

    def build_managers(self,
                       names: Optional[List[str]] = None,
                       notices: Optional[NoticeService] = None) -> List[Tuple[str, 'DropinManager']]:
        """
        Build one manager per selected deployment

        Args:
            names: Deployment names (default: all)
            notices: Shared notice sink

        Returns:
            List of (name, manager) pairs
        """
        from ..api.manager import DropinManager

        notices = notices or NoticeService(debug=self.config.debug)
        settings_path = PathResolver(base_dir=self.base_dir).resolve(self.config.settings_file)
        store = YamlSettingsStore(settings_path)

        return [
            (deployment.name, DropinManager(
                self.build_spec(deployment),
                settings=store,
                notices=notices,
                filesystem_method=self.config.filesystem_method,
            ))
            for deployment in self.select_deployments(names)
        ]
