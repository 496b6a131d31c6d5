"""Settings store implementations"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .base import SettingsStore

logger = logging.getLogger(__name__)


class MemorySettingsStore(SettingsStore):
    """In-process settings store

    Values are deep-copied on the way in and out so callers never share
    state with the store.
    """

    def __init__(self, initial: Optional[Dict[str, Dict[str, Any]]] = None):
        self._data: Dict[str, Dict[str, Any]] = copy.deepcopy(initial or {})

    def get(self, name: str) -> Optional[Dict[str, Any]]:
        value = self._data.get(name)
        return copy.deepcopy(value) if value is not None else None

    def set(self, name: str, value: Mapping[str, Any]) -> bool:
        self._data[name] = copy.deepcopy(dict(value))
        return True


class YamlSettingsStore(SettingsStore):
    """Settings records kept as top-level keys of a YAML file

    The file is re-read on every access so writes from other processes
    are picked up.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize YAML settings store

        Args:
            path: Settings file path (created on first write)
        """
        self.path = Path(path)

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}

        with open(self.path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Settings file must contain a mapping: {self.path}")
        return data

    def get(self, name: str) -> Optional[Dict[str, Any]]:
        try:
            value = self._load().get(name)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Settings read failed: {e}")
            return None

        return value if isinstance(value, dict) else None

    def set(self, name: str, value: Mapping[str, Any]) -> bool:
        try:
            data = self._load()
            data[name] = dict(value)

            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + '.tmp')
            with open(tmp_path, 'w', encoding='utf-8') as f:
                yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
            tmp_path.replace(self.path)
            return True

        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Settings write failed: {e}")
            return False
