"""Path resolution module for dropin-manager"""

import os
from pathlib import Path
from typing import Optional, Union

from ..constants import (
    DEFAULT_DROPIN_DIRNAME,
    ENV_CONTENT_DIR,
    ENV_DROPIN_DIR,
)


class PathResolver:
    """Resolves the privileged drop-in directory

    Resolution order: explicit directory, ``DROPIN_MANAGER_DIR``, then
    ``<content dir>/dropins`` where the content dir comes from
    ``DROPIN_MANAGER_CONTENT_DIR`` or the base directory.
    """

    def __init__(self,
                 dropin_dir: Union[str, Path, None] = None,
                 base_dir: Union[str, Path, None] = None):
        """Initialize path resolver

        Args:
            dropin_dir: Explicit drop-in directory (optional)
            base_dir: Directory relative paths resolve against (default: cwd)
        """
        self.base_dir = Path(base_dir).resolve() if base_dir else Path.cwd()
        self._dropin_dir = self._resolve_dropin_dir(dropin_dir)

    @property
    def dropin_dir(self) -> Path:
        return self._dropin_dir

    def resolve(self, path: Union[str, Path]) -> Path:
        """Resolve a path relative to the base directory

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Resolved absolute path
        """
        path = Path(path).expanduser()

        if path.is_absolute():
            return path

        return (self.base_dir / path).resolve()

    def get_content_dir(self) -> Path:
        """Get content directory path

        Returns:
            Path to the host content directory
        """
        content_dir = os.environ.get(ENV_CONTENT_DIR)
        if content_dir:
            return self.resolve(content_dir)

        return self.base_dir

    def _resolve_dropin_dir(self, dropin_dir: Union[str, Path, None]) -> Path:
        if dropin_dir:
            return self.resolve(dropin_dir)

        env_dir: Optional[str] = os.environ.get(ENV_DROPIN_DIR)
        if env_dir:
            return self.resolve(env_dir)

        return self.get_content_dir() / DEFAULT_DROPIN_DIRNAME
