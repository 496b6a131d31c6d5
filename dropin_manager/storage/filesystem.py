"""Local filesystem capability"""

import logging
import os
import shutil
from pathlib import Path
from typing import Any, Dict

from .base import Filesystem, PathLike

logger = logging.getLogger(__name__)


class LocalFilesystem(Filesystem):
    """Direct access to the local filesystem"""

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize local filesystem

        Args:
            config: Configuration including:
                - dir_mode: Permission bits for created directories (optional)
        """
        super().__init__(config)
        self.dir_mode = self.config.get('dir_mode', 0o755)

    def exists(self, path: PathLike) -> bool:
        return Path(path).exists()

    def is_dir(self, path: PathLike) -> bool:
        return Path(path).is_dir()

    def mkdir(self, path: PathLike) -> bool:
        try:
            Path(path).mkdir(mode=self.dir_mode, parents=True, exist_ok=True)
            return True
        except OSError as e:
            logger.error(f"Mkdir failed: {e}")
            return False

    def copy(self, source: PathLike, destination: PathLike) -> bool:
        try:
            source = Path(source)
            if not source.is_file():
                logger.error(f"Copy failed: source is not a file: {source}")
                return False

            shutil.copyfile(source, destination)
            return True

        except OSError as e:
            logger.error(f"Copy failed: {e}")
            return False

    def delete(self, path: PathLike) -> bool:
        try:
            target = Path(path)
            if target.is_dir():
                logger.error(f"Delete failed: refusing to delete directory {target}")
                return False

            target.unlink()
            return True

        except OSError as e:
            logger.error(f"Delete failed: {e}")
            return False

    def is_writable(self, path: PathLike) -> bool:
        return os.access(path, os.W_OK)
