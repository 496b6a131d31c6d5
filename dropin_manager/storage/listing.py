"""Installed drop-in listing backed by a directory scan"""

from pathlib import Path
from typing import List, Union

from .base import InstalledListing


class DirectoryListing(InstalledListing):
    """Lists files directly inside the drop-in directory

    Subdirectories are not descended into; the host only auto-loads
    top-level files.
    """

    def __init__(self, directory: Union[str, Path], pattern: str = "*"):
        self.directory = Path(directory)
        self.pattern = pattern

    def list_installed(self) -> List[str]:
        if not self.directory.is_dir():
            return []

        return sorted(
            str(path) for path in self.directory.glob(self.pattern)
            if path.is_file()
        )
