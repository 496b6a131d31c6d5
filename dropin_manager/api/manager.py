"""Drop-in manager: keeps one versioned file deployed in the drop-in directory"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..constants import (
    DEFAULT_FILESYSTEM_METHOD,
    MSG_DIR_NOT_CREATED,
    MSG_FILESYSTEM_INIT_FAILED,
    MSG_NOT_WRITABLE,
)
from ..core.settings_adapter import SettingsAdapter
from ..models.result import FailureKind, OperationResult
from ..models.spec import DeploymentSpec
from ..services.notice_service import NoticeService
from ..storage.base import Filesystem, InstalledListing, SettingsStore
from ..storage.factory import FilesystemFactory
from ..storage.listing import DirectoryListing
from ..utils.version_utils import is_newer
from .exceptions import FilesystemInitError, TeardownError

logger = logging.getLogger(__name__)


class DropinManager:
    """Installs, updates and removes a single drop-in file

    The filesystem is the source of truth for whether the file is present;
    the settings record only remembers which version was copied.
    """

    def __init__(self,
                 spec: DeploymentSpec,
                 filesystem: Optional[Filesystem] = None,
                 settings: Optional[SettingsStore] = None,
                 listing: Optional[InstalledListing] = None,
                 notices: Optional[NoticeService] = None,
                 filesystem_method: str = DEFAULT_FILESYSTEM_METHOD):
        """
        Initialize drop-in manager

        Args:
            spec: What to deploy and where
            filesystem: Filesystem capability (created lazily when omitted)
            settings: Settings store (None disables persistence)
            listing: Installed listing (default: scan of the drop-in directory)
            notices: Notice/log sink
            filesystem_method: Access method used for lazy filesystem creation
        """
        self.spec = spec
        self.filesystem = filesystem
        self.filesystem_method = filesystem_method
        self.listing = listing or DirectoryListing(spec.dest_dir)
        self.settings = SettingsAdapter(settings, spec.settings_key)
        self.notices = notices or NoticeService()

    @property
    def dest_dir(self) -> Path:
        return self.spec.dest_dir

    @property
    def dest_path(self) -> Path:
        return self.spec.dest_path

    def init_filesystem(self) -> Filesystem:
        """
        Get the filesystem capability, creating it on first use

        Raises:
            FilesystemInitError: If the capability cannot be created
        """
        if self.filesystem is None:
            self.filesystem = FilesystemFactory.create(self.filesystem_method)
            logger.debug(f"Initialized '{self.filesystem_method}' filesystem")
        return self.filesystem

    def is_installed(self) -> bool:
        """Check the installed listing for the drop-in filename"""
        filename = self.spec.dest_filename
        return any(filename in entry for entry in self.listing.list_installed())

    def is_update_required(self) -> bool:
        """
        Decide whether the drop-in needs to be copied

        Required when the file is not installed, when no version is recorded,
        or when the spec version is newer than the recorded one. Equal or
        older spec versions never trigger a copy while the file is present.
        """
        if not self.is_installed():
            return True

        installed_version = self.settings.installed_version
        if installed_version is None:
            return True

        return is_newer(self.spec.version, installed_version)

    def check(self) -> OperationResult:
        """
        Install or update the drop-in if required

        Returns:
            Skipped when already current, otherwise the install result
        """
        if not self.is_update_required():
            return OperationResult.skipped(
                f"{self.spec.dest_filename} {self.settings.installed_version} is current"
            )

        return self.install()

    def install(self) -> OperationResult:
        """
        Copy the drop-in into place and record its version

        The directory is created when missing; if that fails the copy is
        not attempted. A failed settings write is logged but does not turn
        a successful copy into a failure.

        Returns:
            Success or a failure value; never raises for filesystem faults
        """
        try:
            filesystem = self.init_filesystem()
        except FilesystemInitError as e:
            return OperationResult.failure(
                FailureKind.FILESYSTEM_INIT_FAILED,
                MSG_FILESYSTEM_INIT_FAILED.format(error=e),
            )

        if not filesystem.is_dir(self.dest_dir) and not filesystem.mkdir(self.dest_dir):
            return self._dir_not_created()

        if not filesystem.copy(self.spec.source_path, self.dest_path):
            return self._not_writable()

        logger.info(f"Copied {self.spec.source_path} to {self.dest_path}")

        if self.settings.enabled and self.settings.refresh().installed_version != self.spec.version:
            if not self.settings.set_installed_version(self.spec.version):
                self.notices.log(
                    f"Copied {self.spec.dest_filename} but could not record version {self.spec.version}"
                )

        return OperationResult.success(f"Installed {self.spec.dest_filename} {self.spec.version}")

    def remove(self) -> OperationResult:
        """
        Delete the drop-in and clear its recorded version

        Returns:
            Success (also when the file is already gone) or a failure value
        """
        try:
            filesystem = self.init_filesystem()
        except FilesystemInitError as e:
            return OperationResult.failure(
                FailureKind.FILESYSTEM_INIT_FAILED,
                MSG_FILESYSTEM_INIT_FAILED.format(error=e),
            )

        if not filesystem.exists(self.dest_path):
            return OperationResult.success(f"{self.spec.dest_filename} is not present")

        if not filesystem.delete(self.dest_path):
            return self._not_writable()

        logger.info(f"Removed {self.dest_path}")
        self.settings.clear_installed_version()

        return OperationResult.success(f"Removed {self.spec.dest_filename}")

    def is_writable(self) -> bool:
        """
        Check whether the drop-in directory and file could be written

        Missing paths count as writable since they can be created. Only
        used to decide whether to show a warning.
        """
        try:
            filesystem = self.init_filesystem()
        except FilesystemInitError:
            return False

        dir_writable = True
        file_writable = True

        if filesystem.is_dir(self.dest_dir):
            dir_writable = filesystem.is_writable(self.dest_dir)

        if filesystem.exists(self.dest_path):
            file_writable = filesystem.is_writable(self.dest_path)

        return dir_writable and file_writable

    def status(self) -> Dict[str, Any]:
        """Snapshot of the deployment state"""
        data = self.spec.to_dict()
        data.update({
            "dest_path": str(self.dest_path),
            "installed": self.is_installed(),
            "recorded_version": self.settings.installed_version,
            "update_required": self.is_update_required(),
            "writable": self.is_writable(),
        })
        return data

    def _dir_not_created(self) -> OperationResult:
        return OperationResult.failure(
            FailureKind.DIR_NOT_CREATED,
            MSG_DIR_NOT_CREATED.format(directory=self.dest_dir),
        )

    def _not_writable(self) -> OperationResult:
        return OperationResult.failure(
            FailureKind.NOT_WRITABLE,
            MSG_NOT_WRITABLE.format(directory=self.dest_dir),
        )


def on_activate(manager: DropinManager) -> OperationResult:
    """
    Install the drop-in when the host activates

    Failures are logged and returned, never raised; the host shows the
    not-writable notice on its next admin page load.
    """
    result = manager.install()

    if result.is_failed:
        manager.notices.log(result.message)

    return result


def on_deactivate(manager: DropinManager) -> OperationResult:
    """
    Remove the drop-in when the host deactivates

    Raises:
        TeardownError: If removal failed and the spec is strict on teardown
    """
    result = manager.remove()

    if result.is_success:
        manager.settings.clear_installed_version()
        return result

    manager.notices.log(result.message)

    if manager.spec.strict_on_teardown:
        raise TeardownError(result.message)

    return result
