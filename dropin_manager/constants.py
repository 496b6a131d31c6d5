"""Global constants for dropin-manager"""

from enum import Enum
import re

APP_NAME = "dropin-manager"
LOG_FORMAT = "%(message)s"

# Version related
CONFIG_VERSION = "1.0"

# Project identification
PROJECT_CONFIG_FILE = ".dropin-manager.yaml"
DEFAULT_SETTINGS_FILE = ".dropin-settings.yaml"

# Directory structure
DEFAULT_DROPIN_DIRNAME = "dropins"

# Persisted record layout
INSTALLED_VERSION_KEY = "installed_version"

# Host trigger events
class TriggerEvent(Enum):
    ADMIN_INIT = "admin_init"
    ADMIN_NOTICES = "admin_notices"
    ACTIVATE = "activate"
    DEACTIVATE = "deactivate"

# Screen on which the version check is allowed to run
DEFAULT_CHECK_SCREEN = "plugins"

# Filesystem access methods
class FilesystemMethod(Enum):
    DIRECT = "direct"

DEFAULT_FILESYSTEM_METHOD = FilesystemMethod.DIRECT.value

# Error codes
class ErrorCode:
    DIR_NOT_CREATED = "DM001"
    NOT_WRITABLE = "DM002"
    FILESYSTEM_INIT_FAILED = "DM003"
    CONFIG_FORMAT_ERROR = "DM004"
    VALIDATION_FAILED = "DM005"
    TEARDOWN_FAILED = "DM006"
    DEPLOYMENT_NOT_FOUND = "DM007"

# Environment variables
ENV_CONFIG_PATH = "DROPIN_MANAGER_CONFIG"
ENV_DROPIN_DIR = "DROPIN_MANAGER_DIR"
ENV_CONTENT_DIR = "DROPIN_MANAGER_CONTENT_DIR"

# Validation patterns
VERSION_PATTERN = re.compile(
    r"^(?P<major>\d+)(?:\.(?P<minor>\d+))?(?:\.(?P<patch>\d+))?"
    r"(?:[-.]?(?P<suffix>[0-9A-Za-z][0-9A-Za-z.-]*))?"
    r"(?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"$"
)
DEPLOYMENT_NAME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9_-]*$")

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_WARNING = "⚠"
EMOJI_SKIPPED = "–"

# Messages templates
MSG_DIR_NOT_CREATED = "The drop-in directory could not be created: {directory}"
MSG_NOT_WRITABLE = (
    "Your drop-in directory is currently not writable. "
    "Please update the permissions of the drop-in folder: {directory}"
)
MSG_FILESYSTEM_INIT_FAILED = "Something happened with initializing the filesystem: {error}"
MSG_TEARDOWN_FAILED = "Drop-in was not removed. {message}"
