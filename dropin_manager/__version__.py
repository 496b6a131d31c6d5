"""Version information for dropin-manager package"""

__version__ = "0.1.0"
__version_info__ = (0, 1, 0)
__author__ = "dropin-manager contributors"
__email__ = ""
__license__ = "MIT"
__copyright__ = "Copyright 2026 dropin-manager contributors"

# Version details
VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0
VERSION_SUFFIX = ""  # For pre-release versions like "alpha", "beta", "rc1"

# Full version string
if VERSION_SUFFIX:
    VERSION_STRING = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}-{VERSION_SUFFIX}"
else:
    VERSION_STRING = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"

# Ensure version consistency
assert __version__ == VERSION_STRING, "Version mismatch between __version__ and VERSION_STRING"
