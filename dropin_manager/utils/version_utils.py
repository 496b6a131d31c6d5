"""Version management utilities"""

import re
from typing import Optional, Tuple

from ..constants import VERSION_PATTERN

_CORE_PATTERN = re.compile(r"^(\d+(?:\.\d+)*)(.*)$")
_SUFFIX_SEPARATORS = re.compile(r"[.\-_]")


def version_key(version: str) -> Tuple:
    """
    Build a sort key with semantic version precedence

    The dotted numeric core is compared first, with trailing zero segments
    ignored so that ``1.0`` equals ``1.0.0``. A release without a qualifier
    ranks above any qualified one (``1.0.0-rc1 < 1.0.0``). Qualifiers compare
    identifier by identifier: numbers numerically and below words, and a
    shorter qualifier below a longer one it prefixes. Build metadata after
    ``+`` is ignored.

    Args:
        version: Version string

    Returns:
        Tuple usable with the ordinary comparison operators
    """
    version = version.strip().lstrip("vV").split("+", 1)[0]
    match = _CORE_PATTERN.match(version)
    if match:
        core = [int(part) for part in match.group(1).split(".")]
        rest = match.group(2)
    else:
        core, rest = [], version

    while core and core[-1] == 0:
        core.pop()

    identifiers = tuple(
        (0, int(part), "") if part.isdigit() else (1, 0, part.lower())
        for part in _SUFFIX_SEPARATORS.split(rest) if part
    )
    # (1,) sorts above every (0, ...) so unqualified releases win
    qualifier = (0, identifiers) if identifiers else (1,)
    return tuple(core), qualifier


def compare_versions(version1: str, version2: str) -> int:
    """
    Compare two versions

    Args:
        version1: First version
        version2: Second version

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2
    """
    k1 = version_key(version1)
    k2 = version_key(version2)

    if k1 < k2:
        return -1
    elif k1 > k2:
        return 1
    else:
        return 0


def is_newer(version: str, than: Optional[str]) -> bool:
    """
    Check whether a version is strictly newer than another

    Args:
        version: Candidate version
        than: Reference version (None counts as older than anything)

    Returns:
        True if version > than
    """
    if than is None:
        return True
    return compare_versions(version, than) > 0


def is_valid_version(version: str) -> bool:
    """
    Check if version string is valid

    Args:
        version: Version string

    Returns:
        True if valid
    """
    return VERSION_PATTERN.match(version) is not None
