# dropin_manager/cli/commands/__init__.py
"""CLI commands"""

from . import lifecycle
from . import status

__all__ = [
    "lifecycle",
    "status",
]
