# dropin_manager/services/__init__.py
"""Services for dropin-manager"""

from .notice_service import Notice, NoticeService
from .config_service import ConfigService

__all__ = [
    "Notice",
    "NoticeService",
    "ConfigService",
]
