"""Operator notices and debug logging"""

import logging
import pprint
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Union

from rich.console import Console
from rich.panel import Panel

from ..constants import EMOJI_ERROR, EMOJI_WARNING, MSG_NOT_WRITABLE
from ..models.result import OperationResult

logger = logging.getLogger(__name__)


@dataclass
class Notice:
    """A non-blocking warning for the operator"""

    message: str
    directory: Optional[str] = None
    level: str = "error"


class NoticeService:
    """Collects notices and writes debug logs

    Purely presentational: it never retries or escalates.
    """

    def __init__(self, debug: bool = False, console: Optional[Console] = None):
        self.debug = debug
        self.console = console or Console(stderr=True)
        self._notices: List[Notice] = []

    @property
    def notices(self) -> List[Notice]:
        return list(self._notices)

    def log(self, message: Any) -> None:
        """Write to the debug log (no-op unless debug is enabled)"""
        if not self.debug:
            return

        if isinstance(message, (dict, list, tuple)) or hasattr(message, "__dict__"):
            message = pprint.pformat(getattr(message, "__dict__", message))
        logger.error(message)

    def warn(self, directory: Union[str, Path, None], message: Optional[str] = None) -> Notice:
        """
        Queue a warning notice

        Args:
            directory: Drop-in directory the warning concerns
            message: Notice text (default: generic remediation message)

        Returns:
            The queued notice
        """
        directory = str(directory) if directory is not None else None
        if not message:
            message = MSG_NOT_WRITABLE.format(directory=directory)

        notice = Notice(message=message, directory=directory)
        self._notices.append(notice)
        return notice

    def report(self, result: OperationResult, directory: Union[str, Path, None] = None) -> Optional[Notice]:
        """
        Log a failed result and queue a notice for it

        Args:
            result: Operation result
            directory: Drop-in directory

        Returns:
            The queued notice, or None if the result was not a failure
        """
        if not result.is_failed:
            return None

        self.log(result.message)
        return self.warn(directory, result.message)

    def render(self) -> int:
        """
        Print queued notices and clear the queue

        Returns:
            Number of notices printed
        """
        count = len(self._notices)
        for notice in self._notices:
            icon = EMOJI_ERROR if notice.level == "error" else EMOJI_WARNING
            self.console.print(Panel(
                f"[red]{icon}[/red] {notice.message}",
                title="Drop-in Notice",
                border_style="red" if notice.level == "error" else "yellow",
            ))

        self._notices.clear()
        return count
