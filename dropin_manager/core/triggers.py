"""Host trigger registry

The host decides when to fire events; this module only maps events to
callbacks in priority order.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from ..api.exceptions import FilesystemInitError
from ..api.manager import DropinManager, on_activate, on_deactivate
from ..constants import DEFAULT_CHECK_SCREEN, TriggerEvent
from ..models.result import OperationResult

logger = logging.getLogger(__name__)

Callback = Callable[..., Any]


class TriggerRegistry:
    """Callbacks keyed by event, run lowest priority first"""

    def __init__(self):
        self._callbacks: Dict[TriggerEvent, List[Tuple[int, int, Callback]]] = {}
        self._counter = 0

    def register(self, event: Union[TriggerEvent, str], callback: Callback, priority: int = 10) -> None:
        """
        Register a callback for an event

        Args:
            event: Trigger event
            callback: Called with the keyword context passed to fire()
            priority: Lower runs earlier; ties run in registration order
        """
        event = TriggerEvent(event)
        self._counter += 1
        self._callbacks.setdefault(event, []).append((priority, self._counter, callback))

    def callbacks(self, event: Union[TriggerEvent, str]) -> List[Callback]:
        event = TriggerEvent(event)
        return [cb for _, _, cb in sorted(self._callbacks.get(event, []), key=lambda c: c[:2])]

    def fire(self, event: Union[TriggerEvent, str], **context: Any) -> List[Any]:
        """
        Run all callbacks for an event

        Exceptions from callbacks propagate to the host.

        Returns:
            Callback return values in call order
        """
        event = TriggerEvent(event)
        logger.debug(f"Firing {event.value}")
        return [callback(**context) for callback in self.callbacks(event)]


def register_manager(registry: TriggerRegistry,
                     manager: DropinManager,
                     screen: str = DEFAULT_CHECK_SCREEN) -> None:
    """
    Wire a drop-in manager into the host's events

    * admin_init runs the version check, only on the given screen
    * admin_notices warns when an update is pending but cannot be written
    * activate / deactivate run the lifecycle hooks

    Args:
        registry: Host trigger registry
        manager: Drop-in manager
        screen: Admin screen the version check runs on
    """
    def version_check(screen_name: Optional[str] = None, **_: Any) -> Optional[OperationResult]:
        if screen_name != screen:
            return None

        result = manager.check()
        manager.notices.report(result, manager.dest_dir)
        return result

    def init_filesystem(**_: Any) -> bool:
        try:
            manager.init_filesystem()
            return True
        except FilesystemInitError as e:
            manager.notices.log(str(e))
            return False

    def admin_notice(**_: Any) -> None:
        if manager.is_update_required() and not manager.is_writable():
            manager.notices.warn(manager.dest_dir)

    registry.register(TriggerEvent.ADMIN_INIT, init_filesystem, priority=0)
    registry.register(TriggerEvent.ADMIN_INIT, version_check, priority=1)
    registry.register(TriggerEvent.ADMIN_NOTICES, admin_notice, priority=1)
    registry.register(TriggerEvent.ACTIVATE, lambda **_: on_activate(manager))
    registry.register(TriggerEvent.DEACTIVATE, lambda **_: on_deactivate(manager))
