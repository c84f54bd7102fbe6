"""
In-process event bus. Hosts publish file_opened / file_saved notifications on
it (see events.publish_file_event) and RecentFileService turns them into
touches; CommandService announces command additions, removals and refreshes.
"""
import threading
from collections import defaultdict
from typing import Any, Callable

from .logger import get_logger

logger = get_logger("event_bus")

Handler = Callable[[str, Any], None]


class EventBus:
    """
    event_name -> callbacks, called as callback(event_name, data).
    A failing callback is logged and does not stop the others.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = defaultdict(list)
        self._lock = threading.Lock()

    def subscribe(self, event_name: str, callback: Handler) -> None:
        with self._lock:
            self._handlers[event_name].append(callback)

    def unsubscribe(self, event_name: str, callback: Handler) -> None:
        """Drop one subscription of callback; unknown callbacks are ignored."""
        with self._lock:
            handlers = self._handlers.get(event_name, [])
            if callback in handlers:
                handlers.remove(callback)
            if not handlers:
                self._handlers.pop(event_name, None)

    def emit(self, event_name: str, data: Any = None) -> None:
        # snapshot so handlers may (un)subscribe while being called
        with self._lock:
            callbacks = tuple(self._handlers.get(event_name, ()))
        for callback in callbacks:
            try:
                callback(event_name, data)
            except Exception:
                logger.exception("Handler for %r failed", event_name)
