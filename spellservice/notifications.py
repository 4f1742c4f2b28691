"""
Change notifications: a zero-argument "dictionary data changed" signal that
sessions subscribe to in order to clear their result caches.
"""

import threading
from typing import Callable, List

from .config_logging import get_logger

logger = get_logger(__name__)

ChangeCallback = Callable[[], None]


class ChangeNotifier:
    """Fire-and-forget fan-out of change signals."""

    def __init__(self):
        self._callbacks: List[ChangeCallback] = []
        self._lock = threading.Lock()

    def register(self, callback: ChangeCallback):
        with self._lock:
            self._callbacks.append(callback)

    def unregister(self, callback: ChangeCallback) -> bool:
        with self._lock:
            try:
                self._callbacks.remove(callback)
            except ValueError:
                return False
            return True

    def notify_change(self):
        """Invoke every registered callback; one failing callback does not stop the rest."""
        with self._lock:
            callbacks = list(self._callbacks)

        for callback in callbacks:
            try:
                callback()
            except Exception:
                logger.exception("Change callback failed",
                                 callback=getattr(callback, '__qualname__', repr(callback)))

    def __len__(self) -> int:
        return len(self._callbacks)
