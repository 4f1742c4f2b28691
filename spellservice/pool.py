"""
Dictionary Pool
===============
A fixed-size, per-locale pool of dictionary handles shared by concurrent
spell check requests.

Handles are expensive to build (dictionary load), so the pool creates them
lazily, up to its maximum size, and reuses them forever. Borrowers wait a
bounded time for a free handle; when the wait runs out they get the invalid
handle instead of an exception and are expected to degrade.
"""

import threading
import time
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Deque, Dict, Iterator, Optional, Set

from .base import SpellDictionary
from .composer import Keyboard
from .config_logging import POOL_MISUSE, get_logger

__version__ = "1.0.0"

DEFAULT_POOL_SIZE = 2
DEFAULT_TIMEOUT_SECONDS = 3.0

MISUSE_MESSAGE = "Can't re-insert a dictionary into its pool"

# Outcomes of returning a handle
_IDLE = "idle"
_CLOSE = "close"
_NOT_LENT = "not_lent"

logger = get_logger(__name__)


@dataclass(eq=False)
class DictAndKeyboard:
    """A dictionary paired with an optional keyboard geometry provider."""
    dictionary: Optional[SpellDictionary]
    keyboard: Optional[Keyboard] = None

    @property
    def is_valid(self) -> bool:
        return self.dictionary is not None

    def get_proximity_info(self) -> Any:
        return None if self.keyboard is None else self.keyboard.proximity_info

    def close(self):
        if self.dictionary is not None:
            self.dictionary.close()


# Handed out when no real handle could be borrowed in time
INVALID_HANDLE = DictAndKeyboard(dictionary=None)

DictionaryFactory = Callable[[str], DictAndKeyboard]


class DictionaryPool:
    """
    Blocking pool of DictAndKeyboard handles for one locale.

    A handle is never lent to two borrowers at the same time.
    """

    def __init__(
        self,
        factory: DictionaryFactory,
        locale: str,
        max_size: int = DEFAULT_POOL_SIZE,
        timeout: float = DEFAULT_TIMEOUT_SECONDS
    ):
        """
        Initialize the pool.

        Args:
            factory: Builds a new handle for a locale string
            locale: Locale served by this pool
            max_size: Maximum number of handles ever created
            timeout: Default acquire timeout in seconds
        """
        if max_size < 1:
            raise ValueError(f"Pool size must be at least 1: {max_size}")
        self._factory = factory
        self.locale = locale
        self.max_size = max_size
        self.timeout = timeout

        self._condition = threading.Condition()
        self._idle: Deque[DictAndKeyboard] = deque()
        self._lent: Set[DictAndKeyboard] = set()
        self._size = 0
        self._closed = False

    @property
    def size(self) -> int:
        """Number of handles created so far."""
        return self._size

    @property
    def idle_count(self) -> int:
        return len(self._idle)

    @property
    def lent_count(self) -> int:
        return len(self._lent)

    @property
    def closed(self) -> bool:
        return self._closed

    def acquire(self, timeout: Optional[float] = None) -> DictAndKeyboard:
        """
        Borrow a handle, waiting up to timeout seconds.

        Returns:
            A valid handle, or INVALID_HANDLE on timeout or after close()
        """
        timeout = self.timeout if timeout is None else timeout
        deadline = time.monotonic() + timeout

        with self._condition:
            while True:
                if self._closed:
                    return INVALID_HANDLE
                if self._idle:
                    handle = self._idle.popleft()
                    self._lent.add(handle)
                    return handle
                if self._size < self.max_size:
                    # Reserve the slot, build outside the lock
                    self._size += 1
                    break
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    logger.warning("Timed out waiting for a dictionary",
                                   locale=self.locale, timeout=timeout)
                    return INVALID_HANDLE
                self._condition.wait(remaining)

        try:
            handle = self._factory(self.locale)
        except Exception:
            with self._condition:
                self._size -= 1
                self._condition.notify()
            raise

        with self._condition:
            self._lent.add(handle)
        logger.debug("Created dictionary", locale=self.locale, pool_size=self._size)
        return handle

    def release(self, handle: DictAndKeyboard) -> bool:
        """
        Return a borrowed handle.

        Returns:
            False if the handle was not lent by this pool (or already returned)
        """
        outcome = self._take_back(handle)
        if outcome is _NOT_LENT:
            logger.debug(MISUSE_MESSAGE, locale=self.locale)
            return False

        if outcome is _CLOSE:
            handle.close()
        return True

    def _take_back(self, handle: DictAndKeyboard) -> str:
        with self._condition:
            if handle not in self._lent:
                return _NOT_LENT
            self._lent.remove(handle)
            if self._closed:
                return _CLOSE
            self._idle.append(handle)
            self._condition.notify()
            return _IDLE

    @contextmanager
    def borrow(self, timeout: Optional[float] = None) -> Iterator[DictAndKeyboard]:
        """
        Borrow a handle for the duration of a with-block.

        The handle is released on every exit path. The yielded handle may be
        INVALID_HANDLE; callers must check is_valid.
        """
        handle = self.acquire(timeout)
        try:
            yield handle
        finally:
            if handle.is_valid and not self.release(handle):
                logger.error(MISUSE_MESSAGE, locale=self.locale, error_code=POOL_MISUSE)

    def close(self):
        """Close idle handles now and lent handles when they come back."""
        with self._condition:
            self._closed = True
            idle = list(self._idle)
            self._idle.clear()
            self._condition.notify_all()

        for handle in idle:
            handle.close()

    def get_status(self) -> Dict[str, Any]:
        with self._condition:
            return {
                'locale': self.locale,
                'max_size': self.max_size,
                'size': self._size,
                'idle': len(self._idle),
                'lent': len(self._lent),
                'closed': self._closed,
                'timeout': self.timeout,
            }
