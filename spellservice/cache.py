"""
Suggestions Cache
=================
A bounded, thread-safe LRU cache of spell check results.

Staleness is handled bluntly: whenever the backing dictionary data changes,
the whole cache is cleared.
"""

import threading
from collections import OrderedDict
from typing import Generic, Hashable, Optional, Sequence, TypeVar

from .base import PrevWordsInfo, SuggestionsParams

DEFAULT_CAPACITY = 50

# Separates the query from the previous words in cache keys
CHAR_DELIMITER = '\uFFFC'

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')


class LruCache(Generic[K, V]):
    """Least-recently-used cache; both get() and put() refresh an entry."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"Cache capacity must be at least 1: {capacity}")
        self.capacity = capacity
        self._entries: 'OrderedDict[K, V]' = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: K) -> Optional[V]:
        with self._lock:
            try:
                self._entries.move_to_end(key)
            except KeyError:
                return None
            return self._entries[key]

    def put(self, key: K, value: V):
        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key)
            while len(self._entries) > self.capacity:
                self._entries.popitem(last=False)

    def invalidate_all(self):
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        # Membership test does not count as an access
        with self._lock:
            return key in self._entries


class SuggestionsCache:
    """Spell check results keyed by query text and, when known, the previous words."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self._cache: LruCache[str, SuggestionsParams] = LruCache(capacity)

    @property
    def capacity(self) -> int:
        return self._cache.capacity

    @staticmethod
    def generate_key(query: str, prev_words_info: Optional[PrevWordsInfo]) -> str:
        # Without usable context the unigram key is shared with context-free queries
        if not query or prev_words_info is None or not prev_words_info.is_valid:
            return query
        return query + CHAR_DELIMITER + str(prev_words_info)

    def get_suggestions_from_cache(self, query: str,
                                   prev_words_info: Optional[PrevWordsInfo]) -> Optional[SuggestionsParams]:
        return self._cache.get(self.generate_key(query, prev_words_info))

    def put_suggestions_to_cache(self, query: str, prev_words_info: Optional[PrevWordsInfo],
                                 suggestions: Optional[Sequence[str]], flags: int):
        if suggestions is None or not query:
            return
        self._cache.put(self.generate_key(query, prev_words_info),
                        SuggestionsParams(tuple(suggestions), flags))

    def clear_cache(self):
        self._cache.invalidate_all()

    def __len__(self) -> int:
        return len(self._cache)
