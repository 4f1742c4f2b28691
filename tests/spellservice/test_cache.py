"""
Tests for the Suggestions Cache
===============================
"""

import threading

import pytest

from spellservice.base import PrevWordsInfo, SuggestionsParams
from spellservice.cache import CHAR_DELIMITER, DEFAULT_CAPACITY, LruCache, SuggestionsCache


class TestLruCache:
    """Tests for LruCache."""

    def test_get_missing(self):
        assert LruCache(2).get("nope") is None

    def test_evicts_least_recently_used(self):
        cache = LruCache(2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.get("a")
        cache.put("c", 3)

        assert "a" in cache
        assert "b" not in cache
        assert "c" in cache
        assert len(cache) == 2

    def test_put_refreshes(self):
        cache = LruCache(2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.put("a", 10)
        cache.put("c", 3)

        assert cache.get("a") == 10
        assert "b" not in cache

    def test_invalidate_all(self):
        cache = LruCache(2)
        cache.put("a", 1)
        cache.invalidate_all()

        assert len(cache) == 0
        assert cache.get("a") is None

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            LruCache(0)


class TestGenerateKey:
    """Tests for SuggestionsCache.generate_key()."""

    def test_without_context(self):
        assert SuggestionsCache.generate_key("hte", None) == "hte"

    def test_with_context(self):
        key = SuggestionsCache.generate_key("hte", PrevWordsInfo(("in", "the")))
        assert key == "hte" + CHAR_DELIMITER + "in the"

    def test_empty_context_collapses(self):
        """An empty previous-words list shares the context-free key."""
        assert SuggestionsCache.generate_key("hte", PrevWordsInfo()) == "hte"

    def test_empty_query(self):
        assert SuggestionsCache.generate_key("", PrevWordsInfo(("in",))) == ""


class TestSuggestionsCache:
    """Tests for SuggestionsCache."""

    def test_put_then_get(self):
        cache = SuggestionsCache()
        cache.put_suggestions_to_cache("hte", None, ["the"], 6)

        assert cache.get_suggestions_from_cache("hte", None) == SuggestionsParams(("the",), 6)

    def test_context_keys_are_separate(self):
        cache = SuggestionsCache()
        cache.put_suggestions_to_cache("hte", PrevWordsInfo(("in",)), ["the"], 2)

        assert cache.get_suggestions_from_cache("hte", None) is None
        assert cache.get_suggestions_from_cache("hte", PrevWordsInfo(("on",))) is None
        assert cache.get_suggestions_from_cache("hte", PrevWordsInfo(("in",))) is not None

    def test_none_suggestions_not_stored(self):
        cache = SuggestionsCache()
        cache.put_suggestions_to_cache("hte", None, None, 2)
        assert len(cache) == 0

    def test_empty_query_not_stored(self):
        cache = SuggestionsCache()
        cache.put_suggestions_to_cache("", None, ["a"], 2)
        assert len(cache) == 0

    def test_stored_suggestions_are_immutable(self):
        """Mutating the caller's list does not change the cached entry."""
        cache = SuggestionsCache()
        suggestions = ["the"]
        cache.put_suggestions_to_cache("hte", None, suggestions, 2)
        suggestions.append("then")

        assert cache.get_suggestions_from_cache("hte", None).suggestions == ("the",)

    def test_default_capacity(self):
        """Inserting 51 keys evicts exactly the least recently used one."""
        cache = SuggestionsCache()
        assert cache.capacity == DEFAULT_CAPACITY == 50

        for i in range(DEFAULT_CAPACITY + 1):
            cache.put_suggestions_to_cache(f"word{i}", None, [f"w{i}"], 0)

        assert len(cache) == DEFAULT_CAPACITY
        assert cache.get_suggestions_from_cache("word0", None) is None
        assert cache.get_suggestions_from_cache("word1", None) is not None
        assert cache.get_suggestions_from_cache(f"word{DEFAULT_CAPACITY}", None) is not None

    def test_clear_cache(self):
        cache = SuggestionsCache()
        cache.put_suggestions_to_cache("hte", None, ["the"], 6)
        cache.clear_cache()

        assert len(cache) == 0
        assert cache.get_suggestions_from_cache("hte", None) is None

    def test_concurrent_access(self):
        """Concurrent writers and readers never exceed capacity or corrupt entries."""
        cache = SuggestionsCache(capacity=10)
        errors = []

        def worker(worker_id):
            try:
                for i in range(200):
                    key = f"w{worker_id}-{i % 15}"
                    cache.put_suggestions_to_cache(key, None, [key], i)
                    params = cache.get_suggestions_from_cache(key, None)
                    if params is not None and params.suggestions != (key,):
                        errors.append(key)
                    if i % 50 == 0:
                        cache.clear_cache()
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert len(cache) <= 10
