"""
Shared fixtures for the spell service tests: an in-memory dictionary and a
service wired to it.
"""

import threading
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import pytest

from spellservice.base import SpellDictionary, SuggestionCandidate
from spellservice.config import SpellServiceConfig
from spellservice.dictionaries import UserDictionary
from spellservice.notifications import ChangeNotifier
from spellservice.pool import DictAndKeyboard
from spellservice.service import SpellCheckerService


class FakeDictionary(SpellDictionary):
    """In-memory dictionary with canned suggestions."""

    INTEGRATION_NAME = "Fake"

    def __init__(
        self,
        words: Iterable[str] = (),
        suggestions: Optional[Dict[str, Sequence[Tuple[str, float]]]] = None,
        fail_with: Optional[Exception] = None,
        fail_on_is_valid_word: Optional[Exception] = None
    ):
        super().__init__()
        self.words = set(words)
        self.suggestions = dict(suggestions or {})
        self.fail_with = fail_with
        self.fail_on_is_valid_word = fail_on_is_valid_word
        self.suggestion_calls: List[Any] = []
        self.closed = False
        self._lock = threading.Lock()
        self._available = True

    def is_valid_word(self, word: str) -> bool:
        if self.fail_on_is_valid_word is not None:
            raise self.fail_on_is_valid_word
        return word in self.words

    def get_suggestions(self, composed, prev_words_info, proximity_info, block_offensive_words):
        with self._lock:
            self.suggestion_calls.append((composed, prev_words_info, proximity_info, block_offensive_words))
        if self.fail_with is not None:
            raise self.fail_with
        return [SuggestionCandidate(w, s) for w, s in self.suggestions.get(composed.text, ())]

    def get_status(self) -> Dict[str, Any]:
        return {'available': True, 'word_count': len(self.words)}

    def close(self):
        super().close()
        self.closed = True


class CountingFactory:
    """Dictionary factory that records every handle it builds."""

    def __init__(self, dictionary_builder):
        self._builder = dictionary_builder
        self.handles: List[DictAndKeyboard] = []
        self._lock = threading.Lock()

    def __call__(self, locale: str) -> DictAndKeyboard:
        handle = DictAndKeyboard(self._builder())
        with self._lock:
            self.handles.append(handle)
        return handle


@pytest.fixture
def config() -> SpellServiceConfig:
    """Configuration with short timeouts for tests."""
    config = SpellServiceConfig()
    config.pool.size = 2
    config.pool.timeout_seconds = 0.1
    config.suggestions.suggestion_threshold = 0.0
    config.suggestions.recommended_threshold = 50.0
    return config


@pytest.fixture
def fake_dictionary() -> FakeDictionary:
    return FakeDictionary(
        words={'the', 'foo', 'bar', 'Germans', 'hello', "don't", 'café'},
        suggestions={
            'hte': [('the', 100)],
            'Hte': [('the', 100)],
            'helo': [('hello', 80), ('help', 40), ('hell', 60)],
            'HELO': [('hello', 80)],
            'dont': [("don't", 30)],
        },
    )


@pytest.fixture
def service(config, fake_dictionary) -> SpellCheckerService:
    """Service whose pools all share one fake dictionary."""
    factory = CountingFactory(lambda: fake_dictionary)
    service = SpellCheckerService(
        config=config,
        dictionary_factory=factory,
        change_notifier=ChangeNotifier(),
        user_dictionary=UserDictionary(),
    )
    service.factory = factory
    yield service
    service.close()


@pytest.fixture
def session(service):
    session = service.create_session('en_US')
    yield session
    session.on_close()
