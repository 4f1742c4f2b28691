"""
Spell Checker Service
=====================
Owns everything sessions share: one dictionary pool per locale, the user
dictionary, the change notifier and the configuration.
"""

import threading
from functools import partial
from pathlib import Path
from typing import Any, Dict, Optional

from .config import SpellServiceConfig, get_config
from .config_logging import get_logger
from .dictionaries import UserDictionary, create_dictionary
from .gatherer import SuggestionsGatherer
from .notifications import ChangeNotifier
from .pool import DictAndKeyboard, DictionaryFactory, DictionaryPool
from .session import SpellCheckerSession

__version__ = "1.0.0"

logger = get_logger(__name__)


def create_dict_and_keyboard(locale_string: str, config: SpellServiceConfig,
                             user_dictionary: Optional[UserDictionary] = None) -> DictAndKeyboard:
    """Default pool factory: configured backend plus user words, no keyboard."""
    return DictAndKeyboard(create_dictionary(locale_string, config.dictionary, user_dictionary))


class SpellCheckerService:
    """Session-owning service keyed by locale string."""

    def __init__(
        self,
        config: Optional[SpellServiceConfig] = None,
        dictionary_factory: Optional[DictionaryFactory] = None,
        change_notifier: Optional[ChangeNotifier] = None,
        user_dictionary: Optional[UserDictionary] = None
    ):
        """
        Initialize the service.

        Args:
            config: Configuration (defaults to the global one)
            dictionary_factory: Builds a pooled handle for a locale string
            change_notifier: Channel signalling dictionary data changes
            user_dictionary: Shared user words (loaded from config if omitted)
        """
        self.config = config or get_config()
        self.change_notifier = ChangeNotifier() if change_notifier is None else change_notifier

        if user_dictionary is None:
            path = self.config.dictionary.user_dictionary
            user_dictionary = UserDictionary(Path(path) if path else None, self.change_notifier)
        elif user_dictionary.notifier is None:
            user_dictionary.notifier = self.change_notifier
        self.user_dictionary = user_dictionary

        self._dictionary_factory = dictionary_factory or partial(
            create_dict_and_keyboard, config=self.config, user_dictionary=self.user_dictionary)
        self._pools: Dict[str, DictionaryPool] = {}
        self._lock = threading.Lock()

    def get_dictionary_pool(self, locale_string: str) -> DictionaryPool:
        """Get the pool for a locale, creating it on first use."""
        with self._lock:
            pool = self._pools.get(locale_string)
            if pool is None or pool.closed:
                pool = DictionaryPool(
                    self._dictionary_factory,
                    locale_string,
                    max_size=self.config.pool.size,
                    timeout=self.config.pool.timeout_seconds,
                )
                self._pools[locale_string] = pool
                logger.info("Dictionary pool created", locale=locale_string,
                            pool_size=pool.max_size)
            return pool

    def new_suggestions_gatherer(self, text: str, max_length: int) -> SuggestionsGatherer:
        return SuggestionsGatherer(
            text,
            self.config.suggestions.suggestion_threshold,
            self.config.suggestions.recommended_threshold,
            max_length,
        )

    def create_session(self, locale_string: str) -> SpellCheckerSession:
        """Create a session already bound to a locale."""
        session = SpellCheckerSession(self)
        session.on_create(locale_string)
        return session

    def close(self):
        """Close every dictionary pool."""
        with self._lock:
            pools = list(self._pools.values())
            self._pools.clear()
        for pool in pools:
            pool.close()

    def get_status(self) -> Dict[str, Any]:
        with self._lock:
            pools = {locale: pool.get_status() for locale, pool in self._pools.items()}
        return {
            'version': __version__,
            'backend': self.config.dictionary.backend,
            'pools': pools,
            'user_dictionary': self.user_dictionary.get_status(),
            'listeners': len(self.change_notifier),
        }
