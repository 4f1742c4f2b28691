"""
Spell Checker Session
=====================
Word-level spell checking for one locale.

Pipeline for a single word:
1. Result cache lookup (no pool contact on a hit)
2. Checkability filter
3. Uncheckable words: one pooled dictionary answers "valid or not"; words
   containing periods are checked segment by segment. Never cached.
4. Checkable words: one pooled dictionary produces suggestions and the
   capitalization-aware membership check; the result is cached.

get_suggestions() is reentrant and never raises: every failure degrades to
the empty "not in dictionary, not a typo" result.
"""

import threading
from typing import Any, Dict, List, Optional

from .base import (
    PrevWordsInfo,
    RESULT_ATTR_HAS_RECOMMENDED_SUGGESTIONS,
    RESULT_ATTR_IN_THE_DICTIONARY,
    RESULT_ATTR_LOOKS_LIKE_TYPO,
    SessionStats,
    SuggestionResult,
)
from .cache import SuggestionsCache
from .capitalization import get_capitalization_type, is_in_dict_for_any_capitalization
from .checkability import Checkability, get_checkability
from .composer import compose_word
from .config_logging import (
    UNEXPECTED_FAULT,
    PoolExhaustedError,
    SpellServiceError,
    get_logger,
    request_scope,
)
from .locales import Locale
from .pool import DictAndKeyboard, DictionaryPool
from .scripts import Script, get_script_from_locale

__version__ = "1.0.0"

APOSTROPHE = '\u2019'
SINGLE_QUOTE = "'"

logger = get_logger(__name__)


def split_on_periods(text: str) -> List[str]:
    """Split on '.', dropping trailing empty segments ("foo.bar." -> [foo, bar])."""
    segments = text.split('.')
    while segments and not segments[-1]:
        segments.pop()
    return segments


class SpellCheckerSession:
    """One spell checking session, bound to a locale by on_create()."""

    def __init__(self, service):
        """
        Initialize the session and subscribe to dictionary change notifications.

        Args:
            service: The owning SpellCheckerService
        """
        self._service = service
        config = service.config
        self._checkability_config = config.checkability
        self._block_offensive_words = config.suggestions.block_offensive_words
        self.suggestions_cache = SuggestionsCache(config.cache.capacity)

        self._pool: Optional[DictionaryPool] = None
        self._locale_string: str = ""
        self._locale = Locale("")
        self._script = Script.LATIN

        self._stats = SessionStats()
        self._stats_lock = threading.Lock()

        service.change_notifier.register(self.suggestions_cache.clear_cache)

    def on_create(self, locale_string: str):
        """Bind the session to a locale."""
        self._locale_string = locale_string
        self._pool = self._service.get_dictionary_pool(locale_string)
        self._locale = Locale.from_string(locale_string)
        self._script = get_script_from_locale(self._locale)
        logger.debug("Session created", locale=locale_string, script=self._script.value)

    def on_close(self):
        """Unsubscribe from change notifications."""
        self._service.change_notifier.unregister(self.suggestions_cache.clear_cache)

    def __enter__(self) -> 'SpellCheckerSession':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.on_close()

    @property
    def locale(self) -> Locale:
        return self._locale

    @property
    def script(self) -> Script:
        return self._script

    def get_suggestions(self, text: str, suggestions_limit: int,
                        prev_words_info: Optional[PrevWordsInfo] = None) -> SuggestionResult:
        """
        Check one word and suggest corrections.

        Args:
            text: The word as typed
            suggestions_limit: Maximum number of suggestions to return
            prev_words_info: Words typed before this one, if known

        Returns:
            A SuggestionResult; never raises
        """
        with request_scope():
            try:
                return self._get_suggestions_internal(text, suggestions_limit, prev_words_info)
            except PoolExhaustedError as e:
                self._count('pool_timeouts')
                logger.warning(e.message, error_code=e.code, locale=self._locale_string)
            except SpellServiceError as e:
                self._count('faults')
                logger.error(e.message, error_code=e.code, locale=self._locale_string)
            except Exception as e:
                # A bug in the spell checker must not take the caller down
                self._count('faults')
                logger.exception(f"Exception while spell checking: {e}",
                                 error_code=UNEXPECTED_FAULT, locale=self._locale_string)
        return SuggestionResult.not_in_dictionary(report_as_typo=False)

    def _get_suggestions_internal(self, in_text: str, suggestions_limit: int,
                                  prev_words_info: Optional[PrevWordsInfo]) -> SuggestionResult:
        self._count('lookups')
        text = in_text.replace(APOSTROPHE, SINGLE_QUOTE)

        cached = self.suggestions_cache.get_suggestions_from_cache(text, prev_words_info)
        if cached is not None:
            self._count('cache_hits')
            logger.debug("Cache hit", query=text, flags=cached.flags)
            return cached.to_result()

        # Classified as typed: a leading typographic apostrophe is not a letter
        checkability = get_checkability(in_text, self._script,
                                        self._checkability_config.min_letter_ratio)
        if checkability is not Checkability.CHECKABLE:
            logger.debug("Word not checkable", query=in_text, checkability=checkability.name)
            return self._check_uncheckable(in_text, checkability, suggestions_limit)

        gatherer = self._service.new_suggestions_gatherer(text, suggestions_limit)
        capitalization_type = get_capitalization_type(text)

        with self._pool.borrow() as dict_info:
            self._require_valid(dict_info)
            dictionary = dict_info.dictionary
            composed = compose_word(text, dict_info.keyboard)
            suggestions = dictionary.get_suggestions(
                composed, prev_words_info, dict_info.get_proximity_info(),
                self._block_offensive_words)
            for suggestion in suggestions or ():
                gatherer.add_word(suggestion.word, suggestion.score)
            is_in_dict = is_in_dict_for_any_capitalization(
                dictionary, text, capitalization_type, self._locale)

        result = gatherer.get_results(capitalization_type, self._locale)
        logger.debug("Spell checking results", query=text, limit=suggestions_limit,
                     is_in_dict=is_in_dict,
                     has_recommended=result.has_recommended_suggestions,
                     suggestions=list(result.suggestions or ()))

        flags = RESULT_ATTR_IN_THE_DICTIONARY if is_in_dict else RESULT_ATTR_LOOKS_LIKE_TYPO
        if result.has_recommended_suggestions:
            flags |= RESULT_ATTR_HAS_RECOMMENDED_SUGGESTIONS

        self.suggestions_cache.put_suggestions_to_cache(
            text, prev_words_info, result.suggestions, flags)
        return SuggestionResult.from_flags(flags, result.suggestions)

    def _check_uncheckable(self, text: str, checkability: Checkability,
                           suggestions_limit: int) -> SuggestionResult:
        contains_period = checkability is Checkability.CONTAINS_PERIOD

        with self._pool.borrow() as dict_info:
            self._require_valid(dict_info)
            dictionary = dict_info.dictionary

            if contains_period:
                segments = split_on_periods(text)
                if all(dictionary.is_valid_word(word) for word in segments):
                    rewrites = [' '.join(segments), '. '.join(segments)][:max(0, suggestions_limit)]
                    flags = RESULT_ATTR_LOOKS_LIKE_TYPO
                    if rewrites:
                        flags |= RESULT_ATTR_HAS_RECOMMENDED_SUGGESTIONS
                    return SuggestionResult.from_flags(flags, rewrites)

            if dictionary.is_valid_word(text):
                return SuggestionResult.in_dictionary()
            return SuggestionResult.not_in_dictionary(report_as_typo=contains_period)

    def _require_valid(self, dict_info: DictAndKeyboard):
        if not dict_info.is_valid:
            raise PoolExhaustedError(self._locale_string, self._pool.timeout)

    def _count(self, counter: str):
        with self._stats_lock:
            setattr(self._stats, counter, getattr(self._stats, counter) + 1)

    def get_status(self) -> Dict[str, Any]:
        """Get session counters, cache and pool state."""
        with self._stats_lock:
            stats = {
                'lookups': self._stats.lookups,
                'cache_hits': self._stats.cache_hits,
                'pool_timeouts': self._stats.pool_timeouts,
                'faults': self._stats.faults,
            }
        return {
            'locale': self._locale_string,
            'script': self._script.value,
            'cache_size': len(self.suggestions_cache),
            'cache_capacity': self.suggestions_cache.capacity,
            'pool': self._pool.get_status() if self._pool else None,
            **stats,
        }
