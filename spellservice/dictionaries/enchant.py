"""
Enchant Dictionary
==================
Dictionary backend built on PyEnchant, for locales SymSpell has no bundled
data for (any language with an installed Hunspell/Aspell dictionary).

Requires: pip install pyenchant
Note: macOS may need: brew install enchant
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ..base import PrevWordsInfo, SpellDictionary, SuggestionCandidate
from ..composer import ComposedWord


class EnchantDictionary(SpellDictionary):
    """
    PyEnchant-backed dictionary.

    Enchant ranks suggestions without scores, so the score is derived from
    the rank: 1.0 for the first suggestion, 0.5 for the second, and so on.
    """

    INTEGRATION_NAME = "PyEnchant"
    INTEGRATION_VERSION = "1.0.0"

    def __init__(
        self,
        language: str = 'en_US',
        personal_word_list: Optional[Path] = None,
        blocked_words: Optional[Iterable[str]] = None
    ):
        """
        Initialize the Enchant dictionary.

        Args:
            language: Enchant language tag (en_US, de_DE, ...)
            personal_word_list: Path to a personal word list file
            blocked_words: Words never suggested when blocking offensive words
        """
        super().__init__()
        self.language = language
        self.personal_word_list = personal_word_list
        self._blocked_words = frozenset(w.lower() for w in (blocked_words or ()))

        self._dict = None
        self._initialize()

    def _initialize(self):
        """Initialize PyEnchant and load the dictionary."""
        try:
            import enchant

            if self.personal_word_list and Path(self.personal_word_list).exists():
                self._dict = enchant.DictWithPWL(self.language, str(self.personal_word_list))
            else:
                self._dict = enchant.Dict(self.language)

            self._available = True

        except ImportError as e:
            self._error = f"pyenchant not installed: {e}"
            self._available = False

        except Exception as e:
            # DictNotFoundError and friends
            self._error = f"Failed to initialize: {e}"
            self._available = False

    def get_status(self) -> Dict[str, Any]:
        """Get status of the Enchant dictionary."""
        status = {
            'available': self.is_available,
            'error': self._error,
            'language': self.language,
            'personal_word_list': str(self.personal_word_list) if self.personal_word_list else None,
        }

        if self.is_available and self._dict is not None:
            status['provider'] = self._dict.provider.name

        return status

    def is_valid_word(self, word: str) -> bool:
        if not self.is_available or not word:
            return False
        return self._dict.check(word)

    def get_suggestions(
        self,
        composed: ComposedWord,
        prev_words_info: Optional[PrevWordsInfo],
        proximity_info: Any,
        block_offensive_words: bool
    ) -> List[SuggestionCandidate]:
        if not self.is_available or not composed.text:
            return []

        candidates = []
        rank = 0
        for word in self._dict.suggest(composed.text):
            if word == composed.text:
                continue
            if block_offensive_words and word.lower() in self._blocked_words:
                continue
            candidates.append(SuggestionCandidate(word, 1.0 / (1 + rank)))
            rank += 1

        return candidates

    def close(self):
        super().close()
        self._dict = None
