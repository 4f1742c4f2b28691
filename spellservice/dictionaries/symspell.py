"""
SymSpell Dictionary
===================
Dictionary backend built on symspellpy.

Features:
- Bundled English frequency dictionary (82K words) and bigram dictionary
- Custom word/frequency files
- Bigram-aware scoring when the previous word is known
- Optional blocked (offensive) word list

Requires: pip install symspellpy
"""

from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..base import PrevWordsInfo, SpellDictionary, SuggestionCandidate
from ..composer import ComposedWord


class SymSpellDictionary(SpellDictionary):
    """
    SymSpell-backed dictionary.

    Scores are 1 - distance / (max_edit_distance + 1), so a one-edit
    correction scores higher than a two-edit one; candidates at the same
    distance keep SymSpell's frequency order.
    """

    INTEGRATION_NAME = "SymSpell"
    INTEGRATION_VERSION = "1.0.0"

    # Default dictionary filenames (bundled with symspellpy)
    FREQUENCY_DICT = "frequency_dictionary_en_82_765.txt"
    BIGRAM_DICT = "frequency_bigramdictionary_en_243_342.txt"

    # Added to the score when "<previous word> <candidate>" is a known bigram
    BIGRAM_BONUS = 0.05

    def __init__(
        self,
        max_edit_distance: int = 2,
        prefix_length: int = 7,
        custom_dictionary: Optional[Path] = None,
        words: Optional[Mapping[str, int]] = None,
        blocked_words: Optional[Iterable[str]] = None,
        load_bundled: Optional[bool] = None
    ):
        """
        Initialize and load the dictionary.

        Args:
            max_edit_distance: Maximum edit distance for corrections (1-3)
            prefix_length: Length of prefix to use for lookup
            custom_dictionary: Path to a "word [count]" file
            words: In-memory word -> frequency entries
            blocked_words: Words never suggested when blocking offensive words
            load_bundled: Load the bundled English dictionaries
                (default: only when no in-memory words are given)
        """
        super().__init__()
        self.max_edit_distance = max_edit_distance
        self.prefix_length = prefix_length
        self.custom_dictionary = custom_dictionary
        self.load_bundled = words is None if load_bundled is None else load_bundled
        self._blocked_words = frozenset(w.lower() for w in (blocked_words or ()))

        self._sym_spell = None
        self._load_dictionaries(words or {})

    def _load_dictionaries(self, words: Mapping[str, int]):
        """Load frequency dictionaries."""
        try:
            from symspellpy import SymSpell, Verbosity
            self._Verbosity = Verbosity

            self._sym_spell = SymSpell(
                max_dictionary_edit_distance=self.max_edit_distance,
                prefix_length=self.prefix_length
            )

            if self.load_bundled:
                package = files("symspellpy")
                self._sym_spell.load_dictionary(
                    str(package / self.FREQUENCY_DICT),
                    term_index=0,
                    count_index=1
                )
                self._sym_spell.load_bigram_dictionary(
                    str(package / self.BIGRAM_DICT),
                    term_index=0,
                    count_index=2
                )

            for word, count in words.items():
                self._sym_spell.create_dictionary_entry(word, count)

            if self.custom_dictionary:
                self._load_custom_dictionary(Path(self.custom_dictionary))

            self._available = True

        except ImportError as e:
            self._error = f"symspellpy not installed: {e}"
            self._available = False

        except (OSError, ValueError) as e:
            self._error = f"Failed to load dictionaries: {e}"
            self._available = False

    def _load_custom_dictionary(self, path: Path):
        """Load "word [count]" lines; words without a count get a high frequency."""
        with open(path, 'r', encoding='utf-8') as f:
            for line in f:
                parts = line.split()
                if not parts or parts[0].startswith('#'):
                    continue
                count = int(parts[1]) if len(parts) > 1 else 1000000
                self._sym_spell.create_dictionary_entry(parts[0], count)

    def get_status(self) -> Dict[str, Any]:
        """Get detailed status of the SymSpell dictionary."""
        status = {
            'available': self.is_available,
            'error': self._error,
            'max_edit_distance': self.max_edit_distance,
            'blocked_words_count': len(self._blocked_words),
        }

        if self.is_available and self._sym_spell:
            status['dictionary_size'] = len(self._sym_spell.words)
            status['bigram_count'] = len(self._sym_spell.bigrams)

        return status

    def is_valid_word(self, word: str) -> bool:
        if not self.is_available or not word:
            return False
        return word in self._sym_spell.words

    def get_suggestions(
        self,
        composed: ComposedWord,
        prev_words_info: Optional[PrevWordsInfo],
        proximity_info: Any,
        block_offensive_words: bool
    ) -> List[SuggestionCandidate]:
        if not self.is_available or not composed.text:
            return []

        # The frequency dictionary is lower case; the gatherer restores casing
        query = composed.text.lower()
        items = self._sym_spell.lookup(
            query,
            self._Verbosity.ALL,
            max_edit_distance=self.max_edit_distance
        )

        previous = None
        if prev_words_info is not None and prev_words_info.is_valid:
            previous = prev_words_info.last_word.lower()

        candidates = []
        for item in items:
            if item.distance == 0:
                continue
            if block_offensive_words and item.term in self._blocked_words:
                continue

            score = 1.0 - item.distance / (self.max_edit_distance + 1)
            if previous and f"{previous} {item.term}" in self._sym_spell.bigrams:
                score += self.BIGRAM_BONUS
            candidates.append(SuggestionCandidate(item.term, score))

        return candidates

    def close(self):
        super().close()
        self._sym_spell = None
