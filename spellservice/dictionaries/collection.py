"""
A dictionary made of several dictionaries (main dictionary plus user words).
"""

from typing import Any, Dict, List, Optional

from ..base import PrevWordsInfo, SpellDictionary, SuggestionCandidate
from ..composer import ComposedWord


class DictionaryCollection(SpellDictionary):
    """A word is valid if any member knows it; suggestions come from all members."""

    INTEGRATION_NAME = "Dictionary Collection"

    def __init__(self, *dictionaries: SpellDictionary):
        super().__init__()
        self.dictionaries = list(dictionaries)
        self._available = any(d.is_available for d in self.dictionaries)

    def is_valid_word(self, word: str) -> bool:
        return any(d.is_valid_word(word) for d in self.dictionaries)

    def get_suggestions(
        self,
        composed: ComposedWord,
        prev_words_info: Optional[PrevWordsInfo],
        proximity_info: Any,
        block_offensive_words: bool
    ) -> List[SuggestionCandidate]:
        candidates = []
        for dictionary in self.dictionaries:
            candidates.extend(dictionary.get_suggestions(
                composed, prev_words_info, proximity_info, block_offensive_words))
        return candidates

    def get_status(self) -> Dict[str, Any]:
        return {
            'available': self.is_available,
            'members': [d.get_status() for d in self.dictionaries],
        }

    def close(self):
        super().close()
        for dictionary in self.dictionaries:
            dictionary.close()
