"""
Suggestion Gatherer
===================
Collects scored candidates from a dictionary lookup and keeps the best ones.

The gatherer knows nothing about dictionaries: it is fed (word, score) pairs
and, once the lookup is over, returns the surviving words re-cased to match
what the user typed.
"""

import bisect
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .capitalization import CapitalizationType, capitalize_first_code_point
from .locales import Locale, to_upper


@dataclass(frozen=True)
class GatheredSuggestions:
    """suggestions is None when no candidate was kept."""
    suggestions: Optional[Tuple[str, ...]]
    has_recommended_suggestions: bool


class SuggestionsGatherer:
    """Keeps the top max_length candidates by score, best first."""

    def __init__(self, original_text: str, suggestion_threshold: float,
                 recommended_threshold: float, max_length: int):
        self.original_text = original_text
        self.suggestion_threshold = suggestion_threshold
        self.recommended_threshold = recommended_threshold
        self.max_length = max(0, max_length)
        # (-score, arrival, word): sorts best-first, equal scores by arrival
        self._entries: List[Tuple[float, int, str]] = []
        self._arrivals = 0

    def add_word(self, word: str, score: float) -> bool:
        """
        Offer a candidate.

        Returns:
            True if the candidate is currently among the kept ones
        """
        if score < self.suggestion_threshold:
            return False

        entry = (-score, self._arrivals, word)
        self._arrivals += 1
        insert_index = bisect.bisect(self._entries, entry)
        if insert_index >= self.max_length:
            # Too weak for the suggestion limit
            return False

        self._entries.insert(insert_index, entry)
        if len(self._entries) > self.max_length:
            self._entries.pop()
        return True

    def get_results(self, capitalization_type: CapitalizationType,
                    locale: Locale) -> GatheredSuggestions:
        """
        Finish gathering.

        Duplicates are removed (first occurrence wins) before the casing of
        the typed word is re-applied, and again afterwards: "us" and "US"
        both become "US" for an all-caps word.
        """
        if not self._entries:
            return GatheredSuggestions(None, False)

        suggestions = list(dict.fromkeys(word for _, _, word in self._entries))
        if capitalization_type is CapitalizationType.ALL:
            suggestions = [to_upper(s, locale) for s in suggestions]
        elif capitalization_type is CapitalizationType.FIRST:
            suggestions = [capitalize_first_code_point(s, locale) for s in suggestions]
        suggestions = list(dict.fromkeys(suggestions))

        best_score = -self._entries[0][0]
        return GatheredSuggestions(
            tuple(suggestions),
            best_score > self.recommended_threshold
        )
