"""
Spell Service Base Classes
==========================
Result types and the dictionary interface shared by every spell service
module.

A dictionary is an expensive resource (it is loaded from disk) that only
needs to answer two questions: "is this a valid word" and "what are the
scored corrections for this composed word".
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Tuple, Any, Optional, Sequence
from dataclasses import dataclass

from .composer import ComposedWord

__version__ = "1.0.0"

# Result attribute flags, same values as the platform spell checker API
RESULT_ATTR_IN_THE_DICTIONARY = 0x0001
RESULT_ATTR_LOOKS_LIKE_TYPO = 0x0002
RESULT_ATTR_HAS_RECOMMENDED_SUGGESTIONS = 0x0004


@dataclass(frozen=True)
class PrevWordsInfo:
    """Words typed before the word being checked, most recent last."""
    words: Tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return len(self.words) > 0

    @property
    def last_word(self) -> Optional[str]:
        return self.words[-1] if self.words else None

    def __str__(self) -> str:
        return ' '.join(self.words)


@dataclass(frozen=True)
class SuggestionCandidate:
    """A correction produced by a dictionary. Higher score is better."""
    word: str
    score: float


@dataclass(frozen=True)
class SuggestionResult:
    """
    Outcome of checking a single word.

    Suggestions are ordered best-first.
    """
    suggestions: Tuple[str, ...] = ()
    looks_like_typo: bool = False
    has_recommended_suggestions: bool = False
    is_in_dictionary: bool = False

    @property
    def flags(self) -> int:
        """Bitwise OR of the RESULT_ATTR_* flags."""
        flags = 0
        if self.is_in_dictionary:
            flags |= RESULT_ATTR_IN_THE_DICTIONARY
        if self.looks_like_typo:
            flags |= RESULT_ATTR_LOOKS_LIKE_TYPO
        if self.has_recommended_suggestions:
            flags |= RESULT_ATTR_HAS_RECOMMENDED_SUGGESTIONS
        return flags

    @classmethod
    def from_flags(cls, flags: int, suggestions: Optional[Sequence[str]] = None) -> 'SuggestionResult':
        return cls(
            suggestions=tuple(suggestions or ()),
            looks_like_typo=bool(flags & RESULT_ATTR_LOOKS_LIKE_TYPO),
            has_recommended_suggestions=bool(flags & RESULT_ATTR_HAS_RECOMMENDED_SUGGESTIONS),
            is_in_dictionary=bool(flags & RESULT_ATTR_IN_THE_DICTIONARY),
        )

    @classmethod
    def not_in_dictionary(cls, report_as_typo: bool) -> 'SuggestionResult':
        """Empty result for a word that is not known."""
        return cls(looks_like_typo=report_as_typo)

    @classmethod
    def in_dictionary(cls) -> 'SuggestionResult':
        """Empty result for a known word."""
        return cls(is_in_dictionary=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for API responses."""
        return {
            'suggestions': list(self.suggestions),
            'looks_like_typo': self.looks_like_typo,
            'has_recommended_suggestions': self.has_recommended_suggestions,
            'is_in_dictionary': self.is_in_dictionary,
            'flags': self.flags,
        }


class SpellDictionary(ABC):
    """
    Abstract base class for dictionary backends.

    Backends wrap an external library; construction loads the data and
    records availability instead of raising, like the other integrations.
    """

    INTEGRATION_NAME: str = "Dictionary"
    INTEGRATION_VERSION: str = "1.0.0"

    def __init__(self):
        self._available = False
        self._error: Optional[str] = None

    @property
    def is_available(self) -> bool:
        """Check if the dictionary is loaded and usable."""
        return self._available

    @property
    def error(self) -> Optional[str]:
        """Get initialization error if any."""
        return self._error

    @abstractmethod
    def is_valid_word(self, word: str) -> bool:
        """Check whether word is in the dictionary, exactly as given."""
        pass

    @abstractmethod
    def get_suggestions(
        self,
        composed: ComposedWord,
        prev_words_info: Optional[PrevWordsInfo],
        proximity_info: Any,
        block_offensive_words: bool
    ) -> List[SuggestionCandidate]:
        """
        Produce scored corrections for a composed word.

        Args:
            composed: The word as typed, with optional keyboard coordinates
            prev_words_info: Preceding words, if known
            proximity_info: Opaque keyboard proximity data, or None
            block_offensive_words: Whether to drop offensive candidates

        Returns:
            Candidates in any order
        """
        pass

    @abstractmethod
    def get_status(self) -> Dict[str, Any]:
        """Get detailed status of the dictionary."""
        pass

    def close(self):
        """Release the resources held by the dictionary."""
        self._available = False


@dataclass(frozen=True)
class SuggestionsParams:
    """A cached result: suggestions plus RESULT_ATTR_* flags."""
    suggestions: Tuple[str, ...]
    flags: int

    def to_result(self) -> SuggestionResult:
        return SuggestionResult.from_flags(self.flags, self.suggestions)


@dataclass
class SessionStats:
    """Counters reported by SpellCheckerSession.get_status()."""
    lookups: int = 0
    cache_hits: int = 0
    pool_timeouts: int = 0
    faults: int = 0
