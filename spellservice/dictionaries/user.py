"""
User Dictionary
===============
Words the user added by hand, shared by every pooled dictionary of a service.

This is the "backing data source" whose changes invalidate result caches:
every mutation fires the change notifier.
"""

import threading
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional

from ..base import PrevWordsInfo, SpellDictionary, SuggestionCandidate
from ..composer import ComposedWord
from ..notifications import ChangeNotifier


class UserDictionary(SpellDictionary):
    """Thread-safe user word list. Membership only, never suggests."""

    INTEGRATION_NAME = "User Dictionary"
    INTEGRATION_VERSION = "1.0.0"

    def __init__(self, path: Optional[Path] = None, notifier: Optional[ChangeNotifier] = None):
        """
        Initialize the user dictionary.

        Args:
            path: Word list file (one word per line, # for comments)
            notifier: Notified after every change
        """
        super().__init__()
        self.path = Path(path) if path else None
        self.notifier = notifier
        self._words: FrozenSet[str] = frozenset()
        self._lock = threading.Lock()

        if self.path and self.path.exists():
            self._words = frozenset(self._read_words(self.path))
        self._available = True

    @staticmethod
    def _read_words(path: Path) -> List[str]:
        with open(path, 'r', encoding='utf-8') as f:
            return [line.strip() for line in f
                    if line.strip() and not line.startswith('#')]

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    def add_word(self, word: str) -> bool:
        """Add a word. Returns False if it was already present."""
        word = word.strip()
        if not word:
            raise ValueError("Cannot add an empty word")
        with self._lock:
            if word in self._words:
                return False
            self._words = self._words | {word}
        self._notify()
        return True

    def remove_word(self, word: str) -> bool:
        """Remove a word. Returns False if it was not present."""
        with self._lock:
            if word not in self._words:
                return False
            self._words = self._words - {word}
        self._notify()
        return True

    def clear(self):
        with self._lock:
            self._words = frozenset()
        self._notify()

    def reload(self):
        """Re-read the word list file after it was changed externally."""
        if not self.path:
            return
        words = frozenset(self._read_words(self.path)) if self.path.exists() else frozenset()
        with self._lock:
            self._words = words
        self._notify()

    def save(self, path: Optional[Path] = None):
        path = Path(path) if path else self.path
        if path is None:
            raise ValueError("No path to save the user dictionary to")
        with open(path, 'w', encoding='utf-8') as f:
            for word in sorted(self._words):
                f.write(word + '\n')

    def _notify(self):
        if self.notifier is not None:
            self.notifier.notify_change()

    def get_status(self) -> Dict[str, Any]:
        return {
            'available': self.is_available,
            'path': str(self.path) if self.path else None,
            'word_count': len(self._words),
        }

    def is_valid_word(self, word: str) -> bool:
        return word in self._words

    def get_suggestions(
        self,
        composed: ComposedWord,
        prev_words_info: Optional[PrevWordsInfo],
        proximity_info: Any,
        block_offensive_words: bool
    ) -> List[SuggestionCandidate]:
        return []

    def close(self):
        # Owned by the service, outlives the pooled dictionaries using it
        pass
