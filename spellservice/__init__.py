"""
Spell Service Package
=====================
Version: 1.0.0

Word-level spell checking for interactive text input:
- Checkability filter (URLs, e-mail addresses, symbol soup, periods)
- Pooled dictionaries shared by concurrent requests
- Capitalization-aware dictionary lookup
- Scored, re-capitalized suggestions
- LRU result cache cleared on dictionary changes

Dictionary backends (SymSpell, PyEnchant) are only imported when a pool
builds its first dictionary.
"""

__version__ = "1.0.0"

from .base import (
    PrevWordsInfo,
    RESULT_ATTR_HAS_RECOMMENDED_SUGGESTIONS,
    RESULT_ATTR_IN_THE_DICTIONARY,
    RESULT_ATTR_LOOKS_LIKE_TYPO,
    SpellDictionary,
    SuggestionCandidate,
    SuggestionResult,
)
from .checkability import Checkability, get_checkability
from .config import SpellServiceConfig, get_config
from .notifications import ChangeNotifier
from .pool import INVALID_HANDLE, DictAndKeyboard, DictionaryPool
from .service import SpellCheckerService
from .session import SpellCheckerSession


def get_status():
    """
    Get status of the dictionary backends.

    Returns dict with availability for each backend.
    """
    from . import dictionaries
    return {
        'version': __version__,
        'backends': {name: {'available': dictionaries.is_available(name)}
                     for name in dictionaries.BACKENDS},
    }


__all__ = [
    'ChangeNotifier',
    'Checkability',
    'DictAndKeyboard',
    'DictionaryPool',
    'INVALID_HANDLE',
    'PrevWordsInfo',
    'RESULT_ATTR_HAS_RECOMMENDED_SUGGESTIONS',
    'RESULT_ATTR_IN_THE_DICTIONARY',
    'RESULT_ATTR_LOOKS_LIKE_TYPO',
    'SpellCheckerService',
    'SpellCheckerSession',
    'SpellDictionary',
    'SpellServiceConfig',
    'SuggestionCandidate',
    'SuggestionResult',
    'get_checkability',
    'get_config',
    'get_status',
]
