"""
Dictionary Backends
===================
Concrete dictionaries behind the pooled handles.

Backends:
- symspell: SymSpell with the bundled English frequency dictionary
- enchant: PyEnchant, any installed Hunspell/Aspell language

Requires: pip install symspellpy pyenchant
"""

from typing import Optional

from ..base import SpellDictionary
from ..config import DictionaryConfig
from ..config_logging import DictionaryUnavailableError
from ..locales import Locale
from .collection import DictionaryCollection
from .user import UserDictionary

__version__ = "1.0.0"

BACKENDS = ('symspell', 'enchant')


def create_dictionary(
    locale_string: str,
    config: DictionaryConfig,
    user_dictionary: Optional[UserDictionary] = None
) -> SpellDictionary:
    """
    Build the dictionary for one pooled handle.

    Args:
        locale_string: Locale of the session (en_US, de_DE, ...)
        config: Dictionary configuration
        user_dictionary: Shared user words, consulted after the main dictionary

    Returns:
        The main dictionary, joined with the user dictionary when given

    Raises:
        ValueError: Unknown backend name
        DictionaryUnavailableError: The backend library or data is missing
    """
    backend = config.backend.lower()

    if backend == 'symspell':
        from .symspell import SymSpellDictionary
        main = SymSpellDictionary(
            max_edit_distance=config.max_edit_distance,
            prefix_length=config.prefix_length,
            custom_dictionary=config.custom_dictionary,
            blocked_words=config.blocked_words,
        )
    elif backend == 'enchant':
        from .enchant import EnchantDictionary
        main = EnchantDictionary(
            language=str(Locale.from_string(locale_string)),
            personal_word_list=config.custom_dictionary,
            blocked_words=config.blocked_words,
        )
    else:
        raise ValueError(f"Unknown dictionary backend: {config.backend}. Must be one of {BACKENDS}")

    if not main.is_available:
        raise DictionaryUnavailableError(backend, main.error, locale=locale_string)

    if user_dictionary is None:
        return main
    return DictionaryCollection(main, user_dictionary)


def is_available(backend: str) -> bool:
    """Check if a backend library can be imported."""
    try:
        if backend == 'symspell':
            import symspellpy  # noqa: F401
        elif backend == 'enchant':
            import enchant  # noqa: F401
        else:
            return False
    except ImportError:
        return False
    return True


__all__ = [
    'BACKENDS',
    'DictionaryCollection',
    'UserDictionary',
    'create_dictionary',
    'is_available',
]
