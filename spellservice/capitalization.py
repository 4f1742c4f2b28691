"""
Capitalization Utilities
========================
Classifies the casing of a word, re-applies casing to suggestions, and looks
words up in a dictionary under every casing variant that is linguistically
justified for the typed form.
"""

from enum import Enum

from .base import SpellDictionary
from .locales import Locale, to_lower, to_upper


class CapitalizationType(Enum):
    NONE = 0    # "text", or no letters at all
    FIRST = 1   # "Text"
    ALL = 2     # "TEXT"
    MIXED = 3   # "iPhone", "McDonald"


def get_capitalization_type(text: str) -> CapitalizationType:
    """Classify the casing pattern of the letters in text."""
    letters = [c for c in text if c.isalpha()]
    if not letters:
        return CapitalizationType.NONE

    caps_count = sum(1 for c in letters if c.isupper())
    if caps_count == 0:
        return CapitalizationType.NONE
    if caps_count == 1 and letters[0].isupper():
        return CapitalizationType.FIRST
    if caps_count == len(letters):
        return CapitalizationType.ALL
    return CapitalizationType.MIXED


def capitalize_first_code_point(text: str, locale: Locale) -> str:
    """Upper-case the first code point, leave the rest untouched."""
    if not text:
        return text
    return to_upper(text[0], locale) + text[1:]


def capitalize_first_and_downcase_rest(text: str, locale: Locale) -> str:
    """Turn "GERMANS" or "germans" into "Germans"."""
    if not text:
        return text
    return to_upper(text[0], locale) + to_lower(text[1:], locale)


def is_in_dict_for_any_capitalization(dictionary: SpellDictionary, text: str,
                                      capitalization_type: CapitalizationType,
                                      locale: Locale) -> bool:
    """
    Test the valid capitalizations of a word.

    "text" is only tested as is. "Text" is tested as is and as "text".
    "TEXT" is tested as is, as "text" and as "Text", since an all-caps word
    may exist in the dictionary only in capitalized form ("GERMANS" is only
    there as "Germans").

    Args:
        dictionary: Dictionary to query
        text: The typed word
        capitalization_type: Casing of the typed word
        locale: Locale used for case mapping

    Returns:
        True if any justified casing variant is a valid word
    """
    if dictionary.is_valid_word(text):
        return True
    if capitalization_type is CapitalizationType.NONE:
        return False

    lower_case_text = to_lower(text, locale)
    if dictionary.is_valid_word(lower_case_text):
        return True
    if capitalization_type is not CapitalizationType.ALL:
        return False

    return dictionary.is_valid_word(capitalize_first_and_downcase_rest(lower_case_text, locale))
