"""
Checkability Filter
===================
Decides whether a word is worth spending a pooled dictionary on.

URLs, e-mail addresses, numbers and symbol soup can never yield a useful
correction, so they are filtered out before any dictionary lookup. Text
containing a period is diverted to a per-segment validity check because the
suggestion lookup returns degenerate results for period-joined fragments.
"""

from enum import Enum

from .scripts import Script, is_letter_part_of_script

DEFAULT_MIN_LETTER_RATIO = 0.75

_APOSTROPHE = ord("'")
_COMMERCIAL_AT = ord('@')
_SLASH = ord('/')
_PERIOD = ord('.')


class Checkability(Enum):
    CHECKABLE = 0
    TOO_MANY_NON_LETTERS = 1
    CONTAINS_PERIOD = 2
    EMAIL_OR_URL = 3
    FIRST_LETTER_UNCHECKABLE = 4
    TOO_SHORT = 5


def get_checkability(text: str, script: Script,
                     min_letter_ratio: float = DEFAULT_MIN_LETTER_RATIO) -> Checkability:
    """
    Classify a word for spell checking.

    Args:
        text: The raw word
        script: The script this spell checker recognizes
        min_letter_ratio: Minimum share of letters for a checkable word

    Returns:
        The first matching Checkability verdict
    """
    if not text or len(text) <= 1:
        return Checkability.TOO_SHORT

    # Words must start with a letter or an apostrophe
    first = ord(text[0])
    if not is_letter_part_of_script(first, script) and first != _APOSTROPHE:
        return Checkability.FIRST_LETTER_UNCHECKABLE

    letter_count = 0
    contains_period = False
    for char in text:
        code_point = ord(char)
        # '@' is probably an e-mail address, '/' a URI or an ad-hoc word combination
        if code_point == _COMMERCIAL_AT or code_point == _SLASH:
            return Checkability.EMAIL_OR_URL
        if code_point == _PERIOD:
            # Keep scanning: "www.example.com/x" is still a URL
            contains_period = True
        elif is_letter_part_of_script(code_point, script):
            letter_count += 1

    if contains_period:
        return Checkability.CONTAINS_PERIOD
    if letter_count < len(text) * min_letter_ratio:
        return Checkability.TOO_MANY_NON_LETTERS
    return Checkability.CHECKABLE
