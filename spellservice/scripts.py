"""
Script Utilities
================
Decides which code points count as letters for a given writing script.

The checkability filter only counts letters of the locale's own script, so a
Latin spell checker quickly rules out words typed in another alphabet.
"""

from enum import Enum

from .locales import Locale


class Script(Enum):
    LATIN = "latin"
    CYRILLIC = "cyrillic"
    GREEK = "greek"
    UNKNOWN = "unknown"  # Any letter counts


_CYRILLIC_LANGUAGES = frozenset(('ru', 'uk', 'bg', 'be', 'mk', 'sr', 'kk', 'ky', 'mn', 'tg'))
_GREEK_LANGUAGES = frozenset(('el',))
# Languages we know are not written in one of the modelled scripts
_OTHER_SCRIPT_LANGUAGES = frozenset(('ar', 'fa', 'he', 'hi', 'hy', 'ja', 'ka', 'ko', 'th', 'zh'))


def get_script_from_locale(locale: Locale) -> Script:
    """Map a locale to the script its spell checker recognizes."""
    language = locale.language
    if language in _CYRILLIC_LANGUAGES:
        return Script.CYRILLIC
    if language in _GREEK_LANGUAGES:
        return Script.GREEK
    if language in _OTHER_SCRIPT_LANGUAGES:
        return Script.UNKNOWN
    return Script.LATIN


def is_letter_part_of_script(code_point: int, script: Script) -> bool:
    """
    Check whether a code point is a letter of the given script.

    Args:
        code_point: Unicode code point
        script: Script to test against

    Returns:
        True if the code point is a letter inside the script's blocks
    """
    if not chr(code_point).isalpha():
        return False

    if script is Script.LATIN:
        # Basic Latin through IPA Extensions, and Latin Extended Additional
        return code_point <= 0x2AF or 0x1E00 <= code_point <= 0x1EFF
    if script is Script.CYRILLIC:
        return (0x400 <= code_point <= 0x52F
                or 0x2DE0 <= code_point <= 0x2DFF
                or 0xA640 <= code_point <= 0xA69F
                or code_point in (0x1D2B, 0x1D78))
    if script is Script.GREEK:
        return 0x370 <= code_point <= 0x3FF or 0x1F00 <= code_point <= 0x1FFF
    return True
