"""
Tests for the Checkability Filter
=================================
Tests for script membership, locale parsing and word classification.
"""

import pytest

from spellservice.checkability import Checkability, get_checkability
from spellservice.locales import Locale, to_lower, to_upper
from spellservice.scripts import Script, get_script_from_locale, is_letter_part_of_script


class TestGetCheckability:
    """Tests for get_checkability()."""

    @pytest.mark.parametrize("text", ["", "a", "'", "é", "1"])
    def test_too_short(self, text):
        """Empty and single-character words are never checkable."""
        assert get_checkability(text, Script.LATIN) is Checkability.TOO_SHORT

    @pytest.mark.parametrize("text", ["1abc", "-abc", "#tag", "’tis", "привет"])
    def test_first_letter_uncheckable(self, text):
        """Words must start with a letter of the script or an apostrophe."""
        assert get_checkability(text, Script.LATIN) is Checkability.FIRST_LETTER_UNCHECKABLE

    @pytest.mark.parametrize("text", ["foo@bar.com", "a/b", "http://example.com", "www.example.com/x", "me@"])
    def test_email_or_url(self, text):
        """'@' or '/' anywhere wins, even with a period in the word."""
        assert get_checkability(text, Script.LATIN) is Checkability.EMAIL_OR_URL

    @pytest.mark.parametrize("text", ["foo.bar", "e.g.", "etc.", "a1.2"])
    def test_contains_period(self, text):
        """Periods divert to the segment check."""
        assert get_checkability(text, Script.LATIN) is Checkability.CONTAINS_PERIOD

    @pytest.mark.parametrize("text", ["ab12", "a123", "x--y"])
    def test_too_many_non_letters(self, text):
        """Fewer than 3/4 letters is not worth checking."""
        assert get_checkability(text, Script.LATIN) is Checkability.TOO_MANY_NON_LETTERS

    @pytest.mark.parametrize("text", ["hello", "abc1", "'tis", "don't", "café", "Straße"])
    def test_checkable(self, text):
        """Ordinary words are checkable."""
        assert get_checkability(text, Script.LATIN) is Checkability.CHECKABLE

    def test_letter_ratio_is_configurable(self):
        """The letter ratio is a parameter, not a constant."""
        assert get_checkability("abc1", Script.LATIN, min_letter_ratio=1.0) is Checkability.TOO_MANY_NON_LETTERS
        assert get_checkability("ab12", Script.LATIN, min_letter_ratio=0.5) is Checkability.CHECKABLE

    def test_script_decides_letters(self):
        """Cyrillic words are only checkable by a Cyrillic checker."""
        assert get_checkability("привет", Script.CYRILLIC) is Checkability.CHECKABLE
        assert get_checkability("hello", Script.CYRILLIC) is Checkability.FIRST_LETTER_UNCHECKABLE
        assert get_checkability("привет", Script.UNKNOWN) is Checkability.CHECKABLE

    def test_foreign_letters_count_as_non_letters(self):
        """Letters of another script do not count toward the ratio."""
        assert get_checkability("abпр", Script.LATIN) is Checkability.TOO_MANY_NON_LETTERS


class TestScripts:
    """Tests for script helpers."""

    @pytest.mark.parametrize("locale,script", [
        ("en_US", Script.LATIN),
        ("fr", Script.LATIN),
        ("ru_RU", Script.CYRILLIC),
        ("uk", Script.CYRILLIC),
        ("el_GR", Script.GREEK),
        ("ja_JP", Script.UNKNOWN),
    ])
    def test_script_from_locale(self, locale, script):
        assert get_script_from_locale(Locale.from_string(locale)) is script

    def test_letter_part_of_script(self):
        assert is_letter_part_of_script(ord('a'), Script.LATIN)
        assert is_letter_part_of_script(ord('ẞ'), Script.LATIN)
        assert not is_letter_part_of_script(ord('1'), Script.LATIN)
        assert not is_letter_part_of_script(ord('я'), Script.LATIN)
        assert is_letter_part_of_script(ord('я'), Script.CYRILLIC)
        assert is_letter_part_of_script(ord('λ'), Script.GREEK)
        assert not is_letter_part_of_script(ord("'"), Script.UNKNOWN)


class TestLocale:
    """Tests for Locale parsing and case mapping."""

    @pytest.mark.parametrize("text,expected", [
        ("en_US", Locale("en", "US")),
        ("en-us", Locale("en", "US")),
        ("DE", Locale("de")),
        ("sr_RS_latn", Locale("sr", "RS", "latn")),
        ("", Locale("")),
    ])
    def test_from_string(self, text, expected):
        assert Locale.from_string(text) == expected

    def test_str_round_trip(self):
        assert str(Locale.from_string("en_US")) == "en_US"
        assert str(Locale.from_string("fr")) == "fr"

    def test_turkish_case_mapping(self):
        """Turkish has a dotted and a dotless i."""
        turkish = Locale("tr", "TR")
        assert to_lower("ISTANBUL", turkish) == "ıstanbul"
        assert to_upper("istanbul", turkish) == "İSTANBUL"
        assert to_lower("ISTANBUL", Locale("en")) == "istanbul"
