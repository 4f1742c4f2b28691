"""
Tests for Capitalization Utilities
==================================
"""

import pytest

from spellservice.capitalization import (
    CapitalizationType,
    capitalize_first_and_downcase_rest,
    capitalize_first_code_point,
    get_capitalization_type,
    is_in_dict_for_any_capitalization,
)
from spellservice.locales import Locale

from .conftest import FakeDictionary

EN = Locale("en", "US")


class TestGetCapitalizationType:
    """Tests for get_capitalization_type()."""

    @pytest.mark.parametrize("text,expected", [
        ("text", CapitalizationType.NONE),
        ("123", CapitalizationType.NONE),
        ("", CapitalizationType.NONE),
        ("Text", CapitalizationType.FIRST),
        ("'Tis", CapitalizationType.FIRST),
        ("TEXT", CapitalizationType.ALL),
        ("T", CapitalizationType.FIRST),
        ("DON'T", CapitalizationType.ALL),
        ("iPhone", CapitalizationType.MIXED),
        ("McDonald", CapitalizationType.MIXED),
    ])
    def test_classification(self, text, expected):
        assert get_capitalization_type(text) is expected


class TestCapitalize:
    """Tests for the capitalize helpers."""

    def test_capitalize_first_code_point(self):
        """Only the first character changes."""
        assert capitalize_first_code_point("hello", EN) == "Hello"
        assert capitalize_first_code_point("iPhone", EN) == "IPhone"
        assert capitalize_first_code_point("", EN) == ""

    def test_capitalize_first_and_downcase_rest(self):
        assert capitalize_first_and_downcase_rest("GERMANS", EN) == "Germans"
        assert capitalize_first_and_downcase_rest("germans", EN) == "Germans"

    def test_turkish_capitalization(self):
        """A Turkish i capitalizes to a dotted capital I."""
        assert capitalize_first_code_point("istanbul", Locale("tr")) == "İstanbul"


class TestIsInDictForAnyCapitalization:
    """Tests for is_in_dict_for_any_capitalization()."""

    @pytest.fixture
    def dictionary(self):
        return FakeDictionary(words={'the', 'Germans', 'NASA'})

    def test_exact_match(self, dictionary):
        assert is_in_dict_for_any_capitalization(dictionary, "NASA", CapitalizationType.ALL, EN)

    def test_lower_case_only_tried_as_is(self, dictionary):
        """A lower-case word is never tried capitalized."""
        assert not is_in_dict_for_any_capitalization(dictionary, "germans", CapitalizationType.NONE, EN)

    def test_first_tries_lower_case(self, dictionary):
        """A capitalized sentence-initial word is found in lower case."""
        assert is_in_dict_for_any_capitalization(dictionary, "The", CapitalizationType.FIRST, EN)

    def test_all_caps_tries_lower_case(self, dictionary):
        assert is_in_dict_for_any_capitalization(dictionary, "THE", CapitalizationType.ALL, EN)

    def test_all_caps_tries_capitalized(self, dictionary):
        """"GERMANS" is only in the dictionary as "Germans"."""
        assert is_in_dict_for_any_capitalization(dictionary, "GERMANS", CapitalizationType.ALL, EN)

    def test_mixed_does_not_try_capitalized(self, dictionary):
        """Mixed-case words are only lowered, never re-cased otherwise."""
        assert not is_in_dict_for_any_capitalization(dictionary, "GErmans", CapitalizationType.MIXED, EN)

    def test_mixed_tries_lower_case(self, dictionary):
        assert is_in_dict_for_any_capitalization(dictionary, "tHe", CapitalizationType.MIXED, EN)

    def test_unknown_word(self, dictionary):
        assert not is_in_dict_for_any_capitalization(dictionary, "XYZZY", CapitalizationType.ALL, EN)
