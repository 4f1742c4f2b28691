"""
Locale helpers: parsing locale strings and locale-aware case mapping.
"""

from dataclasses import dataclass

# Languages whose dotted/dotless i do not follow the default case mapping
_TURKIC_LANGUAGES = frozenset(('tr', 'az'))


@dataclass(frozen=True)
class Locale:
    """A language/country/variant triple such as en_US."""
    language: str
    country: str = ""
    variant: str = ""

    @classmethod
    def from_string(cls, locale_string: str) -> 'Locale':
        """
        Build a Locale from "en", "en_US", "en-US" or "sr_RS_latn".

        Args:
            locale_string: Locale string as supplied by the host

        Returns:
            Parsed Locale (language may be empty for an empty string)
        """
        parts = (locale_string or "").replace('-', '_').split('_', 2)
        language = parts[0].lower()
        country = parts[1].upper() if len(parts) > 1 else ""
        variant = parts[2] if len(parts) > 2 else ""
        return cls(language, country, variant)

    def __str__(self) -> str:
        return '_'.join(p for p in (self.language, self.country, self.variant) if p)


def to_lower(text: str, locale: Locale) -> str:
    """Lower-case text using the rules of the given locale."""
    if locale.language in _TURKIC_LANGUAGES:
        text = text.replace('I', 'ı').replace('İ', 'i')
    return text.lower()


def to_upper(text: str, locale: Locale) -> str:
    """Upper-case text using the rules of the given locale."""
    if locale.language in _TURKIC_LANGUAGES:
        text = text.replace('i', 'İ')
    return text.upper()
