"""Locale string helpers.

Locales are IETF language tags ("en", "fr-CA"). The service compares
them case-insensitively and stores them in lower-cased canonical form.
"""

from typing import Iterable, Optional


def canonical_locale(locale: str) -> str:
    """Return the canonical (stripped, lower-cased) form of a locale tag."""
    return locale.strip().lower()


def locales_equal(left: Optional[str], right: Optional[str]) -> bool:
    """Case-insensitive locale comparison. Missing values never match."""
    if not left or not right:
        return False
    return canonical_locale(left) == canonical_locale(right)


def is_supported(locale: str, supported: Iterable[str]) -> bool:
    """Check whether ``locale`` is one of ``supported`` (case-insensitive)."""
    return any(locales_equal(locale, candidate) for candidate in supported)


def language_of(locale: str) -> str:
    """Language part of a locale tag ("fr" for "fr-CA")."""
    return canonical_locale(locale).split("-")[0]
