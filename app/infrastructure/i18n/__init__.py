"""i18n infrastructure - locale metadata and request locale resolution.

Main components:
- locales: canonical form and case-insensitive comparison of locale tags
- directory: LocaleDirectory interface and settings-backed implementation
- resolvers: LocaleResolver for request locale detection
"""

from infrastructure.i18n.directory import (
    LocaleDirectory,
    SettingsLocaleDirectory,
    StaticLocaleDirectory,
)
from infrastructure.i18n.locales import (
    canonical_locale,
    is_supported,
    language_of,
    locales_equal,
)
from infrastructure.i18n.resolvers import LocaleResolver

__all__ = [
    "LocaleDirectory",
    "SettingsLocaleDirectory",
    "StaticLocaleDirectory",
    "LocaleResolver",
    "canonical_locale",
    "is_supported",
    "language_of",
    "locales_equal",
]
