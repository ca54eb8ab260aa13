"""Locale resolution logic for determining a request's preferred language.

Resolves the locale of an incoming request from an explicit parameter,
the Accept-Language header, or the default locale.
"""

from typing import Iterable, List, Optional, Tuple

import structlog

from infrastructure.i18n.locales import canonical_locale, language_of

logger = structlog.get_logger().bind(component="i18n.resolver")


class LocaleResolver:
    """Resolves the request locale against the supported locales.

    Fallback chain:
    1. Explicit request parameter (if supported)
    2. Accept-Language header, by quality
    3. Default locale
    """

    def __init__(self, supported_locales: Iterable[str], default_locale: str):
        """Initialize locale resolver.

        Args:
            supported_locales: Locales the service can serve.
            default_locale: Fallback locale when no preference matches.
        """
        self.default_locale = canonical_locale(default_locale)
        self.supported_locales = [canonical_locale(locale) for locale in supported_locales]
        self.log = logger.bind(default_locale=self.default_locale)

    @staticmethod
    def parse_accept_language(accept_language: str) -> List[Tuple[str, float]]:
        """Parse "en-US,en;q=0.9,fr-CA;q=0.8" into (range, quality) pairs.

        Pairs are sorted by descending quality; ties keep header order.
        """
        preferences = []
        for part in accept_language.split(","):
            lang_range = part.split(";")[0].strip()
            if not lang_range or lang_range == "*":
                continue
            quality = 1.0
            if ";" in part and "q=" in part:
                try:
                    quality = float(part.split("q=")[1])
                except ValueError:
                    quality = 1.0
            preferences.append((lang_range, quality))

        return sorted(preferences, key=lambda x: x[1], reverse=True)

    def match(self, locale: Optional[str]) -> Optional[str]:
        """Return the supported locale matching ``locale``, if any.

        Exact matches win; otherwise a supported locale with the same
        language ("fr" matches "fr-ca") is returned.
        """
        if not locale:
            return None
        wanted = canonical_locale(locale)
        if wanted in self.supported_locales:
            return wanted
        for supported in self.supported_locales:
            if language_of(supported) == language_of(wanted):
                return supported
        return None

    def resolve_from_header(self, accept_language: Optional[str]) -> str:
        """Resolve locale from an HTTP Accept-Language header.

        Args:
            accept_language: Accept-Language header value.

        Returns:
            Resolved locale, or the default if none match.
        """
        if not accept_language:
            return self.default_locale

        for lang_range, _ in self.parse_accept_language(accept_language):
            matched = self.match(lang_range)
            if matched:
                self.log.debug("resolved_from_header", locale=matched)
                return matched

        self.log.debug("no_matching_locale_in_header", header=accept_language)
        return self.default_locale

    def resolve(
        self,
        requested: Optional[str] = None,
        accept_language: Optional[str] = None,
    ) -> str:
        """Resolve the request locale using the full fallback chain."""
        matched = self.match(requested)
        if matched:
            return matched
        if requested:
            self.log.info("unsupported_requested_locale", requested=requested)
        return self.resolve_from_header(accept_language)
