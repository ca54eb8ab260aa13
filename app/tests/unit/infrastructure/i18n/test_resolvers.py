"""Tests for infrastructure.i18n.resolvers module."""

import pytest

from infrastructure.i18n import LocaleResolver


@pytest.fixture
def resolver():
    return LocaleResolver(supported_locales=["en-US", "fr-CA"], default_locale="en-US")


@pytest.mark.unit
class TestLocaleResolver:
    """Tests for LocaleResolver service."""

    def test_resolver_initialization(self, resolver):
        """LocaleResolver stores canonical locales."""
        assert resolver.default_locale == "en-us"
        assert resolver.supported_locales == ["en-us", "fr-ca"]

    def test_resolve_from_header_specific(self, resolver):
        assert resolver.resolve_from_header("fr-CA") == "fr-ca"

    def test_resolve_from_header_language_only_match(self, resolver):
        """Request "fr" should match "fr-ca"."""
        assert resolver.resolve_from_header("fr") == "fr-ca"

    def test_resolve_from_header_other_region_matches_language(self, resolver):
        assert resolver.resolve_from_header("fr-FR") == "fr-ca"

    def test_resolve_from_header_quality_ordering(self, resolver):
        """resolve_from_header() uses quality for ordering."""
        assert resolver.resolve_from_header("en-US;q=0.8,fr-CA;q=0.9") == "fr-ca"

    def test_resolve_from_header_skips_unsupported(self, resolver):
        assert resolver.resolve_from_header("de-DE,fr;q=0.5") == "fr-ca"

    def test_resolve_from_header_no_match_default(self, resolver):
        assert resolver.resolve_from_header("de-DE") == "en-us"

    @pytest.mark.parametrize("header", ["", None, "*"])
    def test_resolve_from_header_empty(self, resolver, header):
        assert resolver.resolve_from_header(header) == "en-us"

    def test_resolve_prefers_explicit_request(self, resolver):
        assert resolver.resolve(requested="fr-CA", accept_language="en-US") == "fr-ca"

    def test_resolve_ignores_unsupported_request(self, resolver):
        assert resolver.resolve(requested="xx", accept_language="fr") == "fr-ca"

    def test_resolve_defaults(self, resolver):
        assert resolver.resolve() == "en-us"


@pytest.mark.unit
class TestParseAcceptLanguage:
    def test_parse_sorts_by_quality(self):
        parsed = LocaleResolver.parse_accept_language("en;q=0.5,fr-CA,de;q=0.9")
        assert parsed == [("fr-CA", 1.0), ("de", 0.9), ("en", 0.5)]

    def test_parse_invalid_quality_defaults_to_one(self):
        parsed = LocaleResolver.parse_accept_language("fr;q=abc")
        assert parsed == [("fr", 1.0)]

    def test_parse_skips_wildcard(self):
        assert LocaleResolver.parse_accept_language("*;q=0.1") == []
