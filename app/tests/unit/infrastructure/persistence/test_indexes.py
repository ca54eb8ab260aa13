"""Tests for infrastructure.persistence.indexes."""

from dataclasses import dataclass

import pytest

from infrastructure.persistence import matches


@dataclass
class Entry:
    localization_set: str
    locale: str


@pytest.mark.unit
class TestMatches:
    def test_no_filters_match_everything(self):
        assert matches(Entry("s1", "fr-ca"), {}) is True

    def test_equality(self):
        entry = Entry("s1", "fr-ca")
        assert matches(entry, {"locale": "fr-ca"}) is True
        assert matches(entry, {"locale": "en-us"}) is False

    @pytest.mark.parametrize("values", [["s1", "s2"], ("s1",), {"s1"}, frozenset({"s1"})])
    def test_collection_means_membership(self, values):
        assert matches(Entry("s1", "fr-ca"), {"localization_set": values}) is True

    def test_empty_collection_matches_nothing(self):
        assert matches(Entry("s1", "fr-ca"), {"localization_set": []}) is False

    def test_all_filters_must_match(self):
        entry = Entry("s1", "fr-ca")
        assert matches(entry, {"localization_set": ["s1"], "locale": "en-us"}) is False
