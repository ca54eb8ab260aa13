"""Unit tests for modules.localization.indexes with the in-memory store."""

import pytest

from infrastructure.persistence import InMemoryRecordStore, UniqueConstraintError
from modules.localization.exceptions import (
    DuplicateLocalizationError,
    LocalizationError,
)
from modules.localization.indexes import LocalizationIndexProvider
from modules.localization.models import LocalizationIndexEntry
from tests.factories.content import make_record


@pytest.mark.unit
class TestLocalizationIndexProvider:
    @pytest.mark.asyncio
    async def test_second_record_for_set_and_locale_is_rejected(self):
        store = InMemoryRecordStore([LocalizationIndexProvider()])
        await store.save(make_record("a", localization_set="s1", locale="fr-ca"))

        with pytest.raises(DuplicateLocalizationError) as exc_info:
            await store.save(make_record("b", localization_set="s1", locale="FR-CA"))

        error = exc_info.value
        assert isinstance(error, LocalizationError)
        assert isinstance(error, UniqueConstraintError)
        assert error.localization_set == "s1"
        assert error.locale == "fr-ca"
        assert error.existing_id == "a"
        assert await store.get("b") is None

    @pytest.mark.asyncio
    async def test_resaving_same_record_is_allowed(self):
        store = InMemoryRecordStore([LocalizationIndexProvider()])
        record = make_record("a", localization_set="s1", locale="fr-ca")
        await store.save(record)
        record.display_text = "updated"
        await store.save(record)
        assert (await store.get("a")).display_text == "updated"

    @pytest.mark.asyncio
    async def test_changing_locale_frees_the_old_slot(self):
        store = InMemoryRecordStore([LocalizationIndexProvider()])
        await store.save(make_record("a", localization_set="s1", locale="fr-ca"))
        await store.save(make_record("a", localization_set="s1", locale="de-de"))
        await store.save(make_record("b", localization_set="s1", locale="fr-ca"))

        entries = await store.query_index(LocalizationIndexEntry, localization_set="s1")
        assert {(e.content_item_id, e.locale) for e in entries} == {
            ("a", "de-de"),
            ("b", "fr-ca"),
        }

    @pytest.mark.asyncio
    async def test_non_unique_index_allows_duplicates(self):
        store = InMemoryRecordStore([LocalizationIndexProvider(unique=False)])
        await store.save(make_record("a", localization_set="s1", locale="fr-ca"))
        await store.save(make_record("b", localization_set="s1", locale="fr-ca"))
        assert len(await store.query(LocalizationIndexEntry, locale="fr-ca")) == 2
