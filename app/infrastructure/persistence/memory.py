"""In-process record store.

Keeps records and their index entries in dictionaries. Records are
copied on the way in and on the way out, so callers own the objects
they receive, the same as with an external database.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple, Type

import structlog

from infrastructure.models.content import ContentRecord
from infrastructure.persistence.indexes import IndexProvider, matches
from infrastructure.persistence.store import EntryT, RecordStore

logger = structlog.get_logger(__name__)


class InMemoryRecordStore(RecordStore):
    """Dictionary-backed RecordStore with index projections.

    Usage:
        store = InMemoryRecordStore(index_providers=[LocalizationIndexProvider()])
        await store.save(record)
        members = await store.query(LocalizationIndexEntry, localization_set="abc")
    """

    def __init__(self, index_providers: Iterable[IndexProvider] = ()):
        self._records: Dict[str, ContentRecord] = {}
        self._providers: Dict[type, IndexProvider] = {}
        self._entries: Dict[type, Dict[str, Any]] = {}
        self._unique: Dict[type, Dict[Tuple[Any, ...], str]] = {}
        for provider in index_providers:
            self.register_index(provider)

    def register_index(self, provider: IndexProvider) -> None:
        """Register an index and project all existing records into it."""
        index_type = provider.index_type
        self._providers[index_type] = provider
        self._entries[index_type] = {}
        self._unique[index_type] = {}
        for record in self._records.values():
            self._index_record(provider, record)
        logger.debug("registered_index", index=provider.name)

    def _provider(self, index_type: type) -> IndexProvider:
        try:
            return self._providers[index_type]
        except KeyError:
            raise KeyError(f"No index registered for {index_type.__name__}") from None

    def _check_unique(self, record: ContentRecord) -> None:
        for index_type, provider in self._providers.items():
            entry = provider.describe(record)
            if entry is None:
                continue
            key = provider.unique_key(entry)
            if key is None:
                continue
            holder = self._unique[index_type].get(key)
            if holder is not None and holder != record.content_item_id:
                raise provider.conflict_error(entry, holder)

    def _unindex_record(self, content_item_id: str) -> None:
        for index_type, provider in self._providers.items():
            entry = self._entries[index_type].pop(content_item_id, None)
            if entry is None:
                continue
            key = provider.unique_key(entry)
            if key is not None and self._unique[index_type].get(key) == content_item_id:
                del self._unique[index_type][key]

    def _index_record(self, provider: IndexProvider, record: ContentRecord) -> None:
        entry = provider.describe(record)
        if entry is None:
            return
        index_type = provider.index_type
        self._entries[index_type][record.content_item_id] = entry
        key = provider.unique_key(entry)
        if key is not None:
            self._unique[index_type][key] = record.content_item_id

    async def save(self, record: ContentRecord) -> None:
        self._check_unique(record)
        stored = record.model_copy(deep=True)
        self._unindex_record(record.content_item_id)
        self._records[record.content_item_id] = stored
        for provider in self._providers.values():
            self._index_record(provider, stored)
        logger.debug(
            "record_saved",
            content_item_id=record.content_item_id,
            content_type=record.content_type,
        )

    async def get(self, content_item_id: str) -> Optional[ContentRecord]:
        record = self._records.get(content_item_id)
        return record.model_copy(deep=True) if record is not None else None

    async def query_index(self, index_type: Type[EntryT], **filters: Any) -> List[EntryT]:
        self._provider(index_type)
        return [
            entry
            for entry in self._entries[index_type].values()
            if matches(entry, filters)
        ]

    async def query(self, index_type: Type[Any], **filters: Any) -> List[ContentRecord]:
        self._provider(index_type)
        return [
            self._records[content_item_id].model_copy(deep=True)
            for content_item_id, entry in self._entries[index_type].items()
            if matches(entry, filters)
        ]

    def __len__(self) -> int:
        return len(self._records)
