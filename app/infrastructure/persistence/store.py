"""Record store interface.

The store is the durable collection of content records. It supports
saving (upsert by ``content_item_id``), direct lookup, and equality/IN
queries over fields of registered index projections.

Store failures are not handled by callers in this service; they
propagate unchanged.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Type, TypeVar

from infrastructure.models.content import ContentRecord

EntryT = TypeVar("EntryT")


class RecordStore(ABC):
    """Abstract base class for content record stores.

    Filters are keyword arguments naming index fields. Collection values
    mean membership, scalar values mean equality:

        await store.query(LocalizationIndexEntry, localization_set=["a", "b"], locale="fr-ca")
    """

    @abstractmethod
    async def save(self, record: ContentRecord) -> None:
        """Insert or replace a record and rebuild its index entries.

        Raises:
            UniqueConstraintError: If an index with unique fields already
                holds the same values for a different record.
        """

    @abstractmethod
    async def get(self, content_item_id: str) -> Optional[ContentRecord]:
        """Return a record by id, or None if not found."""

    @abstractmethod
    async def query(self, index_type: Type[Any], **filters: Any) -> List[ContentRecord]:
        """Return records whose index entry matches all filters."""

    @abstractmethod
    async def query_index(self, index_type: Type[EntryT], **filters: Any) -> List[EntryT]:
        """Return index entries matching all filters."""

    async def query_first(
        self, index_type: Type[Any], **filters: Any
    ) -> Optional[ContentRecord]:
        """Return the first record matching all filters, or None."""
        records = await self.query(index_type, **filters)
        return records[0] if records else None
