"""Index projections over content records.

An index provider maps a record to one flat, queryable entry (or to
nothing when the record should not be indexed). Stores rebuild a
record's entries on every save.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Mapping, Optional, Tuple, Type, TypeVar

from infrastructure.models.content import ContentRecord
from infrastructure.persistence.exceptions import UniqueConstraintError

EntryT = TypeVar("EntryT")

_COLLECTION_TYPES = (list, tuple, set, frozenset)


class IndexProvider(ABC, Generic[EntryT]):
    """Describes how to project records into one index.

    Attributes:
        index_type: Dataclass type of the produced entries
        unique_fields: Fields whose combined values must be unique across
            records (empty for no constraint)
    """

    index_type: Type[EntryT]
    unique_fields: Tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.index_type.__name__

    @abstractmethod
    def describe(self, record: ContentRecord) -> Optional[EntryT]:
        """Project ``record`` into an index entry, or None to skip it."""

    def unique_key(self, entry: EntryT) -> Optional[Tuple[Any, ...]]:
        if not self.unique_fields:
            return None
        return tuple(getattr(entry, field) for field in self.unique_fields)

    def conflict_error(self, entry: EntryT, existing_id: str) -> Exception:
        """Exception raised when ``entry`` collides with an existing record."""
        values = {field: getattr(entry, field) for field in self.unique_fields}
        return UniqueConstraintError(self.name, values, existing_id)


def matches(entry: Any, filters: Mapping[str, Any]) -> bool:
    """Check an index entry against equality/IN filters.

    A filter value that is a list, tuple or set means "field IN values";
    anything else means "field == value".
    """
    for field, expected in filters.items():
        actual = getattr(entry, field)
        if isinstance(expected, _COLLECTION_TYPES):
            if actual not in expected:
                return False
        elif actual != expected:
            return False
    return True

