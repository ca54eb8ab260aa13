"""Persistence layer for content records.

Provides the RecordStore interface, index projections used for
equality/IN queries, an in-process store implementation, and unique
identifier generation.
"""

from infrastructure.persistence.exceptions import (
    PersistenceError,
    UniqueConstraintError,
)
from infrastructure.persistence.identifiers import (
    IdentifierGenerator,
    RandomIdGenerator,
)
from infrastructure.persistence.indexes import IndexProvider, matches
from infrastructure.persistence.memory import InMemoryRecordStore
from infrastructure.persistence.store import RecordStore

__all__ = [
    "IdentifierGenerator",
    "InMemoryRecordStore",
    "IndexProvider",
    "PersistenceError",
    "RandomIdGenerator",
    "RecordStore",
    "UniqueConstraintError",
    "matches",
]
