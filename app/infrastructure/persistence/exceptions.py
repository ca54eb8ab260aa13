"""Persistence layer exceptions."""

from typing import Any, Dict


class PersistenceError(Exception):
    """Base exception for record store failures."""

    pass


class UniqueConstraintError(PersistenceError):
    """Raised when saving a record would duplicate a unique index entry.

    Attributes:
        index_name: Name of the index whose constraint was violated
        values: Unique field values shared with the existing entry
        existing_id: Id of the record already holding those values
    """

    def __init__(self, index_name: str, values: Dict[str, Any], existing_id: str):
        self.index_name = index_name
        self.values = values
        self.existing_id = existing_id
        super().__init__(
            f"Unique constraint on {index_name} {values} violated by existing "
            f"record {existing_id}"
        )
