"""Index provider projecting records into LocalizationIndexEntry."""

from typing import Optional

from infrastructure.models.content import ContentRecord
from infrastructure.persistence.indexes import IndexProvider
from modules.localization.exceptions import DuplicateLocalizationError
from modules.localization.models import LocalizationIndexEntry


class LocalizationIndexProvider(IndexProvider[LocalizationIndexEntry]):
    """Indexes every record that belongs to a localization set.

    With ``unique`` set, a second record for the same set and locale is
    rejected with DuplicateLocalizationError.
    """

    index_type = LocalizationIndexEntry

    def __init__(self, unique: bool = True):
        self.unique_fields = ("localization_set", "locale") if unique else ()

    def describe(self, record: ContentRecord) -> Optional[LocalizationIndexEntry]:
        return LocalizationIndexEntry.from_record(record)

    def conflict_error(
        self, entry: LocalizationIndexEntry, existing_id: str
    ) -> Exception:
        return DuplicateLocalizationError(
            entry.localization_set, entry.locale, existing_id
        )
