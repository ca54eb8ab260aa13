"""Localization models.

- LocalizationPart: the part of a content record naming its set and locale
- LocalizationIndexEntry: queryable projection of that part
- LocalizationContext: value passed through the handler pipeline
- ContentTypeDefinition: the ordered part names a content type declares
"""

import uuid
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Tuple

from pydantic import field_validator

from infrastructure.i18n.locales import canonical_locale
from infrastructure.models.content import ContentPart, ContentRecord


class LocalizationPart(ContentPart):
    """Localization state of a record.

    ``localization_set`` stays empty until the record is first localized
    and never changes afterwards. ``locale`` is stored lower-cased.
    """

    part_name: ClassVar[str] = "LocalizationPart"

    localization_set: str = ""
    locale: str = ""

    @field_validator("locale")
    @classmethod
    def canonicalize_locale(cls, v: str) -> str:
        return canonical_locale(v)

    @property
    def is_anchored(self) -> bool:
        return bool(self.localization_set)


@dataclass(frozen=True)
class LocalizationIndexEntry:
    """Index projection of a record's LocalizationPart."""

    content_item_id: str
    localization_set: str
    locale: str

    @classmethod
    def from_record(cls, record: ContentRecord) -> Optional["LocalizationIndexEntry"]:
        """Project a record, or return None if it belongs to no set."""
        if not record.has_part(LocalizationPart.part_name):
            return None
        part = record.get_part(LocalizationPart)
        if not part.localization_set:
            return None
        return cls(
            content_item_id=record.content_item_id,
            localization_set=part.localization_set,
            locale=part.locale,
        )


@dataclass
class LocalizationContext:
    """State shared with pipeline handlers while a translation is created.

    Handlers running in the "before" phase may still mutate
    ``content_item``; it is persisted between the two phases.
    """

    content_item: ContentRecord
    original: ContentRecord
    localization_set: str
    locale: str
    context_id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass(frozen=True)
class ContentTypeDefinition:
    """A content type and the part names it declares, in order."""

    name: str
    parts: Tuple[str, ...] = ()
