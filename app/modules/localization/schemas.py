"""Request and response schemas for the localization API."""

from typing import Annotated, Any, Dict, List

from pydantic import BaseModel, Field

from infrastructure.models.content import ContentRecord
from modules.localization.merge import MergeArrayHandling


class LocalizeRequest(BaseModel):
    """Schema for creating (or fetching) a translation."""

    target_locale: Annotated[
        str,
        Field(
            ...,
            min_length=2,
            description="Locale to localize the content item into",
            json_schema_extra={"example": "fr-CA"},
        ),
    ]


class FirstItemsRequest(BaseModel):
    """Schema for resolving one content item per localization set."""

    localization_sets: Annotated[
        List[str],
        Field(
            ...,
            description="Localization set ids; the response keeps this order",
            json_schema_extra={"example": ["set-3", "set-1", "set-2"]},
        ),
    ]


class FirstItemEntry(BaseModel):
    """One resolved set."""

    localization_set: str
    content_item_id: str


class FirstItemsResponse(BaseModel):
    """Resolved sets, in the order they were requested."""

    items: List[FirstItemEntry] = Field(default_factory=list)


class DeduplicateRequest(BaseModel):
    """Schema for keeping one record per set from a list of records."""

    records: List[ContentRecord]


class DeduplicateResponse(BaseModel):
    """Set id -> chosen record."""

    records: Dict[str, ContentRecord] = Field(default_factory=dict)


class SyncFieldsRequest(BaseModel):
    """Schema for merging fields into every member of a set."""

    patch: Annotated[
        Dict[str, Any],
        Field(
            ...,
            description="Partial content payload merged into each record",
            json_schema_extra={"example": {"TaxonomyPart": {"tags": ["news"]}}},
        ),
    ]
    array_handling: MergeArrayHandling = MergeArrayHandling.REPLACE


class SyncFieldsResponse(BaseModel):
    """Records updated by a sync."""

    localization_set: str
    updated: List[str] = Field(default_factory=list)
