"""Content record model.

A content record is an opaque document: a stable id, the name of its
content type, and a JSON-like ``content`` payload whose top-level keys
are named parts. Typed views over a part are read with ``get_part`` and
written back with ``apply_part``.
"""

from typing import Any, ClassVar, Dict, Type, TypeVar

from pydantic import Field

from infrastructure.models.base import InfrastructureModel

PartT = TypeVar("PartT", bound="ContentPart")


class ContentPart(InfrastructureModel):
    """Typed view over one named part of a record's content payload."""

    part_name: ClassVar[str] = ""


class ContentRecord(InfrastructureModel):
    """A stored content item.

    Attributes:
        content_item_id: Stable unique identifier
        content_type: Name of the content type describing the record's parts
        display_text: Optional human readable label
        content: Part name -> part payload
    """

    content_item_id: str = Field(..., min_length=1)
    content_type: str = Field(..., min_length=1)
    display_text: str = ""
    content: Dict[str, Any] = Field(default_factory=dict)

    def has_part(self, part_name: str) -> bool:
        return part_name in self.content

    def get_part(self, part_type: Type[PartT]) -> PartT:
        """Return a typed copy of the named part (empty defaults when absent)."""
        payload = self.content.get(part_type.part_name) or {}
        return part_type.model_validate(payload)

    def apply_part(self, part: ContentPart) -> None:
        """Write a typed part back into the content payload."""
        self.content[part.part_name] = part.model_dump(mode="json")

    def clone(self, content_item_id: str) -> "ContentRecord":
        """Deep copy of this record under a new id."""
        copied = self.model_copy(deep=True)
        copied.content_item_id = content_item_id
        return copied
