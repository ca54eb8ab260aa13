"""Unit tests for infrastructure.models base configuration and ContentRecord."""

from types import SimpleNamespace
from typing import ClassVar

import pytest
from pydantic import ValidationError

from infrastructure.models import ContentPart, ContentRecord, InfrastructureModel


@pytest.mark.unit
class TestInfrastructureModel:
    """Test InfrastructureModel behaviour through ContentRecord."""

    def test_content_record_is_infrastructure_model(self):
        assert issubclass(ContentRecord, InfrastructureModel)
        assert issubclass(ContentPart, InfrastructureModel)

    def test_creation_with_defaults(self):
        record = ContentRecord(content_item_id="a", content_type="Article")
        assert record.display_text == ""
        assert record.content == {}

    def test_str_strip_whitespace(self):
        record = ContentRecord(
            content_item_id="  a  ", content_type=" Article ", display_text=" Hi "
        )
        assert record.content_item_id == "a"
        assert record.content_type == "Article"
        assert record.display_text == "Hi"

    def test_validate_assignment(self):
        record = ContentRecord(content_item_id="a", content_type="Article")
        with pytest.raises(ValidationError):
            record.content_item_id = ""

    def test_required_fields(self):
        with pytest.raises(ValidationError):
            ContentRecord(content_item_id="a")

    def test_from_attributes(self):
        source = SimpleNamespace(
            content_item_id="a",
            content_type="Article",
            display_text="",
            content={"TitlePart": {"title": "x"}},
        )
        record = ContentRecord.model_validate(source)
        assert record.content["TitlePart"] == {"title": "x"}

    def test_json_round_trip(self):
        record = ContentRecord(
            content_item_id="a",
            content_type="Article",
            content={"TitlePart": {"title": "x"}, "LocalizationPart": {"locale": "fr-ca"}},
        )
        restored = ContentRecord.model_validate_json(record.model_dump_json())
        assert restored == record


@pytest.mark.unit
class TestContentPart:
    def test_apply_and_get_custom_part(self):
        class TitlePart(ContentPart):
            part_name: ClassVar[str] = "TitlePart"
            title: str = ""

        record = ContentRecord(content_item_id="a", content_type="Article")
        record.apply_part(TitlePart(title="Hello"))

        assert record.has_part("TitlePart")
        assert record.get_part(TitlePart).title == "Hello"
        assert record.content["TitlePart"] == {"title": "Hello"}
