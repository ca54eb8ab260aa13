"""Unit tests for modules.localization.parts."""

from unittest.mock import patch

import pytest

from modules.localization.handlers import HandlerPipeline
from modules.localization.models import ContentTypeDefinition, LocalizationContext
from modules.localization.parts import (
    ContentDefinitionRegistry,
    ContentPartHandler,
    PartHandlerCoordinator,
)
from tests.factories.content import make_record


class RecordingPartHandler(ContentPartHandler):
    def __init__(self, label, part_names, calls, fail=False):
        self.label = label
        self.part_names = frozenset(part_names)
        self.calls = calls
        self.fail = fail

    async def before_complete(self, context, part_name, part):
        self.calls.append(f"{self.label}:before:{part_name}")
        if self.fail:
            raise RuntimeError("part handler failed")

    async def after_complete(self, context, part_name, part):
        self.calls.append(f"{self.label}:after:{part_name}")
        if self.fail:
            raise RuntimeError("part handler failed")


def make_context(record):
    return LocalizationContext(
        content_item=record,
        original=record,
        localization_set="set-1",
        locale="fr-ca",
    )


@pytest.fixture
def definitions():
    registry = ContentDefinitionRegistry()
    registry.define("Article", "TitlePart", "BodyPart", "LocalizationPart")
    return registry


@pytest.fixture
def article():
    return make_record(
        "a1",
        content_type="Article",
        localization_set="set-1",
        locale="fr-ca",
        BodyPart={"html": "<p>hi</p>"},
        TitlePart={"title": "Hello"},
    )


@pytest.mark.unit
class TestContentDefinitionRegistry:
    def test_define_and_get(self, definitions):
        definition = definitions.get("Article")
        assert definition == ContentTypeDefinition(
            name="Article", parts=("TitlePart", "BodyPart", "LocalizationPart")
        )

    def test_unknown_type_returns_none(self, definitions):
        assert definitions.get("Page") is None

    def test_add_replaces_existing_definition(self, definitions):
        definitions.add(ContentTypeDefinition(name="Article", parts=("TitlePart",)))
        assert definitions.get("Article").parts == ("TitlePart",)


@pytest.mark.unit
class TestPartHandlerCoordinator:
    @pytest.mark.asyncio
    async def test_parts_visited_in_declaration_order(self, definitions, article):
        calls = []
        coordinator = PartHandlerCoordinator(
            definitions,
            [RecordingPartHandler("H", ["BodyPart", "TitlePart"], calls)],
        )
        await coordinator.before_complete(make_context(article))
        # Record content lists BodyPart first; the definition order wins.
        assert calls == ["H:before:TitlePart", "H:before:BodyPart"]

    @pytest.mark.asyncio
    async def test_after_phase_runs_part_handlers_in_reverse(
        self, definitions, article
    ):
        calls = []
        coordinator = PartHandlerCoordinator(
            definitions,
            [
                RecordingPartHandler("A", ["TitlePart"], calls),
                RecordingPartHandler("B", ["TitlePart"], calls),
            ],
        )
        context = make_context(article)
        await coordinator.before_complete(context)
        await coordinator.after_complete(context)
        assert calls == [
            "A:before:TitlePart",
            "B:before:TitlePart",
            "B:after:TitlePart",
            "A:after:TitlePart",
        ]

    @pytest.mark.asyncio
    async def test_only_matching_handlers_are_called(self, definitions, article):
        calls = []
        coordinator = PartHandlerCoordinator(
            definitions,
            [
                RecordingPartHandler("Title", ["TitlePart"], calls),
                RecordingPartHandler("Other", ["MediaPart"], calls),
            ],
        )
        await coordinator.before_complete(make_context(article))
        assert calls == ["Title:before:TitlePart"]

    @pytest.mark.asyncio
    async def test_declared_part_missing_from_record_is_skipped(self, definitions):
        calls = []
        record = make_record("a2", content_type="Article", TitlePart={"title": "x"})
        coordinator = PartHandlerCoordinator(
            definitions, [RecordingPartHandler("H", ["BodyPart", "TitlePart"], calls)]
        )
        await coordinator.before_complete(make_context(record))
        assert calls == ["H:before:TitlePart"]

    @pytest.mark.asyncio
    async def test_unknown_content_type_is_skipped(self, definitions):
        calls = []
        record = make_record("p1", content_type="Page", TitlePart={"title": "x"})
        coordinator = PartHandlerCoordinator(
            definitions, [RecordingPartHandler("H", ["TitlePart"], calls)]
        )
        await coordinator.before_complete(make_context(record))
        assert calls == []

    @pytest.mark.asyncio
    async def test_failing_part_handler_is_isolated(self, definitions, article):
        calls = []
        coordinator = PartHandlerCoordinator(
            definitions,
            [
                RecordingPartHandler("Bad", ["TitlePart"], calls, fail=True),
                RecordingPartHandler("Good", ["TitlePart", "BodyPart"], calls),
            ],
        )
        with patch("modules.localization.handlers.logger") as mock_logger:
            await coordinator.before_complete(make_context(article))

        assert calls == [
            "Bad:before:TitlePart",
            "Good:before:TitlePart",
            "Good:before:BodyPart",
        ]
        kwargs = mock_logger.error.call_args.kwargs
        assert kwargs["handler"] == "RecordingPartHandler"
        assert kwargs["part_name"] == "TitlePart"

    @pytest.mark.asyncio
    async def test_part_handler_can_change_the_part(self, definitions, article):
        class Prefixer(ContentPartHandler):
            part_names = frozenset({"TitlePart"})

            async def before_complete(self, context, part_name, part):
                part["title"] = f"[{context.locale}] {part['title']}"

        coordinator = PartHandlerCoordinator(definitions, [Prefixer()])
        context = make_context(article)
        await coordinator.before_complete(context)
        assert context.content_item.content["TitlePart"]["title"] == "[fr-ca] Hello"

    @pytest.mark.asyncio
    async def test_coordinator_runs_inside_pipeline(self, definitions, article):
        calls = []
        coordinator = PartHandlerCoordinator(definitions)
        coordinator.register(RecordingPartHandler("H", ["TitlePart"], calls))
        pipeline = HandlerPipeline([coordinator])

        context = make_context(article)
        await pipeline.run_before(context)
        await pipeline.run_after(context)

        assert calls == ["H:before:TitlePart", "H:after:TitlePart"]
        assert len(coordinator.part_handlers) == 1
