"""Per-part dispatch of localization hooks.

Content types declare an ordered list of part names. Part handlers name
the parts they care about; for each declared part present on the new
translation, the coordinator calls every handler that recognizes it with
just that part's payload.
"""

from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple

from infrastructure.logging import get_module_logger
from modules.localization.handlers import (
    AFTER_PHASE,
    BEFORE_PHASE,
    LocalizationHandler,
    handler_name,
    invoke_isolated,
)
from modules.localization.models import ContentTypeDefinition, LocalizationContext

logger = get_module_logger()


class ContentPartHandler:
    """Base class for part handlers.

    Attributes:
        part_names: Names of the parts this handler reacts to
    """

    part_names: FrozenSet[str] = frozenset()

    @property
    def name(self) -> str:
        return type(self).__name__

    def handles(self, part_name: str) -> bool:
        return part_name in self.part_names

    async def before_complete(
        self, context: LocalizationContext, part_name: str, part: Dict[str, Any]
    ) -> None:
        pass

    async def after_complete(
        self, context: LocalizationContext, part_name: str, part: Dict[str, Any]
    ) -> None:
        pass


class ContentDefinitionRegistry:
    """Known content types and the parts each declares."""

    def __init__(self, definitions: Iterable[ContentTypeDefinition] = ()):
        self._definitions: Dict[str, ContentTypeDefinition] = {}
        for definition in definitions:
            self.add(definition)

    def add(self, definition: ContentTypeDefinition) -> None:
        self._definitions[definition.name] = definition

    def define(self, name: str, *parts: str) -> ContentTypeDefinition:
        definition = ContentTypeDefinition(name=name, parts=tuple(parts))
        self.add(definition)
        return definition

    def get(self, content_type: str) -> Optional[ContentTypeDefinition]:
        return self._definitions.get(content_type)


class PartHandlerCoordinator(LocalizationHandler):
    """Pipeline handler that fans hooks out to part handlers.

    Parts are visited in the order the content type declares them. Part
    handlers run in registration order for ``before_complete`` and in
    reverse for ``after_complete``. Records of unknown content types are
    skipped.
    """

    def __init__(
        self,
        definitions: ContentDefinitionRegistry,
        part_handlers: Iterable[ContentPartHandler] = (),
    ):
        self._definitions = definitions
        self._handlers: Tuple[ContentPartHandler, ...] = ()
        self._reversed: Tuple[ContentPartHandler, ...] = ()
        for handler in part_handlers:
            self.register(handler)

    def register(self, handler: ContentPartHandler) -> ContentPartHandler:
        self._handlers = self._handlers + (handler,)
        self._reversed = tuple(reversed(self._handlers))
        logger.debug(
            "registered_part_handler",
            handler=handler_name(handler),
            part_names=sorted(handler.part_names),
        )
        return handler

    @property
    def part_handlers(self) -> Tuple[ContentPartHandler, ...]:
        return self._handlers

    async def _dispatch(
        self,
        phase: str,
        handlers: Tuple[ContentPartHandler, ...],
        context: LocalizationContext,
    ) -> None:
        record = context.content_item
        definition = self._definitions.get(record.content_type)
        if definition is None:
            return

        for part_name in definition.parts:
            part = record.content.get(part_name)
            if part is None:
                continue
            for handler in handlers:
                if not handler.handles(part_name):
                    continue
                await invoke_isolated(
                    handler,
                    phase,
                    lambda h=handler: getattr(h, phase)(context, part_name, part),
                    context,
                    part_name=part_name,
                )

    async def before_complete(self, context: LocalizationContext) -> None:
        await self._dispatch(BEFORE_PHASE, self._handlers, context)

    async def after_complete(self, context: LocalizationContext) -> None:
        await self._dispatch(AFTER_PHASE, self._reversed, context)
