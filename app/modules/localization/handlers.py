"""Localization handler pipeline.

Handlers are notified around the creation of every translation:

- ``before_complete`` runs in registration order before the new record is
  persisted; handlers may still change the record.
- ``after_complete`` runs in reverse registration order once the record is
  saved, so the first handler to see a translation is the last to finish
  with it.

A handler that raises is logged and skipped; the remaining handlers and
the localization itself carry on.
"""

import inspect
from typing import Any, Awaitable, Callable, Iterable, Optional, Tuple

from infrastructure.logging import get_module_logger
from modules.localization.models import LocalizationContext

logger = get_module_logger()

BEFORE_PHASE = "before_complete"
AFTER_PHASE = "after_complete"


class LocalizationHandler:
    """Base class for localization handlers.

    Both hooks are no-ops; override the ones you need. Hooks may be
    coroutines or plain methods.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    async def before_complete(self, context: LocalizationContext) -> None:
        pass

    async def after_complete(self, context: LocalizationContext) -> None:
        pass


def handler_name(handler: Any) -> str:
    name = getattr(handler, "name", None)
    if isinstance(name, str) and name:
        return name
    return type(handler).__name__


async def invoke_isolated(
    handler: Any,
    phase: str,
    call: Callable[[], Optional[Awaitable[None]]],
    context: LocalizationContext,
    **log_context: Any,
) -> bool:
    """Run one hook call, logging and swallowing any exception it raises.

    Returns:
        True if the hook completed, False if it failed.
    """
    try:
        result = call()
        if inspect.isawaitable(result):
            await result
        return True
    except Exception as e:
        logger.error(
            "localization_handler_failed",
            handler=handler_name(handler),
            phase=phase,
            context_id=context.context_id,
            localization_set=context.localization_set,
            locale=context.locale,
            error=str(e),
            exc_info=True,
            **log_context,
        )
        return False


class HandlerPipeline:
    """Ordered registry of localization handlers.

    The reversed view used for completion notifications is rebuilt when a
    handler is registered, not on every run.
    """

    def __init__(self, handlers: Iterable[Any] = ()):
        self._handlers: Tuple[Any, ...] = ()
        self._reversed: Tuple[Any, ...] = ()
        for handler in handlers:
            self.register(handler)

    def register(self, handler: Any) -> Any:
        """Append a handler. Returns it so this can be used as a decorator."""
        self._handlers = self._handlers + (handler,)
        self._reversed = tuple(reversed(self._handlers))
        logger.debug(
            "registered_localization_handler",
            handler=handler_name(handler),
            total_handlers=len(self._handlers),
        )
        return handler

    @property
    def handlers(self) -> Tuple[Any, ...]:
        return self._handlers

    @property
    def reversed_handlers(self) -> Tuple[Any, ...]:
        return self._reversed

    def __len__(self) -> int:
        return len(self._handlers)

    async def run_before(self, context: LocalizationContext) -> None:
        """Notify handlers, in registration order, before the record is saved."""
        for handler in self._handlers:
            await invoke_isolated(
                handler,
                BEFORE_PHASE,
                lambda h=handler: h.before_complete(context),
                context,
            )

    async def run_after(self, context: LocalizationContext) -> None:
        """Notify handlers, in reverse registration order, after the save."""
        for handler in self._reversed:
            await invoke_isolated(
                handler,
                AFTER_PHASE,
                lambda h=handler: h.after_complete(context),
                context,
            )


class LoggingLocalizationHandler(LocalizationHandler):
    """Writes a structured log entry for every translation created."""

    def __init__(self):
        self.log = logger.bind(component="localization_logging_handler")

    async def after_complete(self, context: LocalizationContext) -> None:
        self.log.info(
            "translation_created",
            context_id=context.context_id,
            localization_set=context.localization_set,
            locale=context.locale,
            content_item_id=context.content_item.content_item_id,
            source_item_id=context.original.content_item_id,
            content_type=context.content_item.content_type,
        )
