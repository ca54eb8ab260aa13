"""Content localization module.

Groups content records that translate one another into localization sets,
creates translations through an extensible handler pipeline, and resolves
the best record of each set for the current request's locale.

Features:
- Localization sets with at most one record per locale
- Before/after handler pipeline with per-handler fault isolation
- Per-part handler dispatch driven by content type definitions
- Set resolution: request locale, then default locale, then any member
- Field synchronisation across all members of a set

Handlers are contributed by plugins implementing the
``register_localization_handlers`` hook; this module registers a logging
handler for every translation created.
"""

from infrastructure.hookspecs import hookimpl
from modules.localization.exceptions import (
    DuplicateLocalizationError,
    LocalizationError,
    RecordNotFoundError,
    UnsupportedLocaleError,
)
from modules.localization.handlers import (
    HandlerPipeline,
    LocalizationHandler,
    LoggingLocalizationHandler,
)
from modules.localization.indexes import LocalizationIndexProvider
from modules.localization.manager import LocalizationManager
from modules.localization.merge import MergeArrayHandling, merge_json
from modules.localization.models import (
    ContentTypeDefinition,
    LocalizationContext,
    LocalizationIndexEntry,
    LocalizationPart,
)
from modules.localization.parts import (
    ContentDefinitionRegistry,
    ContentPartHandler,
    PartHandlerCoordinator,
)
from modules.localization.resolver import resolve_single_per_set


@hookimpl
def register_localization_handlers(
    pipeline: HandlerPipeline, parts: PartHandlerCoordinator
) -> None:
    pipeline.register(LoggingLocalizationHandler())


__all__ = [
    "ContentDefinitionRegistry",
    "ContentPartHandler",
    "ContentTypeDefinition",
    "DuplicateLocalizationError",
    "HandlerPipeline",
    "LocalizationContext",
    "LocalizationError",
    "LocalizationHandler",
    "LocalizationIndexEntry",
    "LocalizationIndexProvider",
    "LocalizationManager",
    "LocalizationPart",
    "LoggingLocalizationHandler",
    "MergeArrayHandling",
    "PartHandlerCoordinator",
    "RecordNotFoundError",
    "UnsupportedLocaleError",
    "merge_json",
    "register_localization_handlers",
    "resolve_single_per_set",
]
