"""Hook specifications for localization handler registration."""

from typing import TYPE_CHECKING

from infrastructure.hookspecs import hookspec

if TYPE_CHECKING:
    from modules.localization.handlers import HandlerPipeline
    from modules.localization.parts import (
        ContentDefinitionRegistry,
        PartHandlerCoordinator,
    )


@hookspec
def register_localization_handlers(
    pipeline: "HandlerPipeline", parts: "PartHandlerCoordinator"
) -> None:
    """Register handlers notified when a translation is created.

    Args:
        pipeline: Pipeline to register whole-record handlers with.
        parts: Coordinator to register per-part handlers with.
    """


@hookspec
def register_content_types(definitions: "ContentDefinitionRegistry") -> None:
    """Declare content types and the parts they are made of.

    Args:
        definitions: Registry to add content type definitions to.
    """
