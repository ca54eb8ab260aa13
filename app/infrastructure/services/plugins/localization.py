"""Localization handler plugin manager."""

from functools import lru_cache
from typing import TYPE_CHECKING, List, Optional

import pluggy
import structlog

from infrastructure.hookspecs import PROJECT_NAME
from infrastructure.hookspecs import localization as localization_hookspecs
from infrastructure.services.plugins.base import auto_discover_plugins

if TYPE_CHECKING:
    from modules.localization.handlers import HandlerPipeline
    from modules.localization.parts import (
        ContentDefinitionRegistry,
        PartHandlerCoordinator,
    )

logger = structlog.get_logger()


@lru_cache(maxsize=1)
def get_localization_plugin_manager() -> pluggy.PluginManager:
    """Get the localization plugin manager singleton.

    Returns:
        PluginManager configured with the localization hook specifications.
    """
    pm = pluggy.PluginManager(PROJECT_NAME)
    pm.add_hookspecs(localization_hookspecs)

    logger.info("localization_plugin_manager_created")
    return pm


def discover_and_register_localization_plugins(
    pipeline: "HandlerPipeline",
    parts: "PartHandlerCoordinator",
    definitions: "ContentDefinitionRegistry",
    pm: Optional[pluggy.PluginManager] = None,
    base_packages: Optional[List[str]] = None,
) -> pluggy.PluginManager:
    """Discover plugins and let them register content types and handlers.

    Content types are declared first so part handlers can rely on them.
    pluggy calls implementations in reverse registration order; handlers
    registered by a single plugin keep the order that plugin uses.
    """
    pm = pm or get_localization_plugin_manager()

    auto_discover_plugins(pm, base_packages=base_packages or ["modules"])
    logger.info("localization_plugins_discovered", plugin_count=len(pm.get_plugins()))

    pm.hook.register_content_types(definitions=definitions)
    pm.hook.register_localization_handlers(pipeline=pipeline, parts=parts)

    logger.info(
        "localization_handlers_registered",
        handler_count=len(pipeline),
        part_handler_count=len(parts.part_handlers),
    )
    return pm
