"""Plugin managers and utilities."""

from infrastructure.hookspecs import hookimpl
from infrastructure.services.plugins.localization import (
    discover_and_register_localization_plugins,
    get_localization_plugin_manager,
)

__all__ = [
    "hookimpl",
    "discover_and_register_localization_plugins",
    "get_localization_plugin_manager",
]
