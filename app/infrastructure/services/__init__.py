"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    LocaleResolverDep,
    LocalizationManagerDep,
    RecordStoreDep,
    SettingsDep,
)
from infrastructure.services.providers import (
    get_content_definitions,
    get_handler_pipeline,
    get_id_generator,
    get_locale_directory,
    get_locale_resolver,
    get_localization_manager,
    get_record_store,
    get_settings,
)

__all__ = [
    "LocaleResolverDep",
    "LocalizationManagerDep",
    "RecordStoreDep",
    "SettingsDep",
    "get_content_definitions",
    "get_handler_pipeline",
    "get_id_generator",
    "get_locale_directory",
    "get_locale_resolver",
    "get_localization_manager",
    "get_record_store",
    "get_settings",
]
