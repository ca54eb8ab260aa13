"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure
services and the localization manager.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import LocaleDirectory, LocaleResolver, SettingsLocaleDirectory
from infrastructure.persistence import (
    IdentifierGenerator,
    InMemoryRecordStore,
    RandomIdGenerator,
    RecordStore,
)
from infrastructure.services.plugins import discover_and_register_localization_plugins
from modules.localization.handlers import HandlerPipeline
from modules.localization.indexes import LocalizationIndexProvider
from modules.localization.manager import LocalizationManager
from modules.localization.parts import ContentDefinitionRegistry, PartHandlerCoordinator


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_locale_directory() -> LocaleDirectory:
    """Get the locale directory built from localization settings."""
    return SettingsLocaleDirectory(get_settings().localization)


@lru_cache
def get_locale_resolver() -> LocaleResolver:
    """Get the request locale resolver built from localization settings."""
    localization = get_settings().localization
    return LocaleResolver(
        supported_locales=localization.SUPPORTED_LOCALES,
        default_locale=localization.DEFAULT_LOCALE,
    )


@lru_cache
def get_id_generator() -> IdentifierGenerator:
    """Get the identifier generator used for set and record ids."""
    return RandomIdGenerator()


@lru_cache
def get_record_store() -> RecordStore:
    """
    Get the application-scoped record store.

    The store indexes records by localization set and locale. With
    ENFORCE_UNIQUE_LOCALE enabled it rejects a second record for the same
    set and locale.
    """
    unique = get_settings().localization.ENFORCE_UNIQUE_LOCALE
    return InMemoryRecordStore(
        index_providers=[LocalizationIndexProvider(unique=unique)]
    )


@lru_cache
def get_content_definitions() -> ContentDefinitionRegistry:
    """Get the registry of content type definitions."""
    return ContentDefinitionRegistry()


@lru_cache
def get_handler_pipeline() -> HandlerPipeline:
    """
    Get the localization handler pipeline.

    The part handler coordinator is registered first; plugins discovered
    under ``modules`` then register their own handlers and content types.
    """
    parts = PartHandlerCoordinator(get_content_definitions())
    pipeline = HandlerPipeline([parts])
    discover_and_register_localization_plugins(
        pipeline=pipeline,
        parts=parts,
        definitions=get_content_definitions(),
    )
    return pipeline


@lru_cache
def get_localization_manager() -> LocalizationManager:
    """
    Get application-scoped localization manager singleton.

    Usage:
        @router.post("/items/{content_item_id}/localize")
        async def localize(content_item_id: str, manager: LocalizationManagerDep):
            ...
    """
    return LocalizationManager(
        store=get_record_store(),
        locales=get_locale_directory(),
        id_generator=get_id_generator(),
        pipeline=get_handler_pipeline(),
    )
