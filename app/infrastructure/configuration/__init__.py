"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the content
localization service using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    LocalizationSettings: Localization feature settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    default_locale = settings.localization.DEFAULT_LOCALE
    supported = settings.localization.supported_locales
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.features import LocalizationSettings

__all__ = ["Settings", "settings", "LocalizationSettings"]
