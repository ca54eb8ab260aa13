"""Infrastructure modules for the content localization service.

Centralized infrastructure components:
- configuration: Settings management (settings, LocalizationSettings)
- logging: Structured logging and request context (get_module_logger, logger)
- i18n: Locale canonicalisation, locale directory and request locale resolution
- models: Base models and the ContentRecord document
- persistence: Record store, index providers and identifier generation
- hookspecs: Plugin hook specifications
- services: Dependency injection providers (SettingsDep, get_settings)
"""

# Configuration
from infrastructure.configuration import settings

# Observability
from infrastructure.logging import get_module_logger, logger

__all__ = [
    # Configuration
    "settings",
    # Observability
    "get_module_logger",
    "logger",
]
