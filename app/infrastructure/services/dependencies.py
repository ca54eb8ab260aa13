"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n import LocaleResolver
from infrastructure.persistence import RecordStore
from infrastructure.services.providers import (
    get_locale_resolver,
    get_localization_manager,
    get_record_store,
    get_settings,
)
from modules.localization.manager import LocalizationManager

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Request locale resolver dependency
LocaleResolverDep = Annotated[LocaleResolver, Depends(get_locale_resolver)]

# Record store dependency
RecordStoreDep = Annotated[RecordStore, Depends(get_record_store)]

# Localization manager dependency
LocalizationManagerDep = Annotated[
    LocalizationManager, Depends(get_localization_manager)
]

__all__ = [
    "SettingsDep",
    "LocaleResolverDep",
    "RecordStoreDep",
    "LocalizationManagerDep",
]
