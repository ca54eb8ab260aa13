"""Locale directory: the supported locales and the default locale.

The directory is consumed asynchronously so implementations backed by a
database or a remote configuration service can be swapped in.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Set, TYPE_CHECKING

from infrastructure.i18n.locales import canonical_locale

if TYPE_CHECKING:
    from infrastructure.configuration import LocalizationSettings


class LocaleDirectory(ABC):
    """Source of truth for which locales content may be localized into."""

    @abstractmethod
    async def list_supported_locales(self) -> Set[str]:
        """Return the supported locales in canonical form."""

    @abstractmethod
    async def get_default_locale(self) -> str:
        """Return the process default locale in canonical form."""


class StaticLocaleDirectory(LocaleDirectory):
    """Locale directory over a fixed list of locales.

    The default locale is always treated as supported.
    """

    def __init__(self, supported: Iterable[str], default: str):
        self._default = canonical_locale(default)
        self._supported = {canonical_locale(locale) for locale in supported}
        self._supported.add(self._default)

    async def list_supported_locales(self) -> Set[str]:
        return set(self._supported)

    async def get_default_locale(self) -> str:
        return self._default


class SettingsLocaleDirectory(StaticLocaleDirectory):
    """Locale directory built from LocalizationSettings."""

    def __init__(self, localization_settings: "LocalizationSettings"):
        super().__init__(
            supported=localization_settings.SUPPORTED_LOCALES,
            default=localization_settings.DEFAULT_LOCALE,
        )
