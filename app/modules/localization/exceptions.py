"""Errors for the localization module."""

from typing import Iterable, Optional

from infrastructure.persistence.exceptions import UniqueConstraintError


class LocalizationError(Exception):
    """Base exception for content localization errors."""

    pass


class UnsupportedLocaleError(LocalizationError):
    """Raised when asked to localize into a locale that is not supported.

    Attributes:
        locale: The requested locale
        supported: The supported locales at the time of the call
    """

    def __init__(self, locale: str, supported: Optional[Iterable[str]] = None):
        self.locale = locale
        self.supported = sorted(supported or [])
        super().__init__(f"Cannot localize into unsupported locale '{locale}'")


class DuplicateLocalizationError(LocalizationError, UniqueConstraintError):
    """Raised by the store when a set already has a record in a locale."""

    def __init__(self, localization_set: str, locale: str, existing_id: str):
        self.localization_set = localization_set
        self.locale = locale
        UniqueConstraintError.__init__(
            self,
            "LocalizationIndexEntry",
            {"localization_set": localization_set, "locale": locale},
            existing_id,
        )


class RecordNotFoundError(LocalizationError):
    """Raised by the HTTP layer when a referenced record does not exist."""

    def __init__(self, content_item_id: str):
        self.content_item_id = content_item_id
        super().__init__(f"Content item '{content_item_id}' not found")
