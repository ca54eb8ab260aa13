"""Content localization feature settings."""

from typing import List

from pydantic import Field, field_validator, model_validator

from infrastructure.configuration.base import FeatureSettings


class LocalizationSettings(FeatureSettings):
    """Content localization configuration.

    Environment Variables:
        DEFAULT_LOCALE: Locale assigned to records when they join their first set
        SUPPORTED_LOCALES: JSON list of locales content may be localized into
        ENFORCE_UNIQUE_LOCALE: Reject a second record for the same set and locale

    Example:
        ```python
        from infrastructure.configuration import settings

        default_locale = settings.localization.DEFAULT_LOCALE
        if "fr-ca" in settings.localization.supported_locales:
            ...
        ```
    """

    DEFAULT_LOCALE: str = Field(default="en-US", alias="DEFAULT_LOCALE")
    SUPPORTED_LOCALES: List[str] = Field(
        default=["en-US", "fr-CA"], alias="SUPPORTED_LOCALES"
    )
    ENFORCE_UNIQUE_LOCALE: bool = Field(default=True, alias="ENFORCE_UNIQUE_LOCALE")

    @field_validator("SUPPORTED_LOCALES", mode="after")
    @classmethod
    def strip_blank_locales(cls, v: List[str]) -> List[str]:
        """Drop empty entries and surrounding whitespace."""
        return [locale.strip() for locale in v if locale and locale.strip()]

    @model_validator(mode="after")
    def ensure_default_is_supported(self) -> "LocalizationSettings":
        """The default locale is always part of the supported set."""
        supported = {locale.lower() for locale in self.SUPPORTED_LOCALES}
        if self.DEFAULT_LOCALE.strip().lower() not in supported:
            self.SUPPORTED_LOCALES = [self.DEFAULT_LOCALE, *self.SUPPORTED_LOCALES]
        return self

    @property
    def supported_locales(self) -> set[str]:
        """Supported locales in canonical lower-case form."""
        return {locale.lower() for locale in self.SUPPORTED_LOCALES}
