"""Top-level application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.features import LocalizationSettings
from infrastructure.configuration.infrastructure import ServerSettings

_SETTINGS_GROUPS = {
    "localization": LocalizationSettings,
    "server": ServerSettings,
}


class Settings(BaseSettings):
    """All configuration of the service in one object.

    Feature groups (``localization``) and infrastructure groups
    (``server``) read their own environment variables; each is built on
    construction unless passed in explicitly, which is how tests swap a
    single group.

    Environment Variables:
        PREFIX: Deployment prefix; empty in production.
        LOG_LEVEL: DEBUG, INFO, WARNING or ERROR.
        GIT_SHA: Commit deployed, reported by ``GET /version``.

    Example:
        from infrastructure.configuration import settings

        settings.localization.DEFAULT_LOCALE
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    localization: LocalizationSettings
    server: ServerSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    def __init__(self, **kwargs):
        for name, group in _SETTINGS_GROUPS.items():
            if name not in kwargs:
                kwargs[name] = group()
        super().__init__(**kwargs)

    @property
    def is_production(self) -> bool:
        """Production deployments run without a PREFIX."""
        return not self.PREFIX


settings = Settings()
