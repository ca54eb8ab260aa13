"""Settings base classes.

Every settings group reads the process environment first and then a
local ``.env`` file. Variable names are matched exactly and unknown
variables are ignored, so groups can share one environment.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_CONFIG = SettingsConfigDict(
    env_file=".env",
    case_sensitive=True,
    extra="ignore",
)


class FeatureSettings(BaseSettings):
    """Settings owned by a feature module, e.g. localization."""

    model_config = _ENV_CONFIG


class InfrastructureSettings(BaseSettings):
    """Settings for the service itself: HTTP server, request handling."""

    model_config = _ENV_CONFIG
