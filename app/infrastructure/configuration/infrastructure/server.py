"""Server infrastructure settings."""

from typing import List

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and request handling configuration.

    Environment Variables:
        ALLOWED_ORIGINS: JSON list of CORS origins allowed outside production
        LOCALE_QUERY_PARAMETER: Query parameter that overrides the request locale

    Example:
        ```python
        from infrastructure.configuration import settings

        origins = settings.server.ALLOWED_ORIGINS
        parameter = settings.server.LOCALE_QUERY_PARAMETER
        ```
    """

    ALLOWED_ORIGINS: List[str] = Field(
        default=["http://localhost:8000", "http://127.0.0.1:8000"],
        alias="ALLOWED_ORIGINS",
    )
    LOCALE_QUERY_PARAMETER: str = Field(
        default="culture", alias="LOCALE_QUERY_PARAMETER"
    )
