"""Base model for the documents the service stores and exchanges."""

from pydantic import BaseModel, ConfigDict


class InfrastructureModel(BaseModel):
    """Shared configuration for content records and their typed parts.

    Assignments are validated, so a typed part stays canonical after it is
    edited in place (a locale written back in upper case is lowered
    again). Surrounding whitespace is stripped from ids and locales.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        str_strip_whitespace=True,
        from_attributes=True,  # Build records from ORM rows or other objects
    )
