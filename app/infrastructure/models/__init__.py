"""Infrastructure models and response wrappers.

This module provides standardized Pydantic models and response wrappers
for consistent data validation and API response formatting across the application.

Exports:
    ContentPart: Typed view over a named part of a content record
    ContentRecord: Stored content document
    ErrorResponse: Standard error response with error details
    InfrastructureModel: Base model configuration for infrastructure components
"""

from infrastructure.models.base import InfrastructureModel
from infrastructure.models.content import ContentPart, ContentRecord
from infrastructure.models.responses import ErrorResponse

__all__ = [
    "ContentPart",
    "ContentRecord",
    "ErrorResponse",
    "InfrastructureModel",
]
