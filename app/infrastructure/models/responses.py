"""Error body returned by every failing API route."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """JSON body of a 4xx response.

    ``error_code`` is stable and meant for clients to branch on; ``error``
    is the human-readable message and ``details`` carries the values that
    caused the failure (locale, content item id, correlation id).

    Example:
        ErrorResponse(
            error="Locale 'xx-xx' is not supported",
            error_code="UNSUPPORTED_LOCALE",
            details={"locale": "xx-xx"},
        )
    """

    success: bool = Field(default=False, description="Always False")
    error: str = Field(..., description="Human-readable message")
    error_code: str = Field(..., description="Machine-readable code")
    details: dict[str, Any] | None = Field(
        default=None, description="Values related to the failure"
    )
