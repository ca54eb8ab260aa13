"""Translate domain errors into HTTP error responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from infrastructure.logging import get_correlation_id, get_module_logger
from infrastructure.models import ErrorResponse
from infrastructure.persistence import UniqueConstraintError
from modules.localization.exceptions import (
    RecordNotFoundError,
    UnsupportedLocaleError,
)

logger = get_module_logger()


def _error(status_code: int, error: Exception, error_code: str, **details):
    correlation_id = get_correlation_id()
    if correlation_id:
        details["correlation_id"] = correlation_id
    body = ErrorResponse(error=str(error), error_code=error_code, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def unsupported_locale_handler(_request: Request, exc: Exception):
    """400 for a localize call into a locale the service does not serve."""
    if isinstance(exc, UnsupportedLocaleError):
        return _error(
            status.HTTP_400_BAD_REQUEST,
            exc,
            "UNSUPPORTED_LOCALE",
            locale=exc.locale,
            supported=exc.supported,
        )


async def record_not_found_handler(_request: Request, exc: Exception):
    """404 for a content item or set member that does not exist."""
    if isinstance(exc, RecordNotFoundError):
        return _error(
            status.HTTP_404_NOT_FOUND,
            exc,
            "RECORD_NOT_FOUND",
            content_item_id=exc.content_item_id,
        )


async def unique_constraint_handler(_request: Request, exc: Exception):
    """409 when a save would break a unique index."""
    if isinstance(exc, UniqueConstraintError):
        logger.warning(
            "unique_constraint_violated",
            index=exc.index_name,
            values=exc.values,
            existing_id=exc.existing_id,
        )
        return _error(
            status.HTTP_409_CONFLICT,
            exc,
            "DUPLICATE_LOCALIZATION",
            existing_id=exc.existing_id,
            **exc.values,
        )


def setup_error_handlers(app: FastAPI):
    """
    Register the domain error handlers on the FastAPI application.
    """
    app.add_exception_handler(UnsupportedLocaleError, unsupported_locale_handler)
    app.add_exception_handler(RecordNotFoundError, record_not_found_handler)
    app.add_exception_handler(UniqueConstraintError, unique_constraint_handler)
