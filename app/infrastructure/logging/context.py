"""Request-scoped logging context.

The HTTP middleware binds a correlation id and the locale resolved for
the request into ``structlog.contextvars``. Every log entry emitted while
the request is handled carries them, and the localization manager reads
the request locale back from here when it resolves localization sets.

Usage:
    from infrastructure.logging import bind_request_context, get_request_locale

    with bind_request_context(correlation_id="req-123", request_locale="fr-CA"):
        logger.info("processing_request")
        get_request_locale()  # "fr-ca"
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


def _normalize_locale(locale: str) -> str:
    return locale.strip().lower()


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    request_locale: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    **extra_context: Any,
) -> Generator[dict[str, Any], None, None]:
    """Bind request context for the duration of the block.

    Args:
        correlation_id: Request identifier; a UUID4 is generated when omitted.
        request_locale: Locale resolved for the request. Stored lower-cased.
        request_path: HTTP path, e.g. "/api/v1/localization/sets/abc".
        request_method: HTTP method.
        **extra_context: Any other values to bind.

    Yields:
        The bound context, including the generated correlation ID.

    The previous values are restored on exit, also when the block raises.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}
    optional = {
        "request_locale": _normalize_locale(request_locale) if request_locale else None,
        "request_path": request_path,
        "request_method": request_method,
    }
    context.update({key: value for key, value in optional.items() if value is not None})
    context.update(extra_context)

    tokens = structlog.contextvars.bind_contextvars(**context)
    try:
        yield context
    finally:
        structlog.contextvars.reset_contextvars(**tokens)


@contextmanager
def bind_request_locale(locale: str) -> Generator[None, None, None]:
    """Bind only the request locale, leaving other context untouched.

    For background work and tests acting on behalf of a request without
    going through the HTTP middleware.
    """
    tokens = structlog.contextvars.bind_contextvars(
        request_locale=_normalize_locale(locale)
    )
    try:
        yield
    finally:
        structlog.contextvars.reset_contextvars(**tokens)


def get_correlation_id() -> Optional[str]:
    """Correlation id of the current request, if any."""
    return structlog.contextvars.get_contextvars().get("correlation_id")


def get_request_locale() -> Optional[str]:
    """Lower-cased locale of the current request, or None outside a request."""
    return structlog.contextvars.get_contextvars().get("request_locale")
