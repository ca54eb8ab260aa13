"""Per-client rate limiting for the public routes."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from infrastructure.models import ErrorResponse

# Clients are keyed by remote address.
limiter = Limiter(key_func=get_remote_address)


async def rate_limit_handler(_request: Request, exc: Exception):
    if isinstance(exc, RateLimitExceeded):
        body = ErrorResponse(
            error="Rate limit exceeded",
            error_code="RATE_LIMITED",
            details={"limit": str(exc.detail)},
        )
        return JSONResponse(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            content=body.model_dump(),
        )


def setup_rate_limiter(app: FastAPI):
    """Attach the limiter to ``app.state`` and register the 429 handler."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter() -> Limiter:
    return limiter
