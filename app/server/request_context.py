from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.i18n import LocaleResolver
from infrastructure.logging import bind_request_context

CORRELATION_ID_HEADER = "X-Correlation-ID"
CONTENT_LANGUAGE_HEADER = "Content-Language"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds the correlation id and request locale for the whole request.

    The locale comes from the locale query parameter when it names a
    supported locale, then from Accept-Language, then the default locale.
    Both values are echoed back as response headers.
    """

    def __init__(
        self,
        app,
        resolver_provider: Callable[[], LocaleResolver],
        query_parameter: str = "culture",
    ):
        super().__init__(app)
        self.resolver_provider = resolver_provider
        self.query_parameter = query_parameter

    async def dispatch(self, request, call_next):
        locale = self.resolver_provider().resolve(
            requested=request.query_params.get(self.query_parameter),
            accept_language=request.headers.get("accept-language"),
        )
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_ID_HEADER),
            request_locale=locale,
            request_path=request.url.path,
            request_method=request.method,
        ) as context:
            response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = context["correlation_id"]
        response.headers[CONTENT_LANGUAGE_HEADER] = locale
        return response
