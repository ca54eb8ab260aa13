from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from infrastructure.configuration import settings
from infrastructure.logging import get_module_logger
from infrastructure.services import get_locale_resolver
from server.errors import setup_error_handlers
from server.lifespan import lifespan
from server.request_context import RequestContextMiddleware

logger = get_module_logger()


handler = FastAPI(title="Content Localization", lifespan=lifespan)
setup_rate_limiter(handler)
setup_error_handlers(handler)


allow_origins = ["*"] if settings.is_production else settings.server.ALLOWED_ORIGINS
handler.add_middleware(
    RequestContextMiddleware,
    resolver_provider=get_locale_resolver,
    query_parameter=settings.server.LOCALE_QUERY_PARAMETER,
)
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Correlation-ID", "Content-Language"],
)


handler.include_router(api_router)
