"""Startup and shutdown of the HTTP application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging import (
    add_app_info,
    summarize_records,
    truncate_large_values,
)
from infrastructure.logging.setup import configure_logging
from infrastructure.services import get_localization_manager, get_settings
from modules.localization.handlers import handler_name

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(
        settings=settings,
        extra_processors=[
            add_app_info("content-localization", settings.GIT_SHA),
            summarize_records(),
            truncate_large_values(),
        ],
    )


def _log_configuration(settings: "Settings", logger: BoundLogger) -> None:
    # Values of nested groups may hold secrets; only their keys are logged.
    dumped = settings.model_dump()
    groups = {
        name: sorted(value) for name, value in dumped.items() if isinstance(value, dict)
    }
    top_level = {name: value for name, value in dumped.items() if name not in groups}
    logger.info("configuration_loaded", settings=top_level, groups=groups)


def _activate_localization(app: FastAPI, logger: BoundLogger) -> None:
    manager = get_localization_manager()
    app.state.localization_manager = manager
    logger.info(
        "localization_pipeline_activated",
        handlers=[handler_name(handler) for handler in manager.pipeline.handlers],
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _log_configuration(settings, logger)

    _activate_localization(app, logger)

    yield

    logger.info("application_shutdown")
