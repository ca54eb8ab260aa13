"""Structlog configuration and module loggers.

Every log entry carries the request context bound by the HTTP middleware
(correlation id, request locale), a timestamp and its call site. Output
is rendered for humans in development and as JSON in production; under
pytest nothing is emitted.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    # At application startup
    configure_logging(extra_processors=[add_app_info("content-localization")])

    # At the top of a module
    logger = get_module_logger()
    logger.info("translation_created", localization_set="abc", locale="fr-ca")

Dependencies:
    - infrastructure.configuration.Settings
"""

import inspect
import logging
import sys
from typing import TYPE_CHECKING, Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.configuration import settings as default_settings

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """True when running under pytest."""
    return "pytest" in sys.modules


def _enrichment_processors() -> List[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _silence() -> BoundLogger:
    # Keep a minimal chain so bound loggers still work; the root level
    # drops every record before it is rendered.
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
    logging.root.setLevel(SILENT_LEVEL)
    return structlog.stdlib.get_logger()


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional["Settings"] = None,
    extra_processors: Optional[List[Any]] = None,
) -> BoundLogger:
    """Configure structlog over the standard library logging module.

    Args:
        log_level: Level name overriding settings.LOG_LEVEL.
        is_production: Overrides settings.is_production; selects JSON
            instead of console rendering.
        settings: Settings to read defaults from. Defaults to the module
            singleton.
        extra_processors: Processors run after enrichment and before
            rendering (see infrastructure.logging.formatters).

    Returns:
        A configured logger.
    """
    if _is_test_environment():
        return _silence()

    active_settings = settings or default_settings
    production = (
        is_production if is_production is not None else active_settings.is_production
    )

    processors = _enrichment_processors() + list(extra_processors or [])
    if production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or active_settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return structlog.stdlib.get_logger()


# Module-level logger (configured on import)
logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Binds ``component`` (the last segment of the module name) and
    ``module_path`` (the full dotted name).

    Example:
        # In modules/localization/manager.py
        logger = get_module_logger()
        # context: {"component": "manager", "module_path": "modules.localization.manager"}
    """
    current_frame = inspect.currentframe()
    caller = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    module_name = module.__name__
    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
