"""Structured logging for the content localization service.

``setup`` configures structlog, ``context`` carries request-scoped values
(correlation id, request locale) and ``formatters`` holds optional
processors wired in at startup.

Example:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("localization_set_created", localization_set="abc")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
    logger,
)

from infrastructure.logging.context import (
    bind_request_context,
    bind_request_locale,
    get_correlation_id,
    get_request_locale,
)

from infrastructure.logging.formatters import (
    add_app_info,
    summarize_records,
    truncate_large_values,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "logger",
    "bind_request_context",
    "bind_request_locale",
    "get_correlation_id",
    "get_request_locale",
    "add_app_info",
    "summarize_records",
    "truncate_large_values",
]
