"""Structlog processors used by the service.

Each function returns a processor for
``configure_logging(extra_processors=[...])``.

Usage:
    from infrastructure.logging.formatters import add_app_info, summarize_records
"""

from typing import Any

EventDict = dict[str, Any]


def add_app_info(app_name: str, app_version: str = "unknown"):
    """Stamp every entry with ``app_name`` and ``app_version``.

    Example:
        configure_logging(
            extra_processors=[add_app_info("content-localization", settings.GIT_SHA)]
        )
    """

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict["app_name"] = app_name
        event_dict["app_version"] = app_version
        return event_dict

    return processor


def summarize_records(id_attribute: str = "content_item_id"):
    """Log content records by id instead of by value.

    Records carry arbitrary payloads; a record passed to a log call by
    mistake is reduced to its ``id_attribute``.
    """

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in event_dict.items():
            if key == "event":
                continue
            record_id = getattr(value, id_attribute, None)
            if isinstance(record_id, str):
                event_dict[key] = record_id
        return event_dict

    return processor


def truncate_large_values(max_length: int = 500):
    """Cut string values longer than ``max_length`` characters.

    The truncated value notes the original length.
    """

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
