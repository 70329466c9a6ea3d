# solar_winds_api/logging/config.py

"""
Logging configuration for the Solar Winds API service.

Typical usage in the API entrypoint (``solar_winds_api/main.py``)::

    from solar_winds_api.logging.config import configure_logging

    log = configure_logging()
    log.info("app_startup")

Logs are structured: JSON in production, colored key/value lines during
development. Standard library logging (uvicorn, SQLAlchemy) is sent to
stdout at the same level so everything ends up in one stream.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, List, Optional

import structlog

from solar_winds_api.config import Settings, get_settings

from . import DEFAULT_LOGGER_NAME, get_logger


def _parse_level(value: Optional[str]) -> int:
    """
    Map a string log level (e.g. 'DEBUG', 'info') to a logging constant.

    Unknown values fall back to INFO.
    """
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    settings: Optional[Settings] = None,
    *,
    service_name: str = DEFAULT_LOGGER_NAME,
) -> Any:
    """
    Configure structlog and the standard logging library, and return a
    logger for ``service_name``.
    """
    settings = settings or get_settings()
    level = _parse_level(settings.LOG_LEVEL)

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.LOG_FORMAT.lower() == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    return get_logger(service_name)


__all__ = ["configure_logging"]
