# solar_winds_api/logging/__init__.py

"""
Logging helpers for the Solar Winds API.

API code simply does:

    from solar_winds_api.logging import get_logger

    logger = get_logger(__name__)
    logger.info("sensor_created", code=sensor.code)

and stays decoupled from how structlog is configured (see
``solar_winds_api.logging.config``).
"""

from __future__ import annotations

from typing import Any, Optional

import structlog


DEFAULT_LOGGER_NAME = "solar_winds_api"


def get_logger(name: Optional[str] = None) -> Any:
    """
    Get a structlog logger bound to ``name``.

    If ``name`` is omitted, the service-level default name is used.
    """
    return structlog.get_logger(name or DEFAULT_LOGGER_NAME)


__all__ = ["get_logger", "DEFAULT_LOGGER_NAME"]
