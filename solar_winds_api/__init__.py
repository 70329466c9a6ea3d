"""
solar_winds_api
---------------

HTTP API for monitoring solar panel sensors: users, their addresses, the
sensors installed at equipment addresses, and the power / heat events the
sensors report.

The ASGI application lives in ``solar_winds_api.main:app``.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("solar-winds-api")
except _metadata.PackageNotFoundError:  # When running from source tree
    __version__ = "0.0.0"

__all__ = ["__version__"]
