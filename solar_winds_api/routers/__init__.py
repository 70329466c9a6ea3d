"""
HTTP routers of the Solar Winds API, one per resource.
"""

from . import addresses, events, sensors, users

__all__ = ["addresses", "events", "sensors", "users"]
