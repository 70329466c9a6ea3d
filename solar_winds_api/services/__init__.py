"""
solar_winds_api.services
------------------------

Service layer aggregation for the Solar Winds API.

Routers and other callers should import service classes from this package
instead of depending directly on repositories.

Example:

    from solar_winds_api.services import SensorsService
"""

from .addresses_service import AddressesService
from .events_service import EventsService
from .sensors_service import SensorsService
from .users_service import UsersService

__all__ = [
    "AddressesService",
    "EventsService",
    "SensorsService",
    "UsersService",
]
