# solar_winds_api/repositories/__init__.py
"""
Repository layer public exports.

Downstream code can import from this module instead of individual files, e.g.:

    from solar_winds_api.repositories import SensorsRepository
"""

from .base import BaseRepository
from .addresses import AddressesRepository
from .events import EventAggregate, EventsRepository
from .sensors import SensorsRepository
from .users import UsersRepository

__all__ = [
    "BaseRepository",
    "AddressesRepository",
    "EventAggregate",
    "EventsRepository",
    "SensorsRepository",
    "UsersRepository",
]
