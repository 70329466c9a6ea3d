"""
Top-level export module for HTTP API schemas.
"""

from . import addresses, common, events, records, sensors, users

from .common import APIModel, ErrorResponse, PatchModel, RequestModel
from .records import AddressRecord, EventRecord, SensorRecord, UserRecord
from .users import UserCreate, UserRead, UserSearch, UserUpdate
from .addresses import AddressCreate, AddressRead, AddressSearch, AddressUpdate
from .sensors import SensorCreate, SensorRead, SensorSearch, SensorUpdate
from .events import EventCreate, EventRead, EventSearch, EventUpdate, SensorStats

__all__ = [
    # Submodules
    "common", "records", "users", "addresses", "sensors", "events",

    # Common
    "APIModel", "RequestModel", "PatchModel", "ErrorResponse",

    # Records
    "AddressRecord", "UserRecord", "SensorRecord", "EventRecord",

    # Resources
    "UserCreate", "UserUpdate", "UserSearch", "UserRead",
    "AddressCreate", "AddressUpdate", "AddressSearch", "AddressRead",
    "SensorCreate", "SensorUpdate", "SensorSearch", "SensorRead",
    "EventCreate", "EventUpdate", "EventSearch", "EventRead", "SensorStats",
]
