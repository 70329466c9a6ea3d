"""
solar_winds_api/schemas/sensors.py

Pydantic models for the "sensors" HTTP API.
"""

from __future__ import annotations

from typing import ClassVar, FrozenSet, List, Optional
from uuid import UUID

from pydantic import Field

from .common import PatchModel, RequestModel, UTCDateTime
from .records import AddressRecord, EventRecord, SensorRecord, UserRecord


class SensorCreate(RequestModel):
    code: str = Field(..., min_length=1, max_length=100, description="Unique sensor code.")
    equip_address_uuid: UUID = Field(..., description="Address where the equipment is installed.")
    user_uuid: Optional[UUID] = Field(default=None, description="Owning user, if any.")
    total_events: int = Field(0, ge=0)
    angle: float = Field(..., ge=0, le=360, description="Panel angle in degrees.")
    power_generate: float = Field(..., ge=0, description="Nominal power rating.")
    last_shutdown: Optional[UTCDateTime] = None
    total_shutdown: int = Field(0, ge=0)


class SensorUpdate(PatchModel):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"user_uuid", "last_shutdown"})

    code: Optional[str] = Field(default=None, min_length=1, max_length=100)
    equip_address_uuid: Optional[UUID] = None
    user_uuid: Optional[UUID] = None
    total_events: Optional[int] = Field(default=None, ge=0)
    angle: Optional[float] = Field(default=None, ge=0, le=360)
    power_generate: Optional[float] = Field(default=None, ge=0)
    last_shutdown: Optional[UTCDateTime] = None
    total_shutdown: Optional[int] = Field(default=None, ge=0)


class SensorSearch(RequestModel):
    """
    Filters for ``POST /sensors/search``. Numeric bounds are inclusive.
    """

    code: Optional[str] = None
    equip_address_uuid: Optional[UUID] = None
    user_uuid: Optional[UUID] = None
    min_total_events: Optional[int] = Field(default=None, ge=0)
    max_total_events: Optional[int] = Field(default=None, ge=0)
    min_angle: Optional[float] = Field(default=None, ge=0, le=360)
    max_angle: Optional[float] = Field(default=None, ge=0, le=360)
    min_power_generate: Optional[float] = Field(default=None, ge=0)
    max_power_generate: Optional[float] = Field(default=None, ge=0)
    search: Optional[str] = Field(default=None, description="Case-insensitive match over code.")


class SensorRead(SensorRecord):
    """
    Full sensor representation with owner, location and events.
    """

    user: Optional[UserRecord] = None
    location: Optional[AddressRecord] = None
    events: List[EventRecord] = Field(default_factory=list)


__all__ = ["SensorCreate", "SensorUpdate", "SensorSearch", "SensorRead"]
