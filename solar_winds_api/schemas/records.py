"""
solar_winds_api/schemas/records.py

Flat response shapes for each table, one row without its relations.

Resource schemas embed these to expose relations one level deep without
recursing back (a user embeds its sensors as ``SensorRecord`` items, and
those do not embed the user again).
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import Field

from .common import APIModel, UTCDateTime


class AddressRecord(APIModel):
    uuid: UUID
    user_uuid: Optional[UUID] = None
    sensor_uuid: Optional[UUID] = None
    street: str
    number: str
    city: str
    state: str
    zipcode: str
    country: str
    created_at: UTCDateTime
    updated_at: UTCDateTime


class UserRecord(APIModel):
    uuid: UUID
    name: str
    last_name: str
    document: str
    address_uuid: Optional[UUID] = None
    created_at: UTCDateTime
    updated_at: UTCDateTime


class SensorRecord(APIModel):
    uuid: UUID
    code: str
    equip_address_uuid: UUID
    user_uuid: Optional[UUID] = None
    total_events: int = Field(0, description="Number of events recorded for the sensor.")
    angle: float = Field(..., description="Panel angle in degrees (0-360).")
    power_generate: float = Field(..., description="Nominal power rating.")
    last_shutdown: Optional[UTCDateTime] = None
    total_shutdown: int = 0
    created_at: UTCDateTime
    updated_at: UTCDateTime


class EventRecord(APIModel):
    uuid: UUID
    sensor_uuid: UUID
    power_generated: float
    timestamp: UTCDateTime
    heat: float
    created_at: UTCDateTime
    updated_at: UTCDateTime


__all__ = ["AddressRecord", "UserRecord", "SensorRecord", "EventRecord"]
