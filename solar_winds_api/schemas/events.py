"""
solar_winds_api/schemas/events.py

Pydantic models for the "events" HTTP API: power / heat readings of a
sensor and the per-sensor statistics aggregate.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from .common import APIModel, PatchModel, RequestModel, UTCDateTime
from .records import EventRecord, SensorRecord


class EventCreate(RequestModel):
    sensor_uuid: UUID
    power_generated: float = Field(..., ge=0)
    timestamp: UTCDateTime = Field(..., description="ISO-8601 reading time; naive values are UTC.")
    heat: float = Field(..., ge=0)


class EventUpdate(PatchModel):
    sensor_uuid: Optional[UUID] = None
    power_generated: Optional[float] = Field(default=None, ge=0)
    timestamp: Optional[UTCDateTime] = None
    heat: Optional[float] = Field(default=None, ge=0)


class EventSearch(RequestModel):
    sensor_uuid: Optional[UUID] = None
    min_power_generated: Optional[float] = Field(default=None, ge=0)
    max_power_generated: Optional[float] = Field(default=None, ge=0)
    start_date: Optional[UTCDateTime] = None
    end_date: Optional[UTCDateTime] = None
    min_heat: Optional[float] = Field(default=None, ge=0)
    max_heat: Optional[float] = Field(default=None, ge=0)


class EventRead(EventRecord):
    sensor: Optional[SensorRecord] = None


class SensorStats(APIModel):
    """
    Aggregate over all events of one sensor.

    Serialized with camelCase keys (``totalEvents``, ``lastEvent``...), the
    shape the dashboard charts consume.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_events: int = 0
    total_power_generated: float = 0.0
    average_power_generated: float = 0.0
    average_heat: float = 0.0
    last_event: Optional[UTCDateTime] = None


__all__ = ["EventCreate", "EventUpdate", "EventSearch", "EventRead", "SensorStats"]
