"""
solar_winds_api/schemas/addresses.py

Pydantic models for the "addresses" HTTP API.

An address belongs to exactly one owner: a user (home address) or a
sensor (equipment site). The exclusivity rule is checked by the service
layer so that a violation maps to 400 rather than a schema error.
"""

from __future__ import annotations

from typing import ClassVar, FrozenSet, List, Optional
from uuid import UUID

from pydantic import Field

from .common import PatchModel, RequestModel
from .records import AddressRecord, SensorRecord, UserRecord


class AddressCreate(RequestModel):
    user_uuid: Optional[UUID] = None
    sensor_uuid: Optional[UUID] = None
    street: str = Field(..., min_length=1, max_length=200)
    number: str = Field(..., min_length=1, max_length=20)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=50)
    zipcode: str = Field(..., min_length=1, max_length=20)
    country: str = Field(..., min_length=1, max_length=100)


class AddressUpdate(PatchModel):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"user_uuid", "sensor_uuid"})

    user_uuid: Optional[UUID] = None
    sensor_uuid: Optional[UUID] = None
    street: Optional[str] = Field(default=None, min_length=1, max_length=200)
    number: Optional[str] = Field(default=None, min_length=1, max_length=20)
    city: Optional[str] = Field(default=None, min_length=1, max_length=100)
    state: Optional[str] = Field(default=None, min_length=1, max_length=50)
    zipcode: Optional[str] = Field(default=None, min_length=1, max_length=20)
    country: Optional[str] = Field(default=None, min_length=1, max_length=100)


class AddressSearch(RequestModel):
    user_uuid: Optional[UUID] = None
    sensor_uuid: Optional[UUID] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None
    country: Optional[str] = None
    search: Optional[str] = Field(
        default=None,
        description="Case-insensitive match over street, city, state and country.",
    )


class AddressRead(AddressRecord):
    user: Optional[UserRecord] = None
    sensors: List[SensorRecord] = Field(default_factory=list)


__all__ = ["AddressCreate", "AddressUpdate", "AddressSearch", "AddressRead"]
