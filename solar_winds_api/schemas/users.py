"""
solar_winds_api/schemas/users.py

Pydantic models for the "users" HTTP API.
"""

from __future__ import annotations

from typing import ClassVar, FrozenSet, List, Optional
from uuid import UUID

from pydantic import Field

from .common import PatchModel, RequestModel
from .records import AddressRecord, SensorRecord, UserRecord


class UserCreate(RequestModel):
    name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    document: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Identity document number; unique across users.",
    )
    address_uuid: Optional[UUID] = Field(
        default=None,
        description="Home address of the user, if already registered.",
    )


class UserUpdate(PatchModel):
    """
    Partial update payload. Only provided fields are patched.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"address_uuid"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    document: Optional[str] = Field(default=None, min_length=1, max_length=50)
    address_uuid: Optional[UUID] = None


class UserSearch(RequestModel):
    """
    Field-level filters; all given filters must match.
    """

    name: Optional[str] = None
    last_name: Optional[str] = None
    document: Optional[str] = None
    address_uuid: Optional[UUID] = None
    search: Optional[str] = Field(
        default=None,
        description="Case-insensitive match over name, last_name and document.",
    )


class UserRead(UserRecord):
    """
    Full user representation with its address and sensors.
    """

    address: Optional[AddressRecord] = None
    sensors: List[SensorRecord] = Field(default_factory=list)


__all__ = ["UserCreate", "UserUpdate", "UserSearch", "UserRead"]
