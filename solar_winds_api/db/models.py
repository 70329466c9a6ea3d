# solar_winds_api/db/models.py

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Uuid,
    event,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    relationship,
)

from solar_winds_api.exceptions import InvalidAddressOwnerError


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )


def check_address_owner(user_uuid: Optional[UUID], sensor_uuid: Optional[UUID]) -> None:
    """
    Enforce that an address belongs to exactly one of {user, sensor}.
    """
    has_user = user_uuid is not None
    has_sensor = sensor_uuid is not None

    if not has_user and not has_sensor:
        raise InvalidAddressOwnerError("Address must have either user_uuid or sensor_uuid")
    if has_user and has_sensor:
        raise InvalidAddressOwnerError("Address cannot have both user_uuid and sensor_uuid")


# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------


class Address(TimestampMixin, Base):
    """
    A postal address.

    An address is either a user's home address (``user_uuid`` set) or the
    site where sensor equipment is installed (``sensor_uuid`` set), never
    both. Several sensors may share one equipment address through
    ``Sensor.equip_address_uuid``.
    """

    __tablename__ = "addresses"

    uuid: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    user_uuid: Mapped[Optional[UUID]] = mapped_column(Uuid, nullable=True, index=True)
    sensor_uuid: Mapped[Optional[UUID]] = mapped_column(Uuid, nullable=True, index=True)

    street: Mapped[str] = mapped_column(String(200), nullable=False)
    number: Mapped[str] = mapped_column(String(20), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str] = mapped_column(String(50), nullable=False)
    zipcode: Mapped[str] = mapped_column(String(20), nullable=False)
    country: Mapped[str] = mapped_column(String(100), nullable=False)

    # Relationships
    user: Mapped[Optional["User"]] = relationship(
        "User",
        back_populates="address",
        foreign_keys="User.address_uuid",
        uselist=False,
    )
    sensors: Mapped[List["Sensor"]] = relationship(
        "Sensor",
        back_populates="location",
        foreign_keys="Sensor.equip_address_uuid",
    )

    def __repr__(self) -> str:
        return f"<Address uuid={self.uuid!s} city={self.city!r}>"


@event.listens_for(Address, "before_insert")
@event.listens_for(Address, "before_update")
def _validate_address_owner(mapper, connection, target: Address) -> None:  # noqa: ARG001
    check_address_owner(target.user_uuid, target.sensor_uuid)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class User(TimestampMixin, Base):
    """
    Owner of sensors; optionally linked one-to-one with a home address.
    """

    __tablename__ = "users"

    uuid: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    document: Mapped[str] = mapped_column(String(50), nullable=False, unique=True, index=True)

    address_uuid: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("addresses.uuid", ondelete="SET NULL"),
        nullable=True,
        unique=True,
    )

    # Relationships
    address: Mapped[Optional[Address]] = relationship(
        "Address",
        back_populates="user",
        foreign_keys=[address_uuid],
    )
    sensors: Mapped[List["Sensor"]] = relationship(
        "Sensor",
        back_populates="user",
        foreign_keys="Sensor.user_uuid",
    )

    def __repr__(self) -> str:
        return f"<User uuid={self.uuid!s} document={self.document!r}>"


# ---------------------------------------------------------------------------
# Sensors
# ---------------------------------------------------------------------------


class Sensor(TimestampMixin, Base):
    """
    A solar energy generating unit installed at an equipment address.
    """

    __tablename__ = "sensors"

    uuid: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    code: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)

    equip_address_uuid: Mapped[UUID] = mapped_column(
        ForeignKey("addresses.uuid"),
        nullable=False,
        index=True,
    )
    user_uuid: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("users.uuid", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    total_events: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    angle: Mapped[float] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=False)
    power_generate: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    last_shutdown: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    total_shutdown: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    user: Mapped[Optional[User]] = relationship(
        "User",
        back_populates="sensors",
        foreign_keys=[user_uuid],
    )
    location: Mapped[Address] = relationship(
        "Address",
        back_populates="sensors",
        foreign_keys=[equip_address_uuid],
    )
    events: Mapped[List["Event"]] = relationship(
        "Event",
        back_populates="sensor",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Event.timestamp.desc()",
    )

    def __repr__(self) -> str:
        return f"<Sensor uuid={self.uuid!s} code={self.code!r}>"


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class Event(TimestampMixin, Base):
    """
    A timestamped power / heat reading produced by a sensor.
    """

    __tablename__ = "events"

    uuid: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    sensor_uuid: Mapped[UUID] = mapped_column(
        ForeignKey("sensors.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    power_generated: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    heat: Mapped[float] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=False)

    # Relationships
    sensor: Mapped[Sensor] = relationship("Sensor", back_populates="events")

    def __repr__(self) -> str:
        return f"<Event uuid={self.uuid!s} sensor_uuid={self.sensor_uuid!s} timestamp={self.timestamp!r}>"


__all__ = [
    "Base",
    "Address",
    "User",
    "Sensor",
    "Event",
    "InvalidAddressOwnerError",
    "check_address_owner",
    "utcnow",
]
