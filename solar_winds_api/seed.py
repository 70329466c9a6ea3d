# solar_winds_api/seed.py

"""
Populate the database with demo data for the dashboard.

Creates five users with home addresses, five equipment addresses, ten
sensors spread over them and a few weeks of simulated readings that follow
a daylight curve with random weather.

Usage:
    solar-winds-seed [--days 30] [--seed 42] [--create-schema]
    python -m solar_winds_api.seed
"""

from __future__ import annotations

import argparse
import math
import random
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional
from uuid import UUID, uuid4

from sqlalchemy.orm import Session

from solar_winds_api.db import models
from solar_winds_api.db.session import db_session, init_db
from solar_winds_api.logging import get_logger
from solar_winds_api.logging.config import configure_logging
from solar_winds_api.repositories import (
    AddressesRepository,
    EventsRepository,
    SensorsRepository,
    UsersRepository,
)

logger = get_logger(__name__)

EVENT_INTERVAL = timedelta(hours=2)

HOME_ADDRESSES = [
    dict(street="Rua das Flores", number="123", city="São Paulo", state="SP", zipcode="01234-567", country="Brasil"),
    dict(street="Avenida Paulista", number="1000", city="São Paulo", state="SP", zipcode="01310-100", country="Brasil"),
    dict(street="Rua Oscar Freire", number="456", city="São Paulo", state="SP", zipcode="01426-001", country="Brasil"),
    dict(street="Avenida Faria Lima", number="2500", city="São Paulo", state="SP", zipcode="01452-000", country="Brasil"),
    dict(street="Rua Augusta", number="789", city="São Paulo", state="SP", zipcode="01305-000", country="Brasil"),
]

EQUIPMENT_ADDRESSES = [
    dict(street="Estrada Rural Solar", number="KM 15", city="Ribeirão Preto", state="SP", zipcode="14000-000", country="Brasil"),
    dict(street="Fazenda Energia Limpa", number="S/N", city="Campinas", state="SP", zipcode="13000-000", country="Brasil"),
    dict(street="Parque Solar Central", number="Lote 10", city="Sorocaba", state="SP", zipcode="18000-000", country="Brasil"),
    dict(street="Campo Solar Norte", number="Área A", city="Santos", state="SP", zipcode="11000-000", country="Brasil"),
    dict(street="Usina Solar Sul", number="Setor 5", city="São José dos Campos", state="SP", zipcode="12000-000", country="Brasil"),
]

USERS = [
    dict(name="João", last_name="Silva", document="123.456.789-01"),
    dict(name="Maria", last_name="Santos", document="234.567.890-12"),
    dict(name="Pedro", last_name="Oliveira", document="345.678.901-23"),
    dict(name="Ana", last_name="Costa", document="456.789.012-34"),
    dict(name="Carlos", last_name="Ferreira", document="567.890.123-45"),
]

# (code, angle, rated power, kind)
SENSORS = [
    ("SOLAR-FARM-001", 180.0, 850.5, "farm"),
    ("SOLAR-FARM-002", 165.0, 920.0, "farm"),
    ("SOLAR-FARM-003", 200.0, 780.3, "farm"),
    ("SOLAR-FARM-004", 175.0, 1100.2, "farm"),
    ("SOLAR-FARM-005", 190.0, 650.8, "farm"),
    ("SOLAR-HOME-001", 45.0, 250.5, "home"),
    ("SOLAR-HOME-002", 60.0, 320.8, "home"),
    ("SOLAR-HOME-003", 30.0, 180.2, "home"),
    ("SOLAR-PANEL-A1", 120.0, 450.6, "commercial"),
    ("SOLAR-PANEL-B2", 135.0, 520.9, "commercial"),
]


@dataclass
class SeedSummary:
    users: int = 0
    addresses: int = 0
    sensors: int = 0
    events: int = 0
    events_per_sensor: Dict[str, int] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Simulation
# ---------------------------------------------------------------------------


def solar_intensity(hour: int) -> float:
    """
    Relative irradiance for an hour of the day: a sine arc from 06:00 to
    18:00 peaking at noon, zero at night.
    """
    if hour < 6 or hour > 18:
        return 0.0
    return max(0.0, math.sin(math.pi * (hour - 6) / 12))


def weather_factor(rng: random.Random) -> float:
    """
    Output multiplier for the sky conditions: 5% stormy, 15% cloudy,
    otherwise clear.
    """
    roll = rng.random()
    if roll > 0.95:
        return round(rng.uniform(0.1, 0.3), 2)
    if roll > 0.8:
        return round(rng.uniform(0.3, 0.7), 2)
    return round(rng.uniform(0.8, 1.0), 2)


def generate_readings(
    sensor_uuid: UUID,
    rating: float,
    start: datetime,
    end: datetime,
    rng: random.Random,
) -> List[models.Event]:
    """
    Simulated readings every two hours in ``[start, end]``, skipping hours
    where the sun is too low to matter.
    """
    readings: List[models.Event] = []
    moment = start
    while moment <= end:
        intensity = solar_intensity(moment.hour)
        if intensity > 0.1:
            power = round(rating * intensity * weather_factor(rng), 2)
            if power > 0:
                heat = round(25 + rating * intensity * 0.05 + rng.uniform(-5, 5), 2)
                readings.append(
                    models.Event(
                        sensor_uuid=sensor_uuid,
                        power_generated=power,
                        timestamp=moment,
                        heat=heat,
                    )
                )
        moment += EVENT_INTERVAL
    return readings


# ---------------------------------------------------------------------------
# Database population
# ---------------------------------------------------------------------------


def clear_database(session: Session) -> None:
    # Children first so foreign keys never dangle.
    for repo_cls in (EventsRepository, SensorsRepository, UsersRepository, AddressesRepository):
        deleted = repo_cls(session).delete_all()
        logger.debug("table_cleared", table=repo_cls.model.__tablename__, rows=deleted)
    session.flush()


def seed_database(
    session: Session,
    *,
    days: int = 30,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> SeedSummary:
    """
    Replace the contents of ``session``'s database with demo data.

    The caller owns the transaction. Owner UUIDs are generated up front so
    every address is written with its owner already set.
    """
    rng = rng or random.Random()
    now = now or datetime.now(timezone.utc)
    summary = SeedSummary()

    clear_database(session)

    addresses = AddressesRepository(session)
    users_repo = UsersRepository(session)
    sensors_repo = SensorsRepository(session)
    events_repo = EventsRepository(session)

    # Users and their home addresses.
    users: List[models.User] = []
    for user_data, address_data in zip(USERS, HOME_ADDRESSES):
        user_uuid = uuid4()
        home = addresses.create(user_uuid=user_uuid, **address_data)
        users.append(users_repo.create(uuid=user_uuid, address_uuid=home.uuid, **user_data))
        summary.addresses += 1
    summary.users = len(users)

    # Sensors are spread round-robin over the equipment addresses; each
    # address records the last sensor installed there.
    sensor_uuids = [uuid4() for _ in SENSORS]
    installed: Dict[int, UUID] = {}
    for i, sensor_uuid in enumerate(sensor_uuids):
        installed[i % len(EQUIPMENT_ADDRESSES)] = sensor_uuid

    equipment = [
        addresses.create(sensor_uuid=installed[i], **address_data)
        for i, address_data in enumerate(EQUIPMENT_ADDRESSES)
    ]
    summary.addresses += len(equipment)

    sensors: List[models.Sensor] = []
    for i, (code, angle, rating, kind) in enumerate(SENSORS):
        owner = users[i % min(3, len(users))].uuid if kind == "home" else None
        last_shutdown = now - timedelta(days=rng.randint(1, 7)) if rng.random() > 0.7 else None
        sensors.append(
            sensors_repo.create(
                uuid=sensor_uuids[i],
                code=code,
                equip_address_uuid=equipment[i % len(equipment)].uuid,
                user_uuid=owner,
                angle=angle,
                power_generate=rating,
                total_events=0,
                total_shutdown=rng.randint(0, 3),
                last_shutdown=last_shutdown,
            )
        )
    summary.sensors = len(sensors)

    # Regular readings.
    start = now - timedelta(days=days)
    for sensor in sensors:
        readings = generate_readings(sensor.uuid, sensor.power_generate, start, now, rng)
        added = events_repo.add_many(readings)
        logger.debug("sensor_readings_generated", code=sensor.code, events=added)

    # A peak reading for two farms and a poor one for two homes.
    special: List[models.Event] = []
    for sensor in [s for s in sensors if "FARM" in s.code][:2]:
        special.append(
            models.Event(
                sensor_uuid=sensor.uuid,
                power_generated=round(rng.uniform(800, 1200), 2),
                timestamp=now - timedelta(days=rng.randint(1, 3)),
                heat=round(rng.uniform(35, 50), 2),
            )
        )
    for sensor in [s for s in sensors if "HOME" in s.code][:2]:
        special.append(
            models.Event(
                sensor_uuid=sensor.uuid,
                power_generated=round(rng.uniform(10, 60), 2),
                timestamp=now - timedelta(days=rng.randint(1, 5)),
                heat=round(rng.uniform(20, 30), 2),
            )
        )
    events_repo.add_many(special)

    for sensor in sensors:
        total = events_repo.count_for_sensor(sensor.uuid)
        sensors_repo.update_fields(sensor, {"total_events": total})
        summary.events_per_sensor[sensor.code] = total
    summary.events = sum(summary.events_per_sensor.values())

    logger.info(
        "database_seeded",
        users=summary.users,
        addresses=summary.addresses,
        sensors=summary.sensors,
        events=summary.events,
    )
    return summary


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Fill the Solar Winds database with demo users, sensors and events."
    )
    parser.add_argument(
        "--days",
        type=int,
        default=30,
        help="How many days of readings to generate (default: 30).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed, for reproducible data.",
    )
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="Create missing tables before seeding.",
    )
    args = parser.parse_args(argv)

    if args.days < 1:
        parser.error("--days must be at least 1")

    configure_logging()

    if args.create_schema:
        init_db()

    with db_session() as session:
        summary = seed_database(session, days=args.days, rng=random.Random(args.seed))

    print("\n== Summary ==")
    print(f"  users:      {summary.users}")
    print(f"  addresses:  {summary.addresses}")
    print(f"  sensors:    {summary.sensors}")
    print(f"  events:     {summary.events}")
    for code, count in sorted(summary.events_per_sensor.items()):
        print(f"    {code}: {count} events")


if __name__ == "__main__":
    main()
