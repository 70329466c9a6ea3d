# tests/test_seed.py
import math
import random
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from solar_winds_api.db import models
from solar_winds_api.seed import (
    SENSORS,
    generate_readings,
    main,
    seed_database,
    solar_intensity,
    weather_factor,
)

NOW = datetime(2024, 6, 30, 0, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("hour", [0, 3, 5, 19, 23])
def test_solar_intensity_is_zero_at_night(hour) -> None:
    assert solar_intensity(hour) == 0.0


def test_solar_intensity_peaks_at_noon() -> None:
    assert solar_intensity(12) == pytest.approx(1.0)
    assert solar_intensity(6) == pytest.approx(0.0)
    assert solar_intensity(9) == pytest.approx(math.sin(math.pi / 4))
    assert solar_intensity(9) == pytest.approx(solar_intensity(15))


def test_weather_factor_stays_in_known_bands() -> None:
    rng = random.Random(7)
    values = [weather_factor(rng) for _ in range(2000)]

    assert all(0.1 <= v <= 1.0 for v in values)
    clear = sum(1 for v in values if v >= 0.8)
    assert 0.7 < clear / len(values) < 0.9


def test_generate_readings_only_in_daylight() -> None:
    start = datetime(2024, 6, 1, 0, 0, tzinfo=timezone.utc)
    end = start + timedelta(days=1)

    readings = generate_readings(uuid4(), 1000.0, start, end, random.Random(1))

    # Every two hours from midnight: 08:00 through 16:00 clear the 0.1 intensity floor.
    assert [r.timestamp.hour for r in readings] == [8, 10, 12, 14, 16]
    for reading in readings:
        assert 0 < reading.power_generated <= 1000.0
        assert 20 <= reading.heat <= 80


def test_seed_database_populates_every_table(db) -> None:
    summary = seed_database(db, days=3, rng=random.Random(42), now=NOW)
    db.commit()

    assert summary.users == 5
    assert summary.addresses == 10
    assert summary.sensors == len(SENSORS)

    event_total = db.execute(select(func.count()).select_from(models.Event)).scalar_one()
    assert summary.events == event_total > 0

    for sensor in db.execute(select(models.Sensor)).scalars():
        stored = db.execute(
            select(func.count()).select_from(models.Event).where(models.Event.sensor_uuid == sensor.uuid)
        ).scalar_one()
        assert sensor.total_events == stored


def test_seed_database_respects_address_ownership(db) -> None:
    seed_database(db, days=1, rng=random.Random(3), now=NOW)
    db.commit()

    addresses = db.execute(select(models.Address)).scalars().all()
    assert all((a.user_uuid is None) != (a.sensor_uuid is None) for a in addresses)

    home_sensors = db.execute(
        select(models.Sensor).where(models.Sensor.code.like("SOLAR-HOME-%"))
    ).scalars().all()
    assert home_sensors and all(s.user_uuid is not None for s in home_sensors)


def test_seed_database_replaces_previous_data(db) -> None:
    seed_database(db, days=1, rng=random.Random(1), now=NOW)
    db.commit()
    seed_database(db, days=1, rng=random.Random(2), now=NOW)
    db.commit()

    assert db.execute(select(func.count()).select_from(models.User)).scalar_one() == 5


def test_seed_is_reproducible(session_factory) -> None:
    totals = []
    for _ in range(2):
        with session_factory() as session:
            summary = seed_database(session, days=2, rng=random.Random(99), now=NOW)
            session.commit()
            totals.append(summary.events_per_sensor)

    assert totals[0] == totals[1]


def test_main_rejects_non_positive_days() -> None:
    with pytest.raises(SystemExit):
        main(["--days", "0"])
