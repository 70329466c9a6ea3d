# tests/conftest.py
from typing import Any, Callable, Dict, Generator
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from solar_winds_api.db.models import Base
from solar_winds_api.db.session import build_engine, build_sessionmaker, get_session
from solar_winds_api.main import app


@pytest.fixture(scope="function")
def session_factory() -> Generator[sessionmaker[Session], None, None]:
    """
    A fresh in-memory SQLite database per test, with foreign keys enforced.
    StaticPool keeps the single connection alive across sessions.
    """
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield build_sessionmaker(engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(session_factory) -> Generator[Session, None, None]:
    """A session for inspecting or arranging rows directly."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(session_factory) -> Generator[TestClient, None, None]:
    """
    TestClient with ``get_session`` overridden to use the test database.
    """

    def _override_get_session() -> Generator[Session, None, None]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_session] = _override_get_session
    yield TestClient(app)
    app.dependency_overrides.pop(get_session, None)


# ---------------------------------------------------------------------------
# Payload builders
# ---------------------------------------------------------------------------


def address_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "street": "Rua das Flores",
        "number": "123",
        "city": "São Paulo",
        "state": "SP",
        "zipcode": "01234-567",
        "country": "Brasil",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def create_address(client) -> Callable[..., Dict[str, Any]]:
    """Create an equipment address (owned by an arbitrary sensor uuid) unless told otherwise."""

    def _create(**overrides: Any) -> Dict[str, Any]:
        if "user_uuid" not in overrides and "sensor_uuid" not in overrides:
            overrides["sensor_uuid"] = str(uuid4())
        resp = client.post("/addresses", json=address_payload(**overrides))
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create


@pytest.fixture
def create_user(client) -> Callable[..., Dict[str, Any]]:
    counter = {"n": 0}

    def _create(**overrides: Any) -> Dict[str, Any]:
        counter["n"] += 1
        payload = {
            "name": "João",
            "last_name": "Silva",
            "document": f"000.000.000-{counter['n']:02d}",
        }
        payload.update(overrides)
        resp = client.post("/users", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create


@pytest.fixture
def create_sensor(client, create_address) -> Callable[..., Dict[str, Any]]:
    counter = {"n": 0}

    def _create(**overrides: Any) -> Dict[str, Any]:
        counter["n"] += 1
        payload = {
            "code": f"SOLAR-TEST-{counter['n']:03d}",
            "angle": 180.0,
            "power_generate": 850.5,
        }
        payload.update(overrides)
        if "equip_address_uuid" not in payload:
            payload["equip_address_uuid"] = create_address()["uuid"]
        resp = client.post("/sensors", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create


@pytest.fixture
def create_event(client) -> Callable[..., Dict[str, Any]]:
    def _create(sensor_uuid: str, **overrides: Any) -> Dict[str, Any]:
        payload = {
            "sensor_uuid": sensor_uuid,
            "power_generated": 500.0,
            "timestamp": "2024-06-01T12:00:00Z",
            "heat": 35.0,
        }
        payload.update(overrides)
        resp = client.post("/events", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create
