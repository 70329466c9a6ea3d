"""
solar_winds_api.db
==================

Database package for the Solar Winds API.

Public DB primitives can be imported from a single place, e.g.:

    from solar_winds_api.db import Base, engine, SessionLocal, get_session
"""

from .models import Address, Base, Event, Sensor, User
from .session import SessionLocal, db_session, engine, get_session, init_db

__all__ = [
    "Base",
    "Address",
    "User",
    "Sensor",
    "Event",
    "engine",
    "SessionLocal",
    "get_session",
    "db_session",
    "init_db",
]
