# solar_winds_api/db/session.py

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator, Optional

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from solar_winds_api.config import get_settings
from solar_winds_api.logging import get_logger

from .models import Base

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Engine / Session factory
# ---------------------------------------------------------------------------


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:  # noqa: ARG001
    # SQLite ignores ON DELETE clauses unless this pragma is set per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, *, echo: bool = False, **kwargs: Any) -> Engine:
    """
    Create an engine for ``database_url``.

    SQLite gets ``check_same_thread=False`` (the web server shares
    connections across threads) and foreign key enforcement.
    """
    connect_args: dict[str, object] = kwargs.pop("connect_args", {})
    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite:
        connect_args.setdefault("check_same_thread", False)

    engine = create_engine(
        database_url,
        echo=echo,
        connect_args=connect_args,
        **kwargs,
    )

    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    return engine


def build_sessionmaker(bind: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=bind,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        class_=Session,
    )


settings = get_settings()

engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)

SessionLocal = build_sessionmaker(engine)


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create all tables that do not exist yet.
    """
    target = bind or engine
    Base.metadata.create_all(bind=target)
    logger.info("database_initialized", url=target.url.render_as_string(hide_password=True))


# ---------------------------------------------------------------------------
# FastAPI dependency / helper
# ---------------------------------------------------------------------------


def get_session() -> Generator[Session, None, None]:
    """
    FastAPI-style dependency that yields a database session and ensures it
    is closed afterwards.

    Usage:

        from fastapi import Depends
        from solar_winds_api.db.session import get_session

        @router.get("/users")
        def list_users(db: Session = Depends(get_session)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def db_session(factory: Optional[sessionmaker[Session]] = None) -> Generator[Session, None, None]:
    """
    Context manager for non-FastAPI usage, e.g. the seed command.

        from solar_winds_api.db.session import db_session

        with db_session() as db:
            ...
    """
    db = (factory or SessionLocal)()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


__all__ = [
    "engine",
    "SessionLocal",
    "build_engine",
    "build_sessionmaker",
    "init_db",
    "get_session",
    "db_session",
]
