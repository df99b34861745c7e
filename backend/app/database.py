"""Database connection and session management."""
from collections.abc import Generator
from contextlib import contextmanager
from datetime import datetime, timezone
import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

uses_sqlite = make_url(settings.database_url).get_backend_name() == "sqlite"

# SQLite requires check_same_thread=False for FastAPI
connect_args = {"check_same_thread": False} if uses_sqlite else {}

engine = create_engine(
    settings.database_url,
    connect_args=connect_args,
    echo=settings.debug,
    pool_pre_ping=not uses_sqlite,
)


def enable_sqlite_foreign_keys(target: Engine) -> None:
    """Make SQLite enforce REFERENCES clauses on every new connection."""

    @event.listens_for(target, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON;")
        cursor.close()


if uses_sqlite:
    enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def utc_now_iso() -> str:
    """Current UTC time as a naive ISO string, the format of every timestamp column."""
    return datetime.now(timezone.utc).replace(tzinfo=None).isoformat()


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_context() -> Generator[Session, None, None]:
    """Context manager for database session (for use outside of FastAPI)."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        logger.exception("Rolling back database session after error")
        db.rollback()
        raise
    finally:
        db.close()
