"""Database connection helper using SQLAlchemy and Alembic.

Provides a lightweight wrapper to create engine and sessions, test
connectivity, create the schema, and optionally read the Alembic
revision if present.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from config import get_database_url
from db.base import Base

SQLITE_BUSY_TIMEOUT = 30.0


def _use_immediate_transactions(engine: Engine) -> None:
    """Make SQLite take the write lock at BEGIN so concurrent writers wait on it."""

    @event.listens_for(engine, "connect")
    def _disable_driver_transactions(dbapi_connection, _record) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn) -> None:
        conn.exec_driver_sql("BEGIN IMMEDIATE")


class DbConn:
    """Simple database connection manager.

    Usage:
        db = DbConn()
        ok = db.test_connection()
        with db.session_scope() as s:
            s.execute(text("SELECT 1"))
    """

    def __init__(self, db_url: Optional[str] = None, echo: bool = False) -> None:
        url = db_url or get_database_url()
        if not url:
            raise ValueError("Database URL not configured. Check resources/.env or DATABASE_URL.")

        engine_kwargs: Dict[str, Any] = {"echo": echo}
        sqlite = url.startswith("sqlite")
        in_memory = sqlite and (url in ("sqlite://", "sqlite:///") or ":memory:" in url)
        if in_memory:
            # one shared connection so the database survives across sessions
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            engine_kwargs["poolclass"] = StaticPool
        elif sqlite:
            engine_kwargs["connect_args"] = {"check_same_thread": False, "timeout": SQLITE_BUSY_TIMEOUT}
        else:
            # pool_pre_ping=True to avoid broken connections
            engine_kwargs["pool_pre_ping"] = True

        self._engine: Engine = create_engine(url, **engine_kwargs)
        if sqlite and not in_memory:
            _use_immediate_transactions(self._engine)
        self._Session = sessionmaker(bind=self._engine, autoflush=False, autocommit=False, future=True)

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        return self._Session()

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_schema(self) -> None:
        """Create missing tables from the ORM metadata."""
        import db.poco.crypto_currency  # noqa: F401  # register models on Base.metadata

        Base.metadata.create_all(self.engine)

    def test_connection(self) -> bool:
        """Try connecting and executing a trivial statement."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    def get_alembic_revision(self) -> Optional[str]:
        """Return current Alembic revision if alembic_version table exists.

        Returns None when the table is missing or unreadable.
        """
        try:
            with self.engine.connect() as conn:
                result = conn.execute(text("SELECT version_num FROM alembic_version LIMIT 1"))
                row = result.first()
                return row[0] if row else None
        except SQLAlchemyError:
            return None

    def dispose(self) -> None:
        self._engine.dispose()
