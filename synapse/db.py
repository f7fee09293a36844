"""
Database engine and transactional session scopes.

``db`` is the process-wide DatabaseManager. The application initializes it
once at startup; every service call then opens its own scope with
``db.session()``, which commits when the block exits normally and rolls
back everything written in the block otherwise.

Usage:
    from synapse.db import db

    db.initialize("sqlite:///synapse.db")
    with db.session() as session:
        user = session.get(User, 1)
"""

import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Optional

from sqlalchemy import Engine, create_engine, event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from .config import Settings, get_settings
from .logging import get_logger

logger = get_logger("db")


class Base(DeclarativeBase):
    """Declarative base shared by every Synapse model."""


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def _engine_options(url: str, settings: Settings) -> dict[str, Any]:
    if not url.startswith("sqlite"):
        return {
            "poolclass": QueuePool,
            "pool_size": settings.db_pool_size,
            "max_overflow": settings.db_max_overflow,
            "pool_pre_ping": settings.db_pool_pre_ping,
        }

    # Explore fetches use connections from worker threads
    options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if _is_memory_sqlite(url):
        # Every new connection would see its own empty database
        options["poolclass"] = StaticPool
    return options


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """
    Singleton owner of the engine and the session factory.

    Sessions are created per scope and never shared across threads; the
    session factory itself is safe to use from any thread.
    """

    _instance: Optional["DatabaseManager"] = None

    engine: Engine | None = None
    SessionLocal: sessionmaker[Session] | None = None

    def __new__(cls) -> "DatabaseManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def is_initialized(self) -> bool:
        return self.engine is not None

    def initialize(self, database_url: str | None = None) -> None:
        """
        Create the engine. Later calls are no-ops until ``reset()``.

        Args:
            database_url: Optional override of ``settings.database_url``.
        """
        if self.is_initialized:
            return

        settings = get_settings()
        url = database_url or settings.database_url
        engine = create_engine(url, echo=settings.debug, **_engine_options(url, settings))
        if engine.dialect.name == "sqlite":
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)

        self.engine = engine
        self.SessionLocal = sessionmaker(
            bind=engine,
            autoflush=False,
            expire_on_commit=False,
        )
        logger.info("database_initialized", dialect=engine.dialect.name)

    def create_all_tables(self) -> None:
        """Create every table registered on ``Base.metadata``."""
        from . import models  # noqa: F401

        Base.metadata.create_all(bind=self._require_engine())

    def drop_all_tables(self) -> None:
        Base.metadata.drop_all(bind=self._require_engine())

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Transactional session scope.

        Everything done inside one block is a single transaction: an
        exception anywhere in the block rolls all of it back.
        """
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get_session(self) -> Session:
        """Unmanaged session; the caller commits, rolls back and closes it."""
        self._require_engine()
        assert self.SessionLocal is not None
        return self.SessionLocal()

    def health_check(self) -> dict[str, Any]:
        """
        Run ``SELECT 1`` against the database.

        Returns:
            ``{"healthy": bool, "latency_ms": float, "error": str | None}``
        """
        if self.engine is None:
            return {"healthy": False, "latency_ms": 0.0, "error": "Database not initialized"}

        start = time.perf_counter()
        error = None
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.warning("database_health_check_failed", error=str(e))
            error = str(e)
        latency_ms = round((time.perf_counter() - start) * 1000, 2)
        return {"healthy": error is None, "latency_ms": latency_ms, "error": error}

    def reset(self) -> None:
        """Dispose of the engine so ``initialize()`` can run again."""
        if self.engine is not None:
            self.engine.dispose()
        self.engine = None
        self.SessionLocal = None

    def _require_engine(self) -> Engine:
        if self.engine is None:
            raise RuntimeError("DatabaseManager not initialized. Call initialize() first.")
        return self.engine


# Global singleton
db = DatabaseManager()


__all__ = ["Base", "DatabaseManager", "db"]
