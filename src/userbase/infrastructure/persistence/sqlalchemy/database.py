"""Async database engine and session management."""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from userbase.infrastructure.persistence.sqlalchemy.models.base import Base

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory(database_url: str) -> None:
    url = make_url(database_url)
    if not url.drivername.startswith("sqlite"):
        return
    if not url.database or url.database == ":memory:":
        return
    Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)


class Database:
    """Owns the shared engine (connection pool) and the session factory.

    One instance is created per application and shared by every request;
    each request opens its own session from :attr:`session_maker`.
    """

    def __init__(self, url: str, *, echo: bool = False) -> None:
        _ensure_sqlite_directory(url)
        self._url = url
        self._engine = create_async_engine(
            url,
            echo=echo,
            pool_pre_ping=True,  # Verify connections before use
        )
        self._session_maker = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def session_maker(self) -> async_sessionmaker[AsyncSession]:
        return self._session_maker

    async def create_tables(self) -> None:
        """Create all database tables (idempotent).

        Uses SQLAlchemy's create_all() which only creates missing tables.
        Existing tables and their data are never modified or deleted.
        """
        # Registers the identity models on Base.metadata
        import userbase_identity.infrastructure.persistence.sqlalchemy  # NOQA: F401

        logger.info("Ensuring all database tables exist...")
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema is up to date")

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self._engine.dispose()
        logger.info("Database connections closed")

    def __repr__(self) -> str:
        return f"Database(url={make_url(self._url).render_as_string(hide_password=True)!r})"
