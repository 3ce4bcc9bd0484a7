"""
Database connection management.

Provides the Database handle (async engine plus session factory) with an
explicit open/close lifecycle, and the FastAPI dependency that hands each
request its own session.

Dependencies: sqlalchemy, catalog.configs
System role: Database connection lifecycle management
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from catalog.boundary.db.base import Base
from catalog.configs.database import DatabaseSettings

logger = logging.getLogger(__name__)


class Database:
    """
    Owner of the async engine and session factory.

    Constructed once at process start (see catalog.main lifespan) and
    disposed at shutdown. Never created lazily from inside a request.

    Attributes:
        engine: AsyncEngine with its connection pool
        session_factory: async_sessionmaker producing request-scoped sessions
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self.session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

    @classmethod
    def from_url(cls, url: str, echo: bool = False, **engine_kwargs) -> "Database":
        """
        Build a Database for an arbitrary async SQLAlchemy URL.

        Args:
            url: e.g. "postgresql+asyncpg://..." or "sqlite+aiosqlite:///courses.db"
            echo: Echo SQL statements to logs
            **engine_kwargs: Passed through to create_async_engine

        Returns:
            Database: Handle owning a new engine
        """
        return cls(create_async_engine(url, echo=echo, **engine_kwargs))

    @classmethod
    def from_settings(cls, db_config: DatabaseSettings) -> "Database":
        """
        Build a Database from DatabaseSettings.

        Pool sizing applies to server databases only; SQLite URLs get the
        dialect's default pool. pool_pre_ping=True verifies connections
        before use to detect stale/broken connections early.

        Args:
            db_config: Database settings

        Returns:
            Database: Handle owning a new engine
        """
        url = db_config.async_database_url
        engine_kwargs: dict = {"pool_pre_ping": True}
        if make_url(url).get_backend_name() != "sqlite":
            engine_kwargs.update(
                pool_size=db_config.pool_size,
                max_overflow=db_config.max_overflow,
                pool_timeout=db_config.pool_timeout,
            )
        return cls.from_url(url, echo=db_config.echo_sql, **engine_kwargs)

    async def create_tables(self) -> None:
        """
        Create all tables and indexes registered on Base.metadata.

        Idempotent: existing tables remain unchanged.
        """
        # Register models with the metadata
        from catalog.boundary.db import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    async def drop_tables(self) -> None:
        """Drop all registered tables. Development and tests only."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Open a session that is closed (and rolled back if open) on exit."""
        async with self.session_factory() as session:
            yield session

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
        logger.info("Database engine disposed")


async def get_async_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Uses the Database opened by the application lifespan and stored on
    app.state. Each request gets its own session, closed after the route
    completes even if exceptions occur.

    Yields:
        AsyncSession: Async SQLAlchemy session (scoped to request lifetime)

    Raises:
        RuntimeError: If the application lifespan has not opened a Database

    Usage:
        from fastapi import Depends

        @router.get("/courses/{id}")
        async def get_course(id: int, db: AsyncSession = Depends(get_async_db)):
            return await course_crud.find_by_id(db, id)
    """
    database: Database | None = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database is not open; application lifespan has not started")
    async with database.session() as session:
        yield session
