"""
Shared test fixtures and configuration for entire test suite.

Provides: SQLite-backed async sessions and Database handles, service mocks
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from catalog.boundary.db.base import Base
    from catalog.boundary.db import models  # noqa: F401

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    """File-backed SQLite URL; separate connections see each other's commits."""
    return f"sqlite+aiosqlite:///{tmp_path / 'courses.db'}"


@pytest.fixture
async def file_database(sqlite_url: str):
    """
    Create a file-backed Database with tables, for multi-session tests.

    Yields:
        Database: Handle whose session_factory opens independent connections
    """
    from catalog.boundary.db.connection import Database

    database = Database.from_url(sqlite_url)
    await database.create_tables()
    yield database
    await database.dispose()


@pytest.fixture
def mock_course_service():
    """
    Create mock CourseService for testing.

    Returns:
        AsyncMock: Mocked CourseService with async methods
    """
    service = AsyncMock()
    service.list_courses = AsyncMock(return_value=[])
    service.get_course = AsyncMock()
    service.create_course = AsyncMock(return_value=1)
    service.update_course = AsyncMock()
    service.delete_course = AsyncMock(return_value=None)
    return service
