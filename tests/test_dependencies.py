"""
Test suite for dependency injection container and settings.

System role: Verification of DI container and configuration
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.deps import get_course_service
from catalog.application.services import CourseService
from catalog.boundary.db.connection import get_async_db
from catalog.configs.base import BaseSettings
from catalog.configs.database import DatabaseSettings


@pytest.fixture
def mock_db_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


class TestGetCourseService:
    """Test suite for get_course_service factory."""

    def test_should_bind_service_to_session(self, mock_db_session: AsyncSession) -> None:
        service = get_course_service(db=mock_db_session)

        assert isinstance(service, CourseService)
        assert service.db is mock_db_session


class TestGetAsyncDb:
    """Test suite for the request-scoped session dependency."""

    @pytest.mark.asyncio
    async def test_should_fail_when_database_not_open(self) -> None:
        request = MagicMock()
        request.app.state.database = None

        with pytest.raises(RuntimeError):
            await anext(get_async_db(request))


class TestDatabaseSettings:
    """Test suite for DatabaseSettings URL construction."""

    def test_should_build_asyncpg_url(self) -> None:
        settings = DatabaseSettings(host="db", port=5433, user="u", password="p", db="courses")

        assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5433/courses?"

    def test_should_require_ssl_when_configured(self) -> None:
        settings = DatabaseSettings(sslmode="require")

        assert settings.async_database_url.endswith("?ssl=require")

    def test_url_override_should_win(self) -> None:
        settings = DatabaseSettings(url="sqlite+aiosqlite:///courses.db")

        assert settings.async_database_url == "sqlite+aiosqlite:///courses.db"


class TestBaseSettings:
    """Test suite for the shared runtime settings."""

    def test_should_default_to_local_environment(self, monkeypatch) -> None:
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        assert BaseSettings().environment == "local"

    def test_should_read_runtime_fields_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        settings = BaseSettings()

        assert (settings.environment, settings.log_level) == ("production", "WARNING")
