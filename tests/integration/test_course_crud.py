"""
Test suite for CourseCRUD against an in-memory SQLite database.

Tests the store primitives: lookup by id and active name, insert with the
active-name unique index, conditional updates guarded by deletedAt, and
creation-ordered listing.

System role: Verification of the course persistence layer
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.boundary.db.CRUD.base_crud import DuplicateKeyError
from catalog.boundary.db.CRUD.course_crud import course_crud
from catalog.boundary.db.models.course_model import CourseStatus

T0 = "2024-01-01T10:00:00Z"
T1 = "2024-01-01T11:00:00Z"


async def _insert(session: AsyncSession, id: int, name: str, status=CourseStatus.SCHEDULED):
    return await course_crud.insert_course(session, id=id, name=name, status=status, timestamp=T0)


class TestCourseCRUDInsert:
    """Test suite for CourseCRUD.insert_course()."""

    @pytest.mark.asyncio
    async def test_insert_should_set_both_timestamps(self, test_async_db: AsyncSession) -> None:
        course = await _insert(test_async_db, 1, "Intro")

        assert course.id == 1
        assert course.name == "Intro"
        assert course.status is CourseStatus.SCHEDULED
        assert course.created_at == course.updated_at == T0
        assert course.deleted_at is None

    @pytest.mark.asyncio
    async def test_insert_should_reject_second_active_course_with_same_name(
        self, test_async_db: AsyncSession
    ) -> None:
        await _insert(test_async_db, 1, "Intro")

        with pytest.raises(DuplicateKeyError) as exc_info:
            await _insert(test_async_db, 2, "Intro")

        assert exc_info.value.table == "courses"
        assert await course_crud.find_by_id(test_async_db, 2) is None

    @pytest.mark.asyncio
    async def test_insert_should_allow_name_of_deleted_course(
        self, test_async_db: AsyncSession
    ) -> None:
        await _insert(test_async_db, 1, "Intro")
        await course_crud.update_active(test_async_db, 1, deleted_at=T1, updated_at=T1)

        course = await _insert(test_async_db, 2, "Intro")

        assert course.id == 2

    @pytest.mark.asyncio
    async def test_insert_should_reject_reused_id(self, test_async_db: AsyncSession) -> None:
        await _insert(test_async_db, 1, "Intro")

        with pytest.raises(DuplicateKeyError):
            await _insert(test_async_db, 1, "Other")


class TestCourseCRUDFind:
    """Test suite for CourseCRUD lookups."""

    @pytest.mark.asyncio
    async def test_find_by_id_should_return_none_when_missing(
        self, test_async_db: AsyncSession
    ) -> None:
        assert await course_crud.find_by_id(test_async_db, 999) is None

    @pytest.mark.asyncio
    async def test_find_by_id_should_return_deleted_course(
        self, test_async_db: AsyncSession
    ) -> None:
        await _insert(test_async_db, 1, "Intro")
        await course_crud.update_active(test_async_db, 1, deleted_at=T1, updated_at=T1)

        course = await course_crud.find_by_id(test_async_db, 1)

        assert course is not None
        assert course.is_deleted
        assert course.deleted_at == T1

    @pytest.mark.asyncio
    async def test_find_active_by_name_should_ignore_deleted_courses(
        self, test_async_db: AsyncSession
    ) -> None:
        await _insert(test_async_db, 1, "Intro")
        await course_crud.update_active(test_async_db, 1, deleted_at=T1, updated_at=T1)

        assert await course_crud.find_active_by_name(test_async_db, "Intro") is None

    @pytest.mark.asyncio
    async def test_find_active_by_name_should_honour_exclude_id(
        self, test_async_db: AsyncSession
    ) -> None:
        await _insert(test_async_db, 1, "Intro")

        assert await course_crud.find_active_by_name(test_async_db, "Intro", exclude_id=1) is None
        found = await course_crud.find_active_by_name(test_async_db, "Intro", exclude_id=2)
        assert found is not None and found.id == 1


class TestCourseCRUDUpdateActive:
    """Test suite for CourseCRUD.update_active()."""

    @pytest.mark.asyncio
    async def test_update_active_should_return_updated_course(
        self, test_async_db: AsyncSession
    ) -> None:
        await _insert(test_async_db, 1, "Intro")

        updated = await course_crud.update_active(
            test_async_db, 1, name="Intro2", status=CourseStatus.AVAILABLE, updated_at=T1
        )

        assert updated is not None
        assert updated.name == "Intro2"
        assert updated.status is CourseStatus.AVAILABLE
        assert updated.updated_at == T1
        assert updated.created_at == T0

    @pytest.mark.asyncio
    async def test_update_active_should_return_none_for_missing_course(
        self, test_async_db: AsyncSession
    ) -> None:
        assert await course_crud.update_active(test_async_db, 42, name="x") is None

    @pytest.mark.asyncio
    async def test_update_active_should_not_touch_deleted_course(
        self, test_async_db: AsyncSession
    ) -> None:
        await _insert(test_async_db, 1, "Intro")
        await course_crud.update_active(test_async_db, 1, deleted_at=T1, updated_at=T1)

        result = await course_crud.update_active(
            test_async_db, 1, name="Revived", updated_at="2024-01-02T00:00:00Z"
        )

        assert result is None
        course = await course_crud.find_by_id(test_async_db, 1)
        assert course.name == "Intro"
        assert course.deleted_at == T1
        assert course.updated_at == T1

    @pytest.mark.asyncio
    async def test_update_active_should_raise_on_rename_to_taken_name(
        self, test_async_db: AsyncSession
    ) -> None:
        await _insert(test_async_db, 1, "Intro")
        await _insert(test_async_db, 2, "Advanced")

        with pytest.raises(DuplicateKeyError):
            await course_crud.update_active(test_async_db, 2, name="Intro")


class TestCourseCRUDListSummaries:
    """Test suite for CourseCRUD.list_summaries()."""

    @pytest.mark.asyncio
    async def test_list_should_return_creation_order_including_deleted(
        self, test_async_db: AsyncSession
    ) -> None:
        await _insert(test_async_db, 2, "Second")
        await _insert(test_async_db, 1, "First")
        await _insert(test_async_db, 3, "Third")
        await course_crud.update_active(test_async_db, 2, deleted_at=T1, updated_at=T1)

        rows = await course_crud.list_summaries(test_async_db)

        assert [(r.id, r.name) for r in rows] == [(1, "First"), (2, "Second"), (3, "Third")]

    @pytest.mark.asyncio
    async def test_list_should_apply_offset_and_limit(self, test_async_db: AsyncSession) -> None:
        for i in range(1, 6):
            await _insert(test_async_db, i, f"Course {i}")

        rows = await course_crud.list_summaries(test_async_db, offset=1, limit=2)

        assert [r.id for r in rows] == [2, 3]

    @pytest.mark.asyncio
    async def test_list_should_return_empty_sequence_when_no_records(
        self, test_async_db: AsyncSession
    ) -> None:
        assert list(await course_crud.list_summaries(test_async_db)) == []
