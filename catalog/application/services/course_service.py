"""
Course service orchestrator.

Coordinates course lifecycle operations and enforces the business rules on
top of the store primitives: active-name uniqueness, soft-delete visibility,
and optimistic (conditional) update and delete.

No locks are taken here. Concurrency is resolved by the store: the counter
upsert, the partial unique index on active names, and UPDATE ... WHERE
deletedAt IS NULL. A lost race is reported as a typed error, never retried.

Dependencies: catalog.boundary.db.CRUD, catalog.boundary.db.models
System role: Course use case orchestration
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.boundary.db.base import utc_timestamp
from catalog.boundary.db.CRUD.base_crud import DuplicateKeyError
from catalog.boundary.db.CRUD.counter_crud import counter_crud
from catalog.boundary.db.CRUD.course_crud import course_crud
from catalog.boundary.db.models.course_model import (
    COURSES_COLLECTION_NAME,
    MAX_COURSE_ID,
    CourseModel,
    CourseStatus,
)
from catalog.application.services.course_errors import (
    CourseConflictError,
    CourseGoneError,
    CourseNotFoundError,
    CourseStorageError,
    DuplicateCourseNameError,
    InvalidCourseDataError,
)

logger = logging.getLogger(__name__)


def validate_course_fields(name: object, status: object) -> CourseStatus:
    """
    Check name and status for create and update.

    Args:
        name: Course name; must be a string with non-whitespace content
        status: One of "scheduled", "in_production", "available"

    Returns:
        CourseStatus: The parsed status

    Raises:
        InvalidCourseDataError: If either field is missing or invalid
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidCourseDataError("Course name cannot be missing, empty or whitespace-only")
    parsed = CourseStatus.parse(status)
    if parsed is None:
        allowed = ", ".join(s.value for s in CourseStatus)
        raise InvalidCourseDataError(f"Course status must be one of: {allowed}")
    return parsed


def _ensure_issuable_id(course_id: int) -> None:
    # The sequence starts at 1 and the id column cannot hold larger values,
    # so anything outside that range never existed.
    if not 1 <= course_id <= MAX_COURSE_ID:
        raise CourseNotFoundError(f"Course {course_id} does not exist", course_id)


class CourseService:
    """Course service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize course service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def list_courses(self, skip: int = 0, limit: int | None = None) -> list[dict]:
        """
        List every course as {id, name}, oldest first.

        Soft-deleted courses are included; only get_course distinguishes
        deleted ones.

        Args:
            skip: Number of courses to skip
            limit: Maximum number of courses to return (None for all)

        Returns:
            list[dict]: Course summaries

        Raises:
            CourseStorageError: If the store fails
        """
        try:
            rows = await course_crud.list_summaries(self.db, offset=skip, limit=limit)
        except SQLAlchemyError as e:
            logger.error("Failed to list courses", extra={"error": str(e)})
            raise CourseStorageError("Failed to list courses") from e

        return [{"id": row.id, "name": row.name} for row in rows]

    async def get_course(self, course_id: int) -> dict:
        """
        Get an active course by id.

        Args:
            course_id: Course id

        Returns:
            dict: id, name, status, updated_at, created_at

        Raises:
            CourseNotFoundError: If the id does not exist
            CourseGoneError: If the course has been deleted
            CourseStorageError: If the store fails
        """
        course = await self._fetch_active(course_id, "get")
        return {
            "id": course.id,
            "name": course.name,
            "status": course.status.value,
            "updated_at": course.updated_at,
            "created_at": course.created_at,
        }

    async def create_course(self, name: object, status: object) -> int:
        """
        Create a new course.

        The active-name lookup is a cheap early rejection; the partial unique
        index on insert is the authoritative guard for the window between the
        lookup and the insert.

        Args:
            name: Course name
            status: Course status value

        Returns:
            int: The new course id

        Raises:
            InvalidCourseDataError: If name or status is invalid
            DuplicateCourseNameError: If an active course already has the name
            CourseConflictError: If a concurrent create won the name
            CourseStorageError: If the store fails
        """
        course_status = validate_course_fields(name, status)

        try:
            if await course_crud.find_active_by_name(self.db, name) is not None:
                raise DuplicateCourseNameError(f"Course name '{name}' is already in use")

            course_id = await counter_crud.next_id(self.db, COURSES_COLLECTION_NAME)
            await course_crud.insert_course(
                self.db,
                id=course_id,
                name=name,
                status=course_status,
                timestamp=utc_timestamp(),
            )
        except DuplicateKeyError as e:
            logger.info(
                "Course create lost a concurrent name race",
                extra={"course_name": name},
            )
            raise CourseConflictError(f"Course name '{name}' was taken concurrently") from e
        except SQLAlchemyError as e:
            logger.error(
                "Failed to create course",
                extra={"error": str(e), "course_name": name}
            )
            raise CourseStorageError("Failed to create course") from e

        logger.info(
            "Course created",
            extra={"course_id": course_id, "course_name": name}
        )
        return course_id

    async def update_course(self, course_id: int, name: object, status: object) -> dict:
        """
        Replace name and status of an active course.

        Args:
            course_id: Course id
            name: New course name
            status: New course status value

        Returns:
            dict: Updated course data

        Raises:
            InvalidCourseDataError: If name or status is invalid
            DuplicateCourseNameError: If a different active course has the name
            CourseNotFoundError: If the id does not exist
            CourseGoneError: If the course is deleted, including concurrently
            CourseConflictError: If a concurrent write took the name
            CourseStorageError: If the store fails
        """
        course_status = validate_course_fields(name, status)
        _ensure_issuable_id(course_id)

        try:
            if await course_crud.find_active_by_name(
                self.db, name, exclude_id=course_id
            ) is not None:
                raise DuplicateCourseNameError(
                    f"Course name '{name}' is already in use", course_id
                )
        except SQLAlchemyError as e:
            logger.error(
                "Failed to check course name",
                extra={"error": str(e), "course_id": course_id}
            )
            raise CourseStorageError("Failed to update course", course_id) from e

        await self._fetch_active(course_id, "update")

        try:
            updated = await course_crud.update_active(
                self.db,
                course_id,
                name=name,
                status=course_status,
                updated_at=utc_timestamp(),
            )
        except DuplicateKeyError as e:
            raise CourseConflictError(
                f"Course name '{name}' was taken concurrently", course_id
            ) from e
        except SQLAlchemyError as e:
            logger.error(
                "Failed to update course",
                extra={"error": str(e), "course_id": course_id}
            )
            raise CourseStorageError("Failed to update course", course_id) from e

        if updated is None:
            logger.info(
                "Course deleted concurrently with update",
                extra={"course_id": course_id},
            )
            raise CourseGoneError(f"Course {course_id} has been deleted", course_id)

        logger.info(
            "Course updated",
            extra={"course_id": course_id, "course_name": name}
        )
        return {
            "id": updated.id,
            "name": updated.name,
            "status": updated.status.value,
            "updated_at": updated.updated_at,
            "created_at": updated.created_at,
        }

    async def delete_course(self, course_id: int) -> None:
        """
        Soft delete an active course.

        Args:
            course_id: Course id

        Raises:
            CourseNotFoundError: If the id does not exist
            CourseGoneError: If the course is already deleted, including by a
                concurrent delete that won the race
            CourseStorageError: If the store fails
        """
        await self._fetch_active(course_id, "delete")

        timestamp = utc_timestamp()
        try:
            deleted = await course_crud.update_active(
                self.db,
                course_id,
                updated_at=timestamp,
                deleted_at=timestamp,
            )
        except SQLAlchemyError as e:
            logger.error(
                "Failed to delete course",
                extra={"error": str(e), "course_id": course_id}
            )
            raise CourseStorageError("Failed to delete course", course_id) from e

        if deleted is None:
            logger.info(
                "Course delete lost a concurrent race",
                extra={"course_id": course_id},
            )
            raise CourseGoneError(f"Course {course_id} has been deleted", course_id)

        logger.info("Course deleted", extra={"course_id": course_id})

    async def _fetch_active(self, course_id: int, operation: str) -> CourseModel:
        _ensure_issuable_id(course_id)
        try:
            course = await course_crud.find_by_id(self.db, course_id)
        except SQLAlchemyError as e:
            logger.error(
                f"Failed to fetch course for {operation}",
                extra={"error": str(e), "course_id": course_id}
            )
            raise CourseStorageError(f"Failed to {operation} course", course_id) from e

        if course is None:
            raise CourseNotFoundError(f"Course {course_id} does not exist", course_id)
        if course.is_deleted:
            raise CourseGoneError(f"Course {course_id} has been deleted", course_id)
        return course
