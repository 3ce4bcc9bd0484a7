"""
Course CRUD operations.

Course-specific predicates over the BaseCRUD primitives: lookups by id and
by active name, insertion, and updates guarded by "not soft deleted".

Dependencies: sqlalchemy, catalog.boundary.db.models
System role: Course persistence operations
"""

from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.boundary.db.models.course_model import CourseModel, CourseStatus
from catalog.boundary.db.CRUD.base_crud import BaseCRUD


class CourseCRUD(BaseCRUD[CourseModel]):
    """
    CRUD operations for CourseModel.

    Never deletes rows. Soft deletion is an update_active() that stamps
    deleted_at, which also takes the row out of every "active" predicate.
    """

    def __init__(self) -> None:
        """Initialize CourseCRUD with CourseModel."""
        super().__init__(CourseModel)

    async def find_by_id(self, session: AsyncSession, id: int) -> CourseModel | None:
        """
        Retrieve a course by id regardless of deletion state.

        Args:
            session: Async database session
            id: Course id

        Returns:
            CourseModel if the id was ever issued and inserted, None otherwise
        """
        return await self.find_one(session, CourseModel.id == id)

    async def find_active_by_name(
        self,
        session: AsyncSession,
        name: str,
        exclude_id: int | None = None,
    ) -> CourseModel | None:
        """
        Retrieve the non-deleted course holding a name.

        Args:
            session: Async database session
            name: Exact course name
            exclude_id: Ignore this course (used when renaming it)

        Returns:
            CourseModel if another active course holds the name, None otherwise
        """
        criteria = [CourseModel.name == name, CourseModel.deleted_at.is_(None)]
        if exclude_id is not None:
            criteria.append(CourseModel.id != exclude_id)
        return await self.find_one(session, *criteria)

    async def insert_course(
        self,
        session: AsyncSession,
        id: int,
        name: str,
        status: CourseStatus,
        timestamp: str,
    ) -> CourseModel:
        """
        Insert a new active course with created_at == updated_at.

        Raises:
            DuplicateKeyError: If an active course with this name was inserted concurrently
        """
        return await self.insert_one(
            session,
            id=id,
            name=name,
            status=status,
            created_at=timestamp,
            updated_at=timestamp,
        )

    async def update_active(
        self,
        session: AsyncSession,
        id: int,
        **values: Any,
    ) -> CourseModel | None:
        """
        Update a course only while it is not soft deleted.

        Args:
            session: Async database session
            id: Course id
            **values: Fields to set

        Returns:
            Updated CourseModel, or None if the course is missing or was
            deleted before the statement executed
        """
        return await self.conditional_update(
            session,
            (CourseModel.id == id, CourseModel.deleted_at.is_(None)),
            **values,
        )

    async def list_summaries(
        self,
        session: AsyncSession,
        offset: int = 0,
        limit: int | None = None,
    ) -> Sequence[Any]:
        """
        Retrieve (id, name) rows for every course in creation order.

        Soft-deleted courses are included.

        Returns:
            Sequence of Row objects with id and name attributes
        """
        return await self.list_all(
            session,
            CourseModel.id,
            CourseModel.name,
            offset=offset,
            limit=limit,
        )


course_crud = CourseCRUD()
