"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: catalog.application, catalog.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.boundary.db.connection import get_async_db
from catalog.application.services.course_service import CourseService


def get_course_service(db: AsyncSession = Depends(get_async_db)) -> CourseService:
    """
    Get course service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        CourseService: Course service instance
    """
    return CourseService(db=db)
