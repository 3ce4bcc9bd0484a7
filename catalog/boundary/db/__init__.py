"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, TimestampMixin, SoftDeleteMixin, utc_timestamp: Model building blocks
  - Database, get_async_db: Engine lifecycle and request-scoped sessions
  - CourseModel, CourseStatus, CounterModel: Domain entities
  - course_crud, counter_crud: CRUD operation singletons

Dependencies: sqlalchemy, catalog.configs
System role: Database adapter providing persistent storage for courses
and their id sequence.
"""

from catalog.boundary.db.base import Base, SoftDeleteMixin, TimestampMixin, utc_timestamp
from catalog.boundary.db.connection import Database, get_async_db
from catalog.boundary.db.models import (
    COURSES_COLLECTION_NAME,
    CounterModel,
    CourseModel,
    CourseStatus,
)
from catalog.boundary.db.CRUD import (
    BaseCRUD,
    CounterCRUD,
    CourseCRUD,
    DuplicateKeyError,
    counter_crud,
    course_crud,
)

__all__ = [
    # Base classes
    "Base",
    "SoftDeleteMixin",
    "TimestampMixin",
    "utc_timestamp",
    # Connection
    "Database",
    "get_async_db",
    # Models
    "COURSES_COLLECTION_NAME",
    "CounterModel",
    "CourseModel",
    "CourseStatus",
    # CRUD classes
    "BaseCRUD",
    "CounterCRUD",
    "CourseCRUD",
    "DuplicateKeyError",
    # CRUD singletons
    "counter_crud",
    "course_crud",
]
