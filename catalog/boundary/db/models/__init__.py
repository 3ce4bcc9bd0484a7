"""
Database models package.

Exports:
  - CourseModel, CourseStatus: Course ORM model and status enum
  - CounterModel: Per-collection sequence counter

Dependencies: sqlalchemy, catalog.boundary.db.base
System role: Database model definitions for domain entities
"""

from catalog.boundary.db.models.course_model import (
    COURSES_COLLECTION_NAME,
    MAX_COURSE_ID,
    CourseModel,
    CourseStatus,
)
from catalog.boundary.db.models.counter_model import CounterModel

__all__ = [
    "COURSES_COLLECTION_NAME",
    "MAX_COURSE_ID",
    "CourseModel",
    "CourseStatus",
    "CounterModel",
]
