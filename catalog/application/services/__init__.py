"""Service orchestrators."""

from .course_errors import (
    CourseConflictError,
    CourseError,
    CourseGoneError,
    CourseNotFoundError,
    CourseStorageError,
    DuplicateCourseNameError,
    InvalidCourseDataError,
)
from .course_service import CourseService, validate_course_fields

__all__ = [
    "CourseConflictError",
    "CourseError",
    "CourseGoneError",
    "CourseNotFoundError",
    "CourseService",
    "CourseStorageError",
    "DuplicateCourseNameError",
    "InvalidCourseDataError",
    "validate_course_fields",
]
