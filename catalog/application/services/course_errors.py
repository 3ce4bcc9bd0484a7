"""
Course domain errors.

Typed outcomes of course operations. Every lost race and every rejected
request surfaces as one of these; the HTTP layer maps them to status codes.
"""


class CourseError(Exception):
    """Base class for course-related errors."""
    def __init__(self, message: str, course_id: int | None = None):
        self.message = message
        self.course_id = course_id
        super().__init__(self.message)

class InvalidCourseDataError(CourseError):
    """Raised when name is missing or blank, or status is not recognised."""
    pass

class DuplicateCourseNameError(CourseError):
    """Raised when another active course already holds the name."""
    pass

class CourseConflictError(CourseError):
    """Raised when a concurrent write claimed the name first (storage-level unique index)."""
    pass

class CourseNotFoundError(CourseError):
    """Raised when no course with the id has ever existed."""
    pass

class CourseGoneError(CourseError):
    """Raised when the course exists but has been soft deleted."""
    pass

class CourseStorageError(CourseError):
    """Raised when the store fails unexpectedly; details are logged, not exposed."""
    pass
