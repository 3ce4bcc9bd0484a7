"""
Course error handling utilities.

Provides a decorator for consistent error handling across course-related
API endpoints: logs each typed outcome with context and converts it into
the matching HTTPException.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from catalog.application.services.course_errors import (
    CourseConflictError,
    CourseGoneError,
    CourseNotFoundError,
    CourseStorageError,
    DuplicateCourseNameError,
    InvalidCourseDataError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

INTERNAL_ERROR_DETAIL = "An internal error occurred during course operation"


def handle_course_errors(func: F) -> F:
    """
    Decorator to handle course-related errors and transform them into HTTPExceptions.

    Mapping:
    - InvalidCourseDataError, DuplicateCourseNameError -> 400
    - CourseNotFoundError -> 404
    - CourseConflictError -> 409
    - CourseGoneError -> 410
    - CourseStorageError and anything unexpected -> 500 with a generic detail
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except CourseNotFoundError as e:
            logger.info(
                "Course not found",
                extra={"course_id": e.course_id, "error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=str(e)
            )

        except CourseGoneError as e:
            logger.info(
                "Course gone",
                extra={"course_id": e.course_id, "error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_410_GONE,
                detail=str(e)
            )

        except (InvalidCourseDataError, DuplicateCourseNameError) as e:
            logger.warning(
                "Invalid course request",
                extra={"course_id": e.course_id, "error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e)
            )

        except CourseConflictError as e:
            logger.warning(
                "Course write conflict",
                extra={"course_id": e.course_id, "error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=str(e)
            )

        except CourseStorageError as e:
            logger.exception(
                "Course storage failure",
                extra={"course_id": e.course_id, "error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=INTERNAL_ERROR_DETAIL
            )

        except HTTPException:
            raise

        except Exception as e:
            logger.exception(
                "Unexpected failure in course operation",
                extra={"error_type": type(e).__name__, "error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=INTERNAL_ERROR_DETAIL
            )

    return wrapper # type: ignore
