"""
Course API endpoints.

Routes:
- GET /courses - List all courses (including soft-deleted ones)
- GET /courses/{id} - Get single active course
- POST /courses - Create new course
- PUT /courses/{id} - Replace name and status
- DELETE /courses/{id} - Soft delete course

Dependencies: catalog.application.services, catalog.models
System role: Course management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from catalog.application.services.course_service import CourseService
from catalog.api.deps.dependencies import get_course_service
from catalog.models.course import CourseListResponse, CourseRequest, CourseResponse

from .course_error_handling import handle_course_errors
from .course_responses import map_course_to_response, map_courses_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=CourseListResponse)
@handle_course_errors
async def list_courses(
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=0),
    course_service: CourseService = Depends(get_course_service),
) -> CourseListResponse:
    """
    List courses in creation order, oldest first.

    Args:
        skip: Number to skip (default 0)
        limit: Maximum number of courses (default all)
        course_service: Injected CourseService

    Returns:
        CourseListResponse: {"courses": [{"id", "name"}, ...]}

    Raises:
        HTTPException(500): Retrieval failed
    """
    logger.debug("Listing courses", extra={"skip": skip, "limit": limit})

    courses = await course_service.list_courses(skip=skip, limit=limit)

    logger.debug("Courses retrieved", extra={"count": len(courses)})

    return map_courses_to_response(courses)


@router.get("/{course_id}", response_model=CourseResponse)
@handle_course_errors
async def get_course(
    course_id: int,
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Get single course by ID.

    Args:
        course_id: Course id
        course_service: Injected CourseService

    Returns:
        CourseResponse: id, name, status, updatedAt, created_at

    Raises:
        HTTPException(404): Course not found
        HTTPException(410): Course deleted
        HTTPException(500): Retrieval failed
    """
    logger.debug("Fetching course", extra={"course_id": course_id})

    course_data = await course_service.get_course(course_id)

    return map_course_to_response(course_data)


@router.post("", status_code=status.HTTP_201_CREATED)
@handle_course_errors
async def create_course(
    request: CourseRequest,
    course_service: CourseService = Depends(get_course_service),
) -> Response:
    """
    Create new course.

    Args:
        request: CourseRequest with name and status
        course_service: Injected CourseService

    Returns:
        201 Created with Location: /courses/{id}

    Raises:
        HTTPException(400): Invalid request or duplicated name
        HTTPException(409): Name taken by a concurrent create
        HTTPException(500): Creation failed
    """
    logger.debug("Creating new course", extra={"course_name": request.name})

    course_id = await course_service.create_course(
        name=request.name,
        status=request.status,
    )

    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"{router.prefix}/{course_id}"},
    )


@router.put("/{course_id}", status_code=status.HTTP_202_ACCEPTED)
@handle_course_errors
async def update_course(
    course_id: int,
    request: CourseRequest,
    course_service: CourseService = Depends(get_course_service),
) -> Response:
    """
    Update course by ID.

    Args:
        course_id: Course id
        request: CourseRequest with name and status
        course_service: Injected CourseService

    Returns:
        202 Accepted

    Raises:
        HTTPException(400): Invalid request or duplicated name
        HTTPException(404): Course not found
        HTTPException(409): Name taken by a concurrent write
        HTTPException(410): Course deleted
        HTTPException(500): Update failed
    """
    logger.debug("Updating course", extra={"course_id": course_id})

    await course_service.update_course(
        course_id=course_id,
        name=request.name,
        status=request.status,
    )

    return Response(status_code=status.HTTP_202_ACCEPTED)


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_course_errors
async def delete_course(
    course_id: int,
    course_service: CourseService = Depends(get_course_service),
) -> Response:
    """
    Soft delete course by ID.

    Args:
        course_id: Course id
        course_service: Injected CourseService

    Returns:
        204 No Content on success

    Raises:
        HTTPException(404): Course not found
        HTTPException(410): Course already deleted
        HTTPException(500): Deletion failed
    """
    logger.debug("Deleting course", extra={"course_id": course_id})

    await course_service.delete_course(course_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
