"""
Course response mapping utilities.

Transforms service dictionaries into Pydantic response models.
Centralizes response construction logic.

Dependencies: catalog.models.course
System role: Course response transformation
"""

from typing import Any

from catalog.models.course import CourseListResponse, CourseResponse, CourseSummary


def map_course_to_response(course_data: dict[str, Any]) -> CourseResponse:
    """
    Transform course data dictionary into CourseResponse.

    Args:
        course_data: Dictionary containing course fields
            Expected keys: id, name, status, updated_at, created_at

    Returns:
        CourseResponse: Pydantic model for API response
    """
    return CourseResponse(**course_data)


def map_courses_to_response(courses_data: list[dict[str, Any]]) -> CourseListResponse:
    """
    Wrap course summaries in the {"courses": [...]} envelope.

    Args:
        courses_data: List of {id, name} dictionaries

    Returns:
        CourseListResponse: Pydantic model for API response
    """
    return CourseListResponse(
        courses=[CourseSummary(**course) for course in courses_data]
    )
