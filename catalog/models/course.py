"""
Course domain models and schemas.

Request/response schemas for course operations.

Dependencies: pydantic
System role: Course API contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class CourseRequest(BaseModel):
    """
    Request schema for creating or replacing a course.

    Both fields are optional at the schema level so that missing or blank
    values are rejected by the service with a 400, like an unknown status.
    """

    name: str | None = Field(None, description="Course name, unique among active courses")
    status: str | None = Field(
        None, description="One of: scheduled, in_production, available"
    )


class CourseSummary(BaseModel):
    """Course list entry."""

    id: int
    name: str


class CourseListResponse(BaseModel):
    """Response schema for GET /courses."""

    courses: list[CourseSummary]


class CourseResponse(BaseModel):
    """
    Response schema for a single active course.

    Serialized keys follow the stored document: "updatedAt", and
    "created_at" for the creation time.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    status: str
    updated_at: str = Field(..., alias="updatedAt")
    created_at: str
