"""
Course ORM model.

Represents a course with a lifecycle status. Courses are never physically
removed; deletion stamps deletedAt and the row becomes read-only.

Dependencies: sqlalchemy, catalog.boundary.db.base
System role: Course persistence
"""

import enum

from sqlalchemy import Enum, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from catalog.boundary.db.base import Base, SoftDeleteMixin, TimestampMixin

COURSES_COLLECTION_NAME = "courses"

# Ids are stored in a 32-bit INTEGER column
MAX_COURSE_ID = 2**31 - 1


class CourseStatus(str, enum.Enum):
    """
    Course production states.

    SCHEDULED: Announced, content not started
    IN_PRODUCTION: Content being produced
    AVAILABLE: Open to learners
    """

    SCHEDULED = "scheduled"
    IN_PRODUCTION = "in_production"
    AVAILABLE = "available"

    @classmethod
    def parse(cls, value: object) -> "CourseStatus | None":
        """Return the member whose value equals ``value``, or None."""
        for member in cls:
            if member.value == value:
                return member
        return None


class CourseModel(Base, TimestampMixin, SoftDeleteMixin):
    """
    Course ORM model.

    Attributes:
        id: Integer primary key issued by the counters sequence (never reused)
        name: Course name, unique among rows where deletedAt IS NULL
        status: CourseStatus stored as its lowercase value
        created_at: Creation timestamp string ("createdAt")
        updated_at: Last mutation timestamp string ("updatedAt")
        deleted_at: Soft deletion timestamp string or NULL ("deletedAt")

    Constraints:
        uq_courses_active_name: partial UNIQUE index on name for active rows;
        the authoritative guard against concurrent creates of one name
    """

    __tablename__ = COURSES_COLLECTION_NAME
    __table_args__ = (
        Index(
            "uq_courses_active_name",
            "name",
            unique=True,
            postgresql_where=text('"deletedAt" IS NULL'),
            sqlite_where=text('"deletedAt" IS NULL'),
        ),
    )

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=False,
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Course name",
    )

    status: Mapped[CourseStatus] = mapped_column(
        Enum(
            CourseStatus,
            native_enum=False,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
    )
