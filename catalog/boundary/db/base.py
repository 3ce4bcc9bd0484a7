"""
SQLAlchemy declarative base and common mixins.

Provides base class for all ORM models and reusable mixins
for common fields (timestamps, soft deletion).

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

from datetime import datetime, timezone

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def utc_timestamp() -> str:
    """
    Current UTC time as a persisted timestamp string.

    Format is yyyy-MM-ddTHH:mm:ssZ, so lexical order equals chronological order.

    Returns:
        str: Formatted timestamp, e.g. "2024-03-01T17:04:05Z"
    """
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All database models inherit from this class to ensure they're
    registered with the metadata and included in table creation.
    """

    pass


class TimestampMixin:
    """
    Mixin providing creation and modification timestamps.

    Values are written explicitly by the service layer so a single
    instant can be shared between fields (createdAt == updatedAt on
    insert, deletedAt == updatedAt on soft delete).

    Attributes:
        created_at: Row creation timestamp (UTC, immutable), column "createdAt"
        updated_at: Last modification timestamp (UTC), column "updatedAt"
    """

    created_at: Mapped[str] = mapped_column(
        "createdAt",
        String(20),
        default=utc_timestamp,
        nullable=False,
    )
    updated_at: Mapped[str] = mapped_column(
        "updatedAt",
        String(20),
        default=utc_timestamp,
        nullable=False,
    )


class SoftDeleteMixin:
    """
    Mixin marking rows as logically deleted.

    A row with deleted_at set is terminal and must never be revived.

    Attributes:
        deleted_at: Deletion timestamp (UTC) or None, column "deletedAt"
    """

    deleted_at: Mapped[str | None] = mapped_column(
        "deletedAt",
        String(20),
        nullable=True,
        default=None,
    )

    @property
    def is_deleted(self) -> bool:
        """True once the row has been soft deleted."""
        return self.deleted_at is not None
