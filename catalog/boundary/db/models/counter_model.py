"""
Sequence counter ORM model.

One row per logical collection, keyed "<collection>_id", holding the last
integer handed out for that collection.

Dependencies: sqlalchemy, catalog.boundary.db.base
System role: Backing store for atomic id generation
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.boundary.db.base import Base


class CounterModel(Base):
    """
    Counter ORM model.

    Only ever mutated through a single upsert-increment statement
    (see CounterCRUD.next_id); never read-then-written.

    Attributes:
        id: Counter key, e.g. "courses_id"
        sequence_value: Last issued value
    """

    __tablename__ = "counters"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)

    sequence_value: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )
