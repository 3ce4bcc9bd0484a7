"""
Base CRUD operations for SQLAlchemy models.

Provides the generic store primitives (find, insert, conditional update,
ordered listing) that model-specific CRUD classes build on. Every primitive
is a single statement; mutating primitives commit their own transaction so
they are atomic at single-row granularity.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

import logging
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import ColumnElement, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)

logger = logging.getLogger(__name__)


class DuplicateKeyError(Exception):
    """Raised when a write violates a unique index or primary key."""

    def __init__(self, table: str, original: IntegrityError) -> None:
        self.table = table
        self.original = original
        super().__init__(f"Duplicate key on {table}: {original.orig}")


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Provides standard database operations that work with any SQLAlchemy model.
    Subclasses should specify the model class and add model-specific
    predicates on top of these primitives.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    def _resolve(self, values: dict[str, Any]) -> dict[Any, Any]:
        # Attribute names may differ from column names (created_at -> "createdAt")
        return {getattr(self.model, key): value for key, value in values.items()}

    async def find_one(
        self,
        session: AsyncSession,
        *criteria: ColumnElement[bool],
    ) -> ModelT | None:
        """
        Retrieve the first record matching all criteria.

        Args:
            session: Async database session
            *criteria: SQLAlchemy boolean expressions, ANDed together

        Returns:
            Model instance if found, None otherwise
        """
        stmt = (
            select(self.model)
            .where(*criteria)
            .limit(1)
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalars().first()

    async def insert_one(self, session: AsyncSession, **values: Any) -> ModelT:
        """
        Insert a new record and commit.

        Args:
            session: Async database session
            **values: Column values keyed by attribute name

        Returns:
            The inserted model instance

        Raises:
            DuplicateKeyError: If a unique index or primary key rejects the row
        """
        stmt = insert(self.model).values(self._resolve(values)).returning(self.model)
        try:
            result = await session.execute(stmt)
            instance = result.scalar_one()
            await session.commit()
        except IntegrityError as e:
            await session.rollback()
            logger.debug(
                "Insert rejected by uniqueness constraint",
                extra={"table": self.table_name, "error": str(e.orig)},
            )
            raise DuplicateKeyError(self.table_name, e) from e
        return instance

    async def conditional_update(
        self,
        session: AsyncSession,
        criteria: Sequence[ColumnElement[bool]],
        **values: Any,
    ) -> ModelT | None:
        """
        Apply values to the record matching criteria, atomically, and commit.

        Executes one UPDATE ... WHERE ... RETURNING statement, so the
        predicate is evaluated at write time rather than by a prior read.

        Args:
            session: Async database session
            criteria: Boolean expressions the row must satisfy at execution time
            **values: Fields to update with new values

        Returns:
            Post-update model instance, or None if no row matched

        Raises:
            DuplicateKeyError: If the new values violate a unique index
        """
        stmt = (
            update(self.model)
            .where(*criteria)
            .values(self._resolve(values))
            .returning(self.model)
        )
        try:
            result = await session.execute(stmt)
            instance = result.scalars().first()
            await session.commit()
        except IntegrityError as e:
            await session.rollback()
            raise DuplicateKeyError(self.table_name, e) from e
        return instance

    async def list_all(
        self,
        session: AsyncSession,
        *columns: Any,
        offset: int = 0,
        limit: int | None = None,
    ) -> Sequence[Any]:
        """
        Retrieve records in creation order, oldest first.

        Args:
            session: Async database session
            *columns: Optional projection; when empty, full model instances are returned
            offset: Number of records to skip
            limit: Maximum number of records to return (None for all)

        Returns:
            Sequence of model instances, or of Row objects when projected
        """
        stmt = select(*columns) if columns else select(self.model)
        stmt = (
            stmt.order_by(self.model.id)
            .offset(offset)
            .execution_options(populate_existing=True)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.all() if columns else result.scalars().all()
