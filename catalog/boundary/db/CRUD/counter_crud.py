"""
Sequence counter CRUD operations.

Issues monotonically increasing integer ids per collection using a single
atomic upsert-increment statement on the counters table.

Dependencies: sqlalchemy, catalog.boundary.db.models
System role: Atomic id generation
"""

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.boundary.db.models.counter_model import CounterModel
from catalog.boundary.db.CRUD.base_crud import BaseCRUD

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class CounterCRUD(BaseCRUD[CounterModel]):
    """
    CRUD operations for CounterModel.

    The counter row is created on first use with value 1; later calls
    increment it inside the same statement, so no two callers (in any
    process) can receive the same value.
    """

    def __init__(self) -> None:
        """Initialize CounterCRUD with CounterModel."""
        super().__init__(CounterModel)

    @staticmethod
    def counter_key(collection_name: str) -> str:
        return f"{collection_name}_id"

    async def next_id(self, session: AsyncSession, collection_name: str) -> int:
        """
        Atomically increment and return the counter for a collection.

        Args:
            session: Async database session
            collection_name: Logical collection, e.g. "courses"

        Returns:
            int: The newly issued value (1 for a fresh counter)

        Raises:
            NotImplementedError: If the bound dialect has no upsert support here
        """
        dialect = session.get_bind().dialect.name
        try:
            dialect_insert = _UPSERT_DIALECTS[dialect]
        except KeyError:
            raise NotImplementedError(f"Atomic counters are not supported on {dialect}")

        stmt = dialect_insert(CounterModel).values(
            id=self.counter_key(collection_name),
            sequence_value=1,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["id"],
            set_={"sequence_value": CounterModel.sequence_value + 1},
        ).returning(CounterModel.sequence_value)

        result = await session.execute(stmt)
        value = result.scalar_one()
        await session.commit()
        return value


counter_crud = CounterCRUD()
