"""
Test suite for CounterCRUD id generation.

Verifies implicit counter creation, per-collection independence and that
concurrent callers on separate connections never receive the same value.

System role: Verification of atomic sequence generation
"""

import asyncio

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.boundary.db.CRUD.counter_crud import CounterCRUD, counter_crud
from catalog.boundary.db.models.counter_model import CounterModel


class TestCounterCRUDNextId:
    """Test suite for CounterCRUD.next_id()."""

    @pytest.mark.asyncio
    async def test_next_id_should_start_at_one(self, test_async_db: AsyncSession) -> None:
        assert await counter_crud.next_id(test_async_db, "courses") == 1

    @pytest.mark.asyncio
    async def test_next_id_should_increment(self, test_async_db: AsyncSession) -> None:
        values = [await counter_crud.next_id(test_async_db, "courses") for _ in range(3)]

        assert values == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_next_id_should_keep_collections_independent(
        self, test_async_db: AsyncSession
    ) -> None:
        await counter_crud.next_id(test_async_db, "courses")
        await counter_crud.next_id(test_async_db, "courses")

        assert await counter_crud.next_id(test_async_db, "lessons") == 1

    @pytest.mark.asyncio
    async def test_next_id_should_persist_counter_row(self, test_async_db: AsyncSession) -> None:
        await counter_crud.next_id(test_async_db, "courses")
        await counter_crud.next_id(test_async_db, "courses")

        row = await counter_crud.find_one(test_async_db, CounterModel.id == "courses_id")

        assert row is not None
        assert row.sequence_value == 2

    def test_counter_key_should_suffix_collection_name(self) -> None:
        assert CounterCRUD.counter_key("courses") == "courses_id"


class TestCounterCRUDConcurrency:
    """Concurrent id generation across independent sessions."""

    @pytest.mark.asyncio
    async def test_concurrent_callers_should_get_distinct_values(self, file_database) -> None:
        async def issue() -> int:
            async with file_database.session() as session:
                return await counter_crud.next_id(session, "courses")

        values = await asyncio.gather(*(issue() for _ in range(10)))

        assert sorted(values) == list(range(1, 11))
