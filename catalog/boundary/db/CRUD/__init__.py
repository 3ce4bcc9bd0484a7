"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from catalog.boundary.db.CRUD import course_crud, counter_crud

    # Use singleton instances
    course_id = await counter_crud.next_id(db, "courses")
    course = await course_crud.find_by_id(db, course_id)
"""

from catalog.boundary.db.CRUD.base_crud import BaseCRUD, DuplicateKeyError
from catalog.boundary.db.CRUD.counter_crud import CounterCRUD, counter_crud
from catalog.boundary.db.CRUD.course_crud import CourseCRUD, course_crud

__all__ = [
    "BaseCRUD",
    "DuplicateKeyError",
    "CounterCRUD",
    "counter_crud",
    "CourseCRUD",
    "course_crud",
]
