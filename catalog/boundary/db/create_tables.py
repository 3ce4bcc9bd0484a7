"""
Database table creation script.

Creates all tables and indexes defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, catalog.configs
System role: Database schema initialization

Usage:
    python -m catalog.boundary.db.create_tables
"""

import asyncio
import logging

from catalog.boundary.db.connection import Database
from catalog.configs import get_settings
from catalog.observability.logger import configure_logging

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create the courses and counters tables.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    database = Database.from_settings(get_settings().database)
    try:
        await database.create_tables()
    finally:
        await database.dispose()
    logger.info("All tables created successfully")


if __name__ == "__main__":
    configure_logging(get_settings().log_level)
    asyncio.run(create_all_tables())
