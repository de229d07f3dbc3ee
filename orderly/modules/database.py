import logging
import os

import sqlalchemy
from databases import Database
from dotenv import load_dotenv
from sqlalchemy.schema import CreateTable

load_dotenv()

logger = logging.getLogger("orderly.database")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./orderly.db")

# Create the database instance
database = Database(DATABASE_URL)

# Table definitions register themselves here (see users.repositories)
metadata = sqlalchemy.MetaData()


async def connect_to_db():
    if not database.is_connected:
        await database.connect()
        logger.info("Database connection established")


async def disconnect_from_db():
    if database.is_connected:
        await database.disconnect()
        logger.info("Database connection closed")


async def init_db():
    """
    Create every table registered on ``metadata`` if it does not exist yet.

    DDL is compiled by SQLAlchemy for the connected dialect, so the same
    definitions work for SQLite and PostgreSQL.
    """
    for table in metadata.sorted_tables:
        await database.execute(CreateTable(table, if_not_exists=True))
        logger.debug(f"Ensured table '{table.name}'")
    logger.info(f"Schema ready ({len(metadata.sorted_tables)} tables)")


async def health_check() -> bool:
    """
    Check if database connection is healthy.

    Returns:
        True if connection is healthy, False otherwise
    """
    try:
        if not database.is_connected:
            return False
        await database.fetch_val("SELECT 1")
        return True
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        return False
