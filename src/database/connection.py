"""
Database connection and client lifecycle management
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.uri_parser import parse_uri

from config.settings import DATABASE_URL, DB_SERVER_SELECTION_TIMEOUT_MS

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_NAME = "blog-app"

# Global client and database handles
db_client = None
db = None
db_name: Optional[str] = None

# Injected clients belong to the caller and are left open on close
_owns_client = False


def database_name_from_url(database_url: str) -> str:
    """Extract the database name from a mongodb:// connection string"""
    return parse_uri(database_url).get("database") or DEFAULT_DATABASE_NAME


async def init_database(database_url: str = DATABASE_URL, client: Optional[AsyncIOMotorClient] = None):
    """
    Initialize the process-wide database handle

    Args:
        database_url: Connection string; its path selects the database
        client: Pre-built motor-compatible client to use instead of
            connecting to database_url (test-scoped stores)
    """
    global db_client, db, db_name, _owns_client

    if db is not None:
        logger.warning("Database already initialized - closing previous connection")
        await close_database()

    name = database_name_from_url(database_url)
    owns_client = client is None

    if owns_client:
        client = AsyncIOMotorClient(
            database_url,
            serverSelectionTimeoutMS=DB_SERVER_SELECTION_TIMEOUT_MS,
            tz_aware=True
        )
        # Test connection
        try:
            await client[name].command("ping")
        except Exception:
            client.close()
            raise

    db_client = client
    db = client[name]
    db_name = name
    _owns_client = owns_client

    logger.info(f"Database initialized successfully: {name}")
    return db


async def close_database():
    """Close the database client"""
    global db_client, db, db_name, _owns_client
    if db_client is not None and _owns_client:
        db_client.close()
    db_client = None
    db = None
    db_name = None
    _owns_client = False
    logger.info("Database connections closed")


async def drop_database():
    """Irreversibly drop every collection of the active database"""
    get_database()
    logger.warning(f"Dropping database: {db_name}")
    await db_client.drop_database(db_name)


def get_database():
    """Get the active database instance"""
    if db is None:
        raise RuntimeError("Database not initialized - call init_database() first")
    return db
