"""
Database connection lifecycle.

This module provides:
- Table creation on startup
- Engine disposal on shutdown
- Health check utilities
"""

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from config import settings
from database.base import Base
from database.session import _get_async_engine, dispose_engine


async def init_db() -> None:
    """
    Create all tables registered on the declarative base.
    Models are imported here so their tables are attached to Base.metadata.
    """
    import models  # noqa: F401

    engine = _get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """
    Dispose the database engine.
    """
    await dispose_engine()


async def check_db_connection() -> bool:
    """
    Check if the database connection is healthy.
    """
    try:
        engine = _get_async_engine()
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except (SQLAlchemyError, OSError):
        return False


def get_db_info() -> dict:
    """
    Get database connection information.
    """
    return {
        "url": _sanitize_database_url(settings.database_url),
        "environment": settings.environment,
    }


def _sanitize_database_url(url: str) -> str:
    """
    Hide password in a database URL for safe logging.
    """
    if "@" not in url or "://" not in url:
        return url

    protocol, rest = url.split("://", 1)
    credentials, host = rest.rsplit("@", 1)
    if ":" in credentials:
        username = credentials.split(":", 1)[0]
        return f"{protocol}://{username}:***@{host}"
    return url
