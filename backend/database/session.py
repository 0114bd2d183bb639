"""
Database session management.
Provides the async engine, the session factory and a reusable session
context manager for non-FastAPI contexts.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from config import settings

# Async engine and session factory
_async_engine: Optional[AsyncEngine] = None
_async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def _get_async_engine() -> AsyncEngine:
    """Get or create async engine."""
    global _async_engine
    if _async_engine is None:
        url = settings.database_url
        if url.startswith("sqlite"):
            # SQLite has no server-side pool to tune
            _async_engine = create_async_engine(url, echo=False)
        else:
            _async_engine = create_async_engine(
                url,
                pool_size=5,
                max_overflow=10,
                pool_pre_ping=True,
                pool_recycle=3600,
            )
    return _async_engine


def _get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get or create async session factory."""
    global _async_session_factory
    if _async_session_factory is None:
        _async_session_factory = async_sessionmaker(
            bind=_get_async_engine(),
            class_=AsyncSession,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )
    return _async_session_factory


async def dispose_engine() -> None:
    """Dispose the engine and forget the session factory bound to it."""
    global _async_engine, _async_session_factory
    if _async_engine is not None:
        await _async_engine.dispose()
    _async_engine = None
    _async_session_factory = None


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Async context manager for database sessions in scripts and jobs.

    Usage:
        async with get_db_session() as db:
            plays = await play_repository.latest_by_user(db, user_id)

    Yields:
        AsyncSession: SQLAlchemy async database session
    """
    factory = _get_async_session_factory()
    session = factory()
    try:
        yield session
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()
