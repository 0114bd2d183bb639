"""
FastAPI dependency injection for database sessions.
Provides database session dependencies for API endpoints.
"""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from database.session import _get_async_session_factory


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides an async database session.

    Usage:
        @router.get("/users/{user_id}/plays/latest")
        async def latest_plays(user_id: int, db: AsyncSession = Depends(get_db)):
            return await play_service.find_latest_plays(db, user_id)

    Yields:
        AsyncSession: SQLAlchemy async database session

    Ensures:
        - Session is automatically closed after the request
        - Connection is returned to the pool
    """
    factory = _get_async_session_factory()
    session = factory()
    try:
        yield session
    finally:
        await session.close()
