"""
PlayRepository

SQLAlchemy operations for the 'plays' table.

Methods:
- insert(db, play): Persist a new play and return it with its id
- latest_by_user(db, user_id, limit): User's most recent plays
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models import Play

logger = logging.getLogger(__name__)


class PlayRepository:
    """Keyed store for plays."""

    async def insert(self, db: AsyncSession, play: Play) -> Play:
        """Insert a play, commit, and return it with its assigned id."""
        db.add(play)
        try:
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        await db.refresh(play)

        logger.info(
            f"Stored play {play.id}: user {play.user_id} bet {play.bet_id} "
            f"choice {play.choice_id} ${play.amount}"
        )
        return play

    async def latest_by_user(
        self,
        db: AsyncSession,
        user_id: int,
        limit: int = 5,
    ) -> list[Play]:
        """Get a user's latest plays, newest registration first."""
        result = await db.execute(
            select(Play)
            .where(Play.user_id == user_id)
            .order_by(Play.registration_date.desc(), Play.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())


# Singleton instance
play_repository = PlayRepository()
