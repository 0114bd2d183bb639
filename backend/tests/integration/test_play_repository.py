"""
Integration Test: Play repository

Runs the repository and the play service against an in-memory SQLite
database.
"""

import asyncio
import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from database.base import Base
from database.repositories import PlayRepository
from models import Play
from schemas.bet import BetOptionSchema, BetSchema
from services.play_service import PlayService

NOW = datetime(2026, 5, 1, 18, 0, 0, tzinfo=timezone.utc)


def with_session(test_body):
    """Run an async test body with a fresh database session."""

    async def run():
        engine = create_async_engine(
            "sqlite+aiosqlite:///:memory:",
            poolclass=StaticPool,
        )
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        factory = async_sessionmaker(engine, expire_on_commit=False)
        try:
            async with factory() as db:
                return await test_body(db)
        finally:
            await engine.dispose()

    return asyncio.run(run())


def new_play(user_id=7, bet_id=1, minutes_ago=0, amount="25.50", choice_id=1) -> Play:
    return Play(
        user_id=user_id,
        bet_id=bet_id,
        choice_id=choice_id,
        amount=Decimal(amount),
        registration_date=NOW - timedelta(minutes=minutes_ago),
    )


class SingleBetLookup:
    def __init__(self, bet: BetSchema):
        self.bet = bet

    async def find_bets_by_ids(self, ids):
        return [self.bet] if self.bet.id in set(ids) else []


def test_insert_assigns_id_and_keeps_utc_timestamp() -> None:
    repository = PlayRepository()

    async def body(db):
        stored = await repository.insert(db, new_play())
        return stored.id, stored.registration_date, stored.amount

    play_id, registration_date, amount = with_session(body)

    assert play_id is not None
    assert registration_date == NOW
    assert registration_date.tzinfo is not None
    assert amount == Decimal("25.50")


def test_latest_by_user_orders_newest_first_and_limits() -> None:
    repository = PlayRepository()

    async def body(db):
        for minutes_ago in (30, 10, 50, 20, 40, 60, 5):
            await repository.insert(db, new_play(minutes_ago=minutes_ago))
        await repository.insert(db, new_play(user_id=8, minutes_ago=1))
        plays = await repository.latest_by_user(db, 7)
        return [p.registration_date for p in plays], {p.user_id for p in plays}

    dates, users = with_session(body)

    assert dates == [NOW - timedelta(minutes=m) for m in (5, 10, 20, 30, 40)]
    assert users == {7}


def test_latest_by_user_breaks_ties_by_newest_id() -> None:
    repository = PlayRepository()

    async def body(db):
        first = await repository.insert(db, new_play(minutes_ago=3))
        second = await repository.insert(db, new_play(minutes_ago=3))
        plays = await repository.latest_by_user(db, 7, limit=2)
        return [p.id for p in plays], [second.id, first.id]

    got, expected = with_session(body)

    assert got == expected


def test_latest_by_user_without_plays() -> None:
    async def body(db):
        return await PlayRepository().latest_by_user(db, 99)

    assert with_session(body) == []


def test_service_creates_then_summarizes_play() -> None:
    bet = BetSchema(
        id=1,
        min_amount=Decimal("10"),
        max_amount=Decimal("100"),
        match_date=NOW + timedelta(hours=2),
        options=[
            BetOptionSchema(id=1, description="Home"),
            BetOptionSchema(id=2, description="Draw"),
        ],
        result_id=1,
    )
    service = PlayService(
        bet_lookup=SingleBetLookup(bet),
        play_store=PlayRepository(),
        clock=lambda: NOW,
    )

    async def body(db):
        created = await service.create_play(
            db,
            Play(user_id=7, bet_id=1, choice_id=1, amount=Decimal("50")),
        )
        summaries = await service.find_latest_plays(db, 7)
        return created, summaries

    created, summaries = with_session(body)

    assert isinstance(created, Play)
    assert created.registration_date == NOW
    assert len(summaries) == 1
    assert summaries[0].id == created.id
    assert summaries[0].choice.description == "Home"
    assert summaries[0].result == "Home"
