"""
Integration Test: Plays API

Exercises the HTTP routes with the play service wired to in-memory fakes.
"""

import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from fastapi.testclient import TestClient

from api.routes.plays import get_play_service
from database.dependencies import get_db
from main import app
from models import Play
from schemas.bet import BetOptionSchema, BetSchema
from services.bet_catalog import BetCatalogResponseError, BetCatalogUnavailableError
from services.message_service import MESSAGES
from services.play_service import PlayService
from utils.errors import PlayError

NOW = datetime(2026, 5, 1, 18, 0, 0, tzinfo=timezone.utc)

BET = BetSchema(
    id=1,
    min_amount=Decimal("10"),
    max_amount=Decimal("100"),
    match_date=NOW + timedelta(days=1),
    options=[
        BetOptionSchema(id=1, description="Home"),
        BetOptionSchema(id=2, description="Draw"),
    ],
    result_id=1,
)


class FakeBetLookup:
    def __init__(self, bets=None, error: Exception | None = None):
        self.bets = {b.id: b for b in bets or []}
        self.error = error
        self.calls: list[set[int]] = []

    async def find_bets_by_ids(self, ids):
        self.calls.append(set(ids))
        if self.error is not None:
            raise self.error
        return [self.bets[i] for i in ids if i in self.bets]


class MemoryPlayStore:
    def __init__(self):
        self.plays: list[Play] = []

    async def insert(self, db, play: Play) -> Play:
        play.id = len(self.plays) + 1
        self.plays.append(play)
        return play

    async def latest_by_user(self, db, user_id: int, limit: int = 5) -> list[Play]:
        own = [p for p in self.plays if p.user_id == user_id]
        own.sort(key=lambda p: (p.registration_date, p.id), reverse=True)
        return own[:limit]


async def no_db():
    yield None


@pytest.fixture
def store():
    return MemoryPlayStore()


def make_client(service: PlayService) -> TestClient:
    app.dependency_overrides[get_db] = no_db
    app.dependency_overrides[get_play_service] = lambda: service
    return TestClient(app)


@pytest.fixture
def client(store):
    service = PlayService(
        bet_lookup=FakeBetLookup([BET]),
        play_store=store,
        clock=lambda: NOW,
    )
    yield make_client(service)
    app.dependency_overrides.clear()


def test_create_play_returns_created(client, store) -> None:
    response = client.post(
        "/users/7/plays",
        json={"bet_id": 1, "choice_id": 2, "amount": "100"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 1
    assert body["user_id"] == 7
    assert body["choice_id"] == 2
    assert Decimal(body["amount"]) == Decimal("100")
    assert datetime.fromisoformat(body["registration_date"].replace("Z", "+00:00")) == NOW
    assert len(store.plays) == 1


def test_create_play_rejection_maps_to_bad_request(client, store) -> None:
    response = client.post(
        "/users/7/plays",
        json={"bet_id": 1, "choice_id": 3, "amount": "50"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == {
        "code": "CHOICE_NOT_VALID",
        "message": MESSAGES["en"][PlayError.CHOICE_NOT_VALID],
    }
    assert store.plays == []


def test_create_play_rejection_is_localized(client) -> None:
    response = client.post(
        "/users/7/plays",
        json={"bet_id": 1, "choice_id": 1, "amount": "5"},
        headers={"Accept-Language": "es-AR,es;q=0.9"},
    )

    assert response.status_code == 400
    assert response.json()["detail"]["message"] == MESSAGES["es"][PlayError.BET_NOT_VALID_MIN]


def test_create_play_negative_amount_is_unprocessable(client, store) -> None:
    response = client.post(
        "/users/7/plays",
        json={"bet_id": 1, "choice_id": 1, "amount": "-1"},
    )

    assert response.status_code == 422
    assert store.plays == []


def test_create_play_sub_cent_amount_is_unprocessable(store) -> None:
    lookup = FakeBetLookup([BET])
    service = PlayService(bet_lookup=lookup, play_store=store, clock=lambda: NOW)
    client = make_client(service)
    try:
        response = client.post(
            "/users/7/plays",
            json={"bet_id": 1, "choice_id": 1, "amount": "50.125"},
        )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 422
    assert lookup.calls == []
    assert store.plays == []


def test_create_play_whole_cent_amount_is_stored_as_sent(client, store) -> None:
    response = client.post(
        "/users/7/plays",
        json={"bet_id": 1, "choice_id": 1, "amount": "50.12"},
    )

    assert response.status_code == 201
    assert store.plays[0].amount == Decimal("50.12")
    assert Decimal(response.json()["amount"]) == Decimal("50.12")


def test_latest_plays_returns_summaries(client) -> None:
    for choice_id in (1, 2):
        response = client.post(
            "/users/7/plays",
            json={"bet_id": 1, "choice_id": choice_id, "amount": "50"},
        )
        assert response.status_code == 201

    response = client.get("/users/7/plays/latest")

    assert response.status_code == 200
    summaries = response.json()
    assert [s["id"] for s in summaries] == [2, 1]
    assert summaries[0]["choice"] == {"id": 2, "description": "Draw"}
    assert summaries[0]["result"] == "Home"
    assert summaries[0]["bet"]["id"] == 1


def test_latest_plays_empty_for_new_user(client) -> None:
    response = client.get("/users/99/plays/latest")

    assert response.status_code == 200
    assert response.json() == []


def test_catalog_unavailable_maps_to_service_unavailable(store) -> None:
    service = PlayService(
        bet_lookup=FakeBetLookup(error=BetCatalogUnavailableError("down", 503)),
        play_store=store,
        clock=lambda: NOW,
    )
    client = make_client(service)
    try:
        response = client.post(
            "/users/7/plays",
            json={"bet_id": 1, "choice_id": 1, "amount": "50"},
        )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 503
    assert store.plays == []


def test_catalog_bad_payload_maps_to_bad_gateway(store) -> None:
    store.plays.append(
        Play(
            id=1,
            user_id=7,
            bet_id=1,
            choice_id=1,
            amount=Decimal("50"),
            registration_date=NOW,
        )
    )
    service = PlayService(
        bet_lookup=FakeBetLookup(error=BetCatalogResponseError("garbage")),
        play_store=store,
        clock=lambda: NOW,
    )
    client = make_client(service)
    try:
        response = client.get("/users/7/plays/latest")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 502
