"""Play creation and play summary service."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from database.repositories import PlayRepository, play_repository
from models import Play
from schemas.bet import BetOptionSchema, BetSchema
from schemas.play import PlayBetSummary, PlayChoice, PlaySummaryResponse
from services.bet_catalog import BetCatalogClient, BetCatalogConfig
from utils.errors import PlayError
from utils.time_utils import utc_now, whole_minutes_between

logger = logging.getLogger(__name__)


def find_bet_option(
    bet: BetSchema, option_id: Optional[int]
) -> Optional[BetOptionSchema]:
    """Return the bet option with the given id, or None."""
    if option_id is None:
        return None

    return next((o for o in bet.options if o.id == option_id), None)


class PlayService:
    """
    Validates and records plays, and assembles play summaries for display.
    """

    MINUTES_BEFORE_CLOSE_BET = 10
    LATEST_PLAYS_LIMIT = 5

    def __init__(
        self,
        bet_lookup: Optional[BetCatalogClient] = None,
        play_store: Optional[PlayRepository] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.bet_lookup = bet_lookup or BetCatalogClient(
            BetCatalogConfig.from_settings(settings)
        )
        self.play_store = play_store or play_repository
        self.clock = clock

    async def create_play(
        self, db: AsyncSession, play: Play
    ) -> Union[Play, PlayError]:
        """
        Validate a proposed play against its bet and store it.

        Checks run in order and the first failure is returned:
        1. Bet exists
        2. Amount is not below the bet minimum
        3. Amount is not above the bet maximum (inclusive)
        4. Choice is one of the bet's options
        5. Match starts more than 10 whole minutes from now

        On success the play is stamped with the same "now" used for the
        closing check and persisted.
        """
        bets = await self.bet_lookup.find_bets_by_ids({play.bet_id})
        if not bets:
            return self._reject(PlayError.BET_NOT_VALID, play)

        bet = bets[0]
        amount = Decimal(play.amount) if play.amount is not None else None

        # A missing amount sorts below any minimum and above any maximum
        if bet.min_amount is not None and (amount is None or amount < bet.min_amount):
            return self._reject(PlayError.BET_NOT_VALID_MIN, play)

        if bet.max_amount is not None and (amount is None or amount > bet.max_amount):
            return self._reject(PlayError.BET_NOT_VALID_MAX, play)

        # Unbounded bet, but plays.amount is NOT NULL
        if amount is None:
            return self._reject(PlayError.BET_NOT_VALID_MIN, play)

        if find_bet_option(bet, play.choice_id) is None:
            return self._reject(PlayError.CHOICE_NOT_VALID, play)

        now = self.clock()
        if whole_minutes_between(now, bet.match_date) <= self.MINUTES_BEFORE_CLOSE_BET:
            return self._reject(PlayError.BET_CLOSED, play)

        play.registration_date = now
        return await self.play_store.insert(db, play)

    def _reject(self, kind: PlayError, play: Play) -> PlayError:
        logger.info(
            f"Rejected play for user {play.user_id} on bet {play.bet_id}: {kind.value}"
        )
        return kind

    async def find_latest_plays(
        self, db: AsyncSession, user_id: int
    ) -> list[PlaySummaryResponse]:
        """
        Get the user's latest plays with bet, choice and result labels.

        Bets missing from the catalog or options that no longer exist leave
        the corresponding fields unset; the play itself is always returned.
        """
        plays = await self.play_store.latest_by_user(
            db, user_id, limit=self.LATEST_PLAYS_LIMIT
        )
        if not plays:
            return []

        bet_ids = {p.bet_id for p in plays}
        bets = {b.id: b for b in await self.bet_lookup.find_bets_by_ids(bet_ids)}

        summaries = []
        for p in plays:
            summary = PlaySummaryResponse(
                id=p.id,
                registration_date=p.registration_date,
                amount=p.amount,
            )

            bet = bets.get(p.bet_id)
            if bet is not None:
                summary.bet = PlayBetSummary.model_validate(bet)

                choice = find_bet_option(bet, p.choice_id)
                if choice is not None:
                    summary.choice = PlayChoice.model_validate(choice)

                result = find_bet_option(bet, bet.result_id)
                if result is not None:
                    summary.result = result.description
            else:
                logger.debug(f"Bet {p.bet_id} for play {p.id} not in catalog")

            summaries.append(summary)

        return summaries


# Singleton instance
play_service = PlayService()
