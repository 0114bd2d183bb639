"""Play Pydantic schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from schemas.common import BaseSchema


class PlayCreate(BaseSchema):
    """Play creation schema."""

    bet_id: int
    choice_id: int
    amount: Decimal = Field(ge=0, max_digits=15, decimal_places=2)


class PlayResponse(BaseSchema):
    """Play response schema."""

    id: int
    user_id: int
    bet_id: int
    choice_id: Optional[int]
    amount: Decimal
    registration_date: datetime


class PlayBetSummary(BaseSchema):
    """Bet fields embedded in a play summary."""

    id: int
    min_amount: Optional[Decimal] = None
    max_amount: Optional[Decimal] = None
    match_date: datetime


class PlayChoice(BaseSchema):
    """Option the user picked."""

    id: int
    description: str


class PlaySummaryResponse(BaseSchema):
    """Play enriched with bet metadata for display."""

    id: int
    registration_date: datetime
    amount: Decimal
    bet: Optional[PlayBetSummary] = None
    choice: Optional[PlayChoice] = None
    result: Optional[str] = Field(
        default=None,
        description="Description of the winning option, if settled",
    )
