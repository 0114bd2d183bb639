"""Bet catalog Pydantic schemas.

Bets are owned by the external bet catalog; these schemas are read-only
snapshots of what the catalog returns.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from schemas.common import BaseSchema


class BetOptionSchema(BaseSchema):
    """One selectable outcome of a bet."""

    id: int
    description: str


class BetSchema(BaseSchema):
    """Bet definition as published by the catalog."""

    id: int
    min_amount: Optional[Decimal] = Field(default=None, alias="minAmount")
    max_amount: Optional[Decimal] = Field(default=None, alias="maxAmount")
    match_date: datetime = Field(alias="matchDate")
    options: list[BetOptionSchema] = Field(default_factory=list)
    result_id: Optional[int] = Field(
        default=None,
        alias="resultId",
        description="Winning option id once the bet is settled",
    )
