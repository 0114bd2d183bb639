"""Pydantic schemas module."""

from schemas.bet import BetOptionSchema, BetSchema
from schemas.common import BaseSchema
from schemas.play import (
    PlayBetSummary,
    PlayChoice,
    PlayCreate,
    PlayResponse,
    PlaySummaryResponse,
)

__all__ = [
    "BaseSchema",
    "BetOptionSchema",
    "BetSchema",
    "PlayBetSummary",
    "PlayChoice",
    "PlayCreate",
    "PlayResponse",
    "PlaySummaryResponse",
]
