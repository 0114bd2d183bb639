"""Plays API routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from database.dependencies import get_db
from models import Play
from schemas import PlayCreate, PlayResponse, PlaySummaryResponse
from services import message_service, play_service
from services.play_service import PlayService
from utils.errors import PlayError, format_api_error

router = APIRouter(prefix="/users/{user_id}/plays", tags=["Plays"])


def get_play_service() -> PlayService:
    """FastAPI dependency returning the shared play service."""
    return play_service


@router.post(
    "",
    response_model=PlayResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_play(
    user_id: int,
    request: PlayCreate,
    accept_language: Optional[str] = Header(default=None),
    db: AsyncSession = Depends(get_db),
    service: PlayService = Depends(get_play_service),
):
    """Place a play on a bet."""
    play = Play(
        user_id=user_id,
        bet_id=request.bet_id,
        choice_id=request.choice_id,
        amount=request.amount,
    )

    result = await service.create_play(db, play)

    if isinstance(result, PlayError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=format_api_error(
                result, message_service.get_message(result, accept_language)
            ),
        )

    return PlayResponse.model_validate(result)


@router.get("/latest", response_model=list[PlaySummaryResponse])
async def get_latest_plays(
    user_id: int,
    db: AsyncSession = Depends(get_db),
    service: PlayService = Depends(get_play_service),
):
    """Get the user's five most recent plays with bet details."""
    return await service.find_latest_plays(db, user_id)
