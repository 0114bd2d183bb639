"""Services module."""

from services.message_service import message_service
from services.play_service import play_service

__all__ = [
    "message_service",
    "play_service",
]
