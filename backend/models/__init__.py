"""Database models module."""

from models.play import Play

__all__ = [
    "Play",
]
