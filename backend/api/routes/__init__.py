"""API routes module."""

from api.routes.plays import router as plays_router

__all__ = [
    "plays_router",
]
