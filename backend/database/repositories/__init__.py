"""
Repositories Package

Storage access for records owned by this service.
"""

from database.repositories.plays import PlayRepository, play_repository

__all__ = ["PlayRepository", "play_repository"]
