"""
Database module initialization.
Exports database components for use throughout the application.
"""

from database.base import Base, UTCDateTime
from database.connection import (
    init_db,
    close_db,
    check_db_connection,
    get_db_info,
)
from database.dependencies import get_db
from database.session import get_db_session

__all__ = [
    # Connection management
    "init_db",
    "close_db",
    # Dependencies
    "get_db",
    "get_db_session",
    # Base classes
    "Base",
    "UTCDateTime",
    # Utilities
    "check_db_connection",
    "get_db_info",
]
