"""
Declarative base for SQLAlchemy models.

This module provides:
- Base: declarative base every ORM model inherits from
- UTCDateTime: timestamp column type that always round-trips as aware UTC
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator


class Base(DeclarativeBase):
    """Declarative base for all plays service models."""


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware timestamp stored in UTC.

    SQLite drops tzinfo on the way back, so naive values read from the
    database are tagged as UTC and aware values are normalized on write.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
