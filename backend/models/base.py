"""Base model utilities for SQLAlchemy."""

from sqlalchemy import BigInteger, Column, Integer


class IdMixin:
    """Mixin that adds an autoincrement integer primary key."""

    id = Column(
        # SQLite only autoincrements INTEGER PRIMARY KEY columns
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
        comment="Unique identifier"
    )
