"""Play database model."""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    Index,
    Numeric,
)

from database.base import Base, UTCDateTime
from models.base import IdMixin


class Play(Base, IdMixin):
    """A user's wager on one option of an externally defined bet."""

    __tablename__ = "plays"

    # References
    user_id = Column(BigInteger, nullable=False)
    bet_id = Column(BigInteger, nullable=False, index=True)
    choice_id = Column(BigInteger, nullable=True)

    # Stake
    amount = Column(Numeric(15, 2), nullable=False)

    # Set by the service when the play is accepted
    registration_date = Column(UTCDateTime(), nullable=False)

    # Constraints
    __table_args__ = (
        CheckConstraint("amount >= 0", name="non_negative_amount"),
        Index("idx_plays_user_registration", "user_id", "registration_date"),
    )

    def __repr__(self) -> str:
        return f"<Play bet={self.bet_id} choice={self.choice_id} ${self.amount}>"
