"""Vote model."""
from datetime import datetime, timezone as tz
from sqlalchemy import Column, Integer, DateTime, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship

from schoolvote.core.constants import VOTE_UNIQUE_CONSTRAINT
from schoolvote.db.base import Base


class Vote(Base):
    __tablename__ = "votes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    candidate_id = Column(Integer, ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False)
    position_id = Column(Integer, ForeignKey("positions.id", ondelete="CASCADE"), nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(tz.utc))

    # Relationships
    user = relationship("User", back_populates="votes")
    candidate = relationship("Candidate", back_populates="votes")
    position = relationship("Position", back_populates="votes")

    __table_args__ = (
        Index("idx_votes_position", "position_id"),
        Index("idx_votes_candidate", "candidate_id"),
        UniqueConstraint("user_id", "position_id", name=VOTE_UNIQUE_CONSTRAINT),
    )
