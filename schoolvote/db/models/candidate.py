"""Candidate model."""
from sqlalchemy import Column, Integer, String, JSON, ForeignKey, Index
from sqlalchemy.orm import relationship

from schoolvote.db.base import Base


class Candidate(Base):
    __tablename__ = "candidates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    photo = Column(String(2048), nullable=True)
    position_id = Column(Integer, ForeignKey("positions.id", ondelete="CASCADE"), nullable=False)
    partylist_id = Column(Integer, ForeignKey("partylists.id", ondelete="CASCADE"), nullable=False)
    school_levels = Column(JSON, nullable=False, default=list)
    grade_levels = Column(JSON, nullable=False, default=list)

    # Relationships
    position = relationship("Position", back_populates="candidates")
    partylist = relationship("Partylist", back_populates="candidates")
    votes = relationship("Vote", back_populates="candidate", cascade="all, delete-orphan")

    __table_args__ = (
        Index("idx_candidates_position", "position_id"),
        Index("idx_candidates_partylist", "partylist_id"),
    )
