"""Position model."""
from sqlalchemy import Column, Integer, String, JSON, CheckConstraint
from sqlalchemy.orm import relationship

from schoolvote.db.base import Base


class Position(Base):
    __tablename__ = "positions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    max_votes = Column(Integer, nullable=False, default=1)
    school_levels = Column(JSON, nullable=False, default=list)
    display_order = Column(Integer, nullable=False, default=0)

    # Relationships
    candidates = relationship("Candidate", back_populates="position", cascade="all, delete-orphan")
    votes = relationship("Vote", back_populates="position", cascade="all, delete-orphan")

    __table_args__ = (CheckConstraint("max_votes >= 1", name="ck_position_max_votes"),)
