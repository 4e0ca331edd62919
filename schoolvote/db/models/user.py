"""User model (students and admins)."""
from sqlalchemy import Boolean, Column, Integer, String
from sqlalchemy.orm import relationship

from schoolvote.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    reference_number = Column(String(50), unique=True, nullable=False, index=True)
    is_admin = Column(Boolean, nullable=False, default=False)
    # Denormalized: true iff at least one Vote row exists for this user
    has_voted = Column(Boolean, nullable=False, default=False)
    school_level = Column(String(20), nullable=True)
    grade_level = Column(Integer, nullable=True)

    # Relationships
    votes = relationship("Vote", back_populates="user", cascade="all, delete-orphan")
