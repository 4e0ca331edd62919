"""Partylist model."""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from schoolvote.db.base import Base


class Partylist(Base):
    __tablename__ = "partylists"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    color = Column(String(7), nullable=False)
    logo = Column(String(2048), nullable=True)
    platform_image = Column(String(2048), nullable=True)
    group_photo = Column(String(2048), nullable=True)

    # Relationships
    candidates = relationship("Candidate", back_populates="partylist", cascade="all, delete-orphan")
