"""School settings model (singleton row)."""
from sqlalchemy import Column, Integer, String, DateTime

from schoolvote.core.constants import DEFAULT_ELECTION_STATUS
from schoolvote.db.base import Base


class SchoolSettings(Base):
    __tablename__ = "school_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    school_name = Column(String(200), nullable=False)
    election_title = Column(String(200), nullable=False)
    election_status = Column(String(20), nullable=False, default=DEFAULT_ELECTION_STATUS)
    start_date = Column(DateTime(timezone=True), nullable=True)
    end_date = Column(DateTime(timezone=True), nullable=True)
    logo1 = Column(String(2048), nullable=True)
    logo2 = Column(String(2048), nullable=True)
