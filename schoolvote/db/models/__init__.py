"""Database models."""
from schoolvote.db.models.user import User
from schoolvote.db.models.partylist import Partylist
from schoolvote.db.models.position import Position
from schoolvote.db.models.candidate import Candidate
from schoolvote.db.models.vote import Vote
from schoolvote.db.models.school_settings import SchoolSettings

__all__ = ["User", "Partylist", "Position", "Candidate", "Vote", "SchoolSettings"]
