"""Database base class and model imports."""
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import all models here so Base.metadata knows every table
from schoolvote.db.models.user import User  # noqa: F401, E402
from schoolvote.db.models.partylist import Partylist  # noqa: F401, E402
from schoolvote.db.models.position import Position  # noqa: F401, E402
from schoolvote.db.models.candidate import Candidate  # noqa: F401, E402
from schoolvote.db.models.vote import Vote  # noqa: F401, E402
from schoolvote.db.models.school_settings import SchoolSettings  # noqa: F401, E402
