"""Application constants.

Fixed election vocabulary shared by the models, schemas and services.
"""
from typing import Literal, get_args

# School levels and the grades each one covers
SCHOOL_LEVEL_GRADES = {
    "elementary": (3, 4, 5, 6),
    "juniorHigh": (7, 8, 9, 10),
    "seniorHigh": (11, 12),
}
SCHOOL_LEVELS = tuple(SCHOOL_LEVEL_GRADES)
GRADE_LEVELS = tuple(g for grades in SCHOOL_LEVEL_GRADES.values() for g in grades)
MIN_GRADE_LEVEL = min(GRADE_LEVELS)
MAX_GRADE_LEVEL = max(GRADE_LEVELS)

# Election lifecycle. A scheduled election opens only inside its voting window.
ElectionStatus = Literal["inactive", "active", "scheduled"]
ELECTION_STATUSES = get_args(ElectionStatus)
ELECTION_STATUS_ACTIVE = "active"
ELECTION_STATUS_SCHEDULED = "scheduled"
DEFAULT_ELECTION_STATUS = "inactive"

# Session cookie lifetime in minutes (24 hours)
ACCESS_TOKEN_EXPIRE_MINUTES = 1440

# Name of the unique constraint guarding one vote per (user, position)
VOTE_UNIQUE_CONSTRAINT = "uq_vote_user_position"


def grades_for_level(school_level: str) -> tuple:
    """Return the grades belonging to a school level (empty for unknown levels)."""
    return SCHOOL_LEVEL_GRADES.get(school_level, ())
