"""Helpers that insert test rows directly through the ORM."""
from itertools import count
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from schoolvote.core.constants import GRADE_LEVELS, SCHOOL_LEVELS
from schoolvote.db.models import Candidate, Partylist, Position, SchoolSettings, User, Vote

_reference_numbers = count(1)


def make_user(
    session: Session,
    name: str = "Student",
    reference_number: Optional[str] = None,
    is_admin: bool = False,
    has_voted: bool = False,
    school_level: Optional[str] = "elementary",
    grade_level: Optional[int] = 4,
) -> User:
    user = User(
        name=name,
        reference_number=reference_number or f"REF-{next(_reference_numbers):05d}",
        is_admin=is_admin,
        has_voted=has_voted,
        school_level=school_level,
        grade_level=grade_level,
    )
    session.add(user)
    session.commit()
    return user


def make_partylist(session: Session, name: str = "Alpha", color: str = "#ff0000") -> Partylist:
    partylist = Partylist(name=name, color=color)
    session.add(partylist)
    session.commit()
    return partylist


def make_position(
    session: Session,
    name: str = "President",
    school_levels: Sequence[str] = SCHOOL_LEVELS,
    display_order: int = 1,
    max_votes: int = 1,
) -> Position:
    position = Position(
        name=name,
        school_levels=list(school_levels),
        display_order=display_order,
        max_votes=max_votes,
    )
    session.add(position)
    session.commit()
    return position


def make_candidate(
    session: Session,
    position: Position,
    partylist: Partylist,
    name: str = "Candidate",
    school_levels: Sequence[str] = SCHOOL_LEVELS,
    grade_levels: Sequence[int] = GRADE_LEVELS,
) -> Candidate:
    candidate = Candidate(
        name=name,
        position_id=position.id,
        partylist_id=partylist.id,
        school_levels=list(school_levels),
        grade_levels=list(grade_levels),
    )
    session.add(candidate)
    session.commit()
    return candidate


def make_vote(session: Session, user: User, candidate: Candidate) -> Vote:
    """Insert a vote row and flag the user, bypassing the validator."""
    vote = Vote(user_id=user.id, candidate_id=candidate.id, position_id=candidate.position_id)
    user.has_voted = True
    session.add(vote)
    session.commit()
    return vote


def make_settings(session: Session, election_status: str = "active", **fields) -> SchoolSettings:
    row = SchoolSettings(
        school_name=fields.pop("school_name", "Test School"),
        election_title=fields.pop("election_title", "Test Election"),
        election_status=election_status,
        **fields,
    )
    session.add(row)
    session.commit()
    return row


def vote_count(session: Session, **criteria) -> int:
    query = session.query(Vote)
    for column, value in criteria.items():
        query = query.filter(getattr(Vote, column) == value)
    return query.count()
