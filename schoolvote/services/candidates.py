"""Candidate business logic."""
from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from schoolvote.core.constants import grades_for_level
from schoolvote.core.exceptions import ValidationError
from schoolvote.core.logging_config import get_logger
from schoolvote.db.models import Candidate, Partylist, Position
from schoolvote.services.utils import apply_changes, get_or_404, sync_has_voted, voter_ids_for

logger = get_logger(__name__)


def check_grades_match_levels(school_levels: Iterable[str], grade_levels: Iterable[int]) -> None:
    """Every grade a candidate is offered to must fall inside one of their school levels."""
    allowed = {grade for level in school_levels for grade in grades_for_level(level)}
    stray = sorted(set(grade_levels) - allowed)
    if stray:
        raise ValidationError(
            f"Grade levels {stray} are outside the candidate's school levels"
        )


def get_candidate(db: Session, candidate_id: int) -> Optional[Candidate]:
    return db.get(Candidate, candidate_id)


def get_all_candidates(db: Session) -> List[Candidate]:
    return db.query(Candidate).order_by(Candidate.position_id, Candidate.id).all()


def get_candidates_by_position(db: Session, position_id: int) -> List[Candidate]:
    return (
        db.query(Candidate)
        .filter(Candidate.position_id == position_id)
        .order_by(Candidate.id)
        .all()
    )


def get_candidates_by_school_and_grade(db: Session, school_level: str, grade_level: int) -> List[Candidate]:
    """
    Candidates offered to a student of the given level and grade.

    A candidate is listed only when the candidate and their position are both
    open to the level and the candidate is open to the grade. This is the same
    rule ``cast_vote`` enforces.
    """
    candidates = (
        db.query(Candidate)
        .join(Position, Position.id == Candidate.position_id)
        .order_by(Position.display_order, Position.id, Candidate.id)
        .all()
    )
    return [
        c for c in candidates
        if school_level in (c.school_levels or [])
        and grade_level in (c.grade_levels or [])
        and school_level in (c.position.school_levels or [])
    ]


def create_candidate(
    db: Session,
    name: str,
    position_id: int,
    partylist_id: int,
    school_levels: List[str],
    grade_levels: List[int],
    photo: Optional[str] = None,
) -> Candidate:
    """
    Create a candidate for an existing position and partylist.

    Raises:
        NotFound: If the position or partylist does not exist
        ValidationError: If a grade level is outside the school levels
    """
    get_or_404(db, Position, position_id, "Position")
    get_or_404(db, Partylist, partylist_id, "Partylist")
    check_grades_match_levels(school_levels, grade_levels)

    candidate = Candidate(
        name=name,
        photo=photo,
        position_id=position_id,
        partylist_id=partylist_id,
        school_levels=list(school_levels),
        grade_levels=list(grade_levels),
    )
    db.add(candidate)
    db.commit()
    db.refresh(candidate)
    return candidate


def update_candidate(db: Session, candidate_id: int, changes: Dict) -> Candidate:
    """
    Apply a partial update to a candidate.

    Moving a candidate to another position is allowed only while nobody has
    voted for them; otherwise their votes would stop matching their position.
    """
    candidate = get_or_404(db, Candidate, candidate_id, "Candidate")

    if "position_id" in changes and changes["position_id"] != candidate.position_id:
        get_or_404(db, Position, changes["position_id"], "Position")
        if voter_ids_for(db, candidate_id=candidate_id):
            raise ValidationError("Cannot move a candidate who already has votes to another position")
    if "partylist_id" in changes:
        get_or_404(db, Partylist, changes["partylist_id"], "Partylist")

    changes = dict(changes)
    for field in ("school_levels", "grade_levels"):
        if field in changes:
            changes[field] = list(changes[field])

    check_grades_match_levels(
        changes.get("school_levels", candidate.school_levels),
        changes.get("grade_levels", candidate.grade_levels),
    )

    apply_changes(candidate, changes)
    db.commit()
    db.refresh(candidate)
    return candidate


def delete_candidate(db: Session, candidate_id: int) -> None:
    """Delete a candidate and the votes cast for them."""
    candidate = get_or_404(db, Candidate, candidate_id, "Candidate")
    affected = voter_ids_for(db, candidate_id=candidate_id)

    db.delete(candidate)
    sync_has_voted(db, affected)
    db.commit()
    logger.info("candidate_deleted", candidate_id=candidate_id, affected_voters=len(affected))
