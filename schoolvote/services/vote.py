"""Vote business logic.

One vote per (student, position). The pre-insert lookup only gives a
friendly early answer; the ``uq_vote_user_position`` constraint is what
actually serializes concurrent submissions for the same key.
"""
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from schoolvote.core.constants import VOTE_UNIQUE_CONSTRAINT
from schoolvote.core.exceptions import (
    AlreadyVoted,
    ElectionClosed,
    Inconsistent,
    NotEligible,
    NotFound,
    Unauthenticated,
)
from schoolvote.core.logging_config import get_logger
from schoolvote.db.models import Candidate, Position, User, Vote
from schoolvote.services.school_settings import is_election_open
from schoolvote.services.utils import get_or_404

logger = get_logger(__name__)


def is_duplicate_vote_error(error: IntegrityError) -> bool:
    """Whether an IntegrityError comes from the one-vote-per-position constraint."""
    message = str(error.orig) if error.orig is not None else str(error)
    lowered = message.lower()
    if VOTE_UNIQUE_CONSTRAINT in message:
        return True
    # SQLite names the columns instead of the constraint
    return "unique constraint" in lowered and "user_id" in lowered and "position_id" in lowered


def check_eligibility(user: User, position: Position, candidate: Candidate) -> None:
    """
    Re-check on the server what the ballot page filters on the client.

    Raises:
        NotEligible: If the user may not vote for this candidate
    """
    if user.is_admin:
        raise NotEligible("Administrators cannot vote")
    if not user.school_level or user.grade_level is None:
        raise NotEligible("Select your school level and grade before voting")
    if user.school_level not in (position.school_levels or []):
        raise NotEligible("This position is not open to your school level")
    if user.school_level not in (candidate.school_levels or []):
        raise NotEligible("This candidate is not running for your school level")
    if user.grade_level not in (candidate.grade_levels or []):
        raise NotEligible("This candidate is not running for your grade")


def cast_vote(
    db: Session,
    user_id: Optional[int],
    candidate_id: int,
    position_id: int,
    now: Optional[datetime] = None,
) -> Vote:
    """
    Validate and record one vote.

    The vote insert and the has-voted flag are committed together, so a
    failed write never marks the user as having voted.

    Args:
        db: Database session
        user_id: Authenticated user id, or None when there is no session
        candidate_id: Candidate being voted for
        position_id: Position the ballot entry is for
        now: Override for the current time, used for the window check and the vote timestamp

    Returns:
        The committed Vote

    Raises:
        Unauthenticated: No session user, or the user no longer exists
        ElectionClosed: Settings say voting is not open
        NotFound: Position or candidate does not exist
        Inconsistent: Candidate belongs to a different position
        NotEligible: School level / grade does not match
        AlreadyVoted: A vote for this position already exists
    """
    if user_id is None:
        raise Unauthenticated()
    now = now or datetime.now(timezone.utc)

    user = db.get(User, user_id)
    if not user:
        raise Unauthenticated("User not found")

    if not is_election_open(db, now):
        raise ElectionClosed()

    position = db.get(Position, position_id)
    if not position:
        raise NotFound("Position not found")

    candidate = db.get(Candidate, candidate_id)
    if not candidate:
        raise NotFound("Candidate not found")

    if candidate.position_id != position.id:
        raise Inconsistent()

    check_eligibility(user, position, candidate)

    existing_vote = db.query(Vote).filter(
        Vote.user_id == user_id,
        Vote.position_id == position_id
    ).first()
    if existing_vote:
        logger.info("vote_rejected_duplicate", user_id=user_id, position_id=position_id)
        raise AlreadyVoted()

    vote = Vote(
        user_id=user_id,
        candidate_id=candidate_id,
        position_id=position_id,
        timestamp=now
    )
    user.has_voted = True

    try:
        db.add(vote)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        # Concurrent submission for the same (user, position) won the race
        if is_duplicate_vote_error(e):
            logger.info("vote_rejected_duplicate", user_id=user_id, position_id=position_id, race=True)
            raise AlreadyVoted()
        raise

    db.refresh(vote)
    logger.info("vote_cast", user_id=user_id, position_id=position_id, candidate_id=candidate_id)
    return vote


def reset_user_vote(db: Session, user_id: int) -> User:
    """
    Remove every vote a user cast and clear their has-voted flag.

    The user may vote again afterwards, including for the same positions.
    """
    user = get_or_404(db, User, user_id, "User")

    removed = db.query(Vote).filter(Vote.user_id == user_id).delete(synchronize_session=False)
    user.has_voted = False
    db.commit()
    db.refresh(user)

    logger.info("vote_reset", user_id=user_id, removed_votes=removed)
    return user


def get_user_votes(db: Session, user_id: int) -> List[Vote]:
    """Votes cast by a user, in ballot order."""
    return (
        db.query(Vote)
        .join(Position, Position.id == Vote.position_id)
        .filter(Vote.user_id == user_id)
        .order_by(Position.display_order, Position.id)
        .all()
    )


def get_vote_counts(db: Session) -> List[Tuple[int, int, int]]:
    """
    Count votes per (position, candidate) in a single grouped query.

    Returns:
        List of (position_id, candidate_id, count); pairs without votes are absent
    """
    rows = (
        db.query(Vote.position_id, Vote.candidate_id, func.count(Vote.id))
        .group_by(Vote.position_id, Vote.candidate_id)
        .all()
    )
    return [(position_id, candidate_id, count) for position_id, candidate_id, count in rows]
