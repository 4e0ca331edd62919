"""Tally statistics.

Read-only. ``compute_vote_stats`` works on plain inputs so it can be
tested without a database; ``get_vote_stats`` feeds it from the store.

Every percentage is relative to the total number of non-admin users, except
the per-school-level figures, which are relative to that level's headcount.
Values are not rounded; the dashboard rounds for display.
"""
from typing import Dict, Iterable, List, Tuple

from sqlalchemy.orm import Session

from schoolvote.core.constants import SCHOOL_LEVELS
from schoolvote.core.utils import percentage
from schoolvote.db.models import Candidate, Position, User
from schoolvote.services.vote import get_vote_counts


def compute_vote_stats(
    users: Iterable[User],
    positions: Iterable[Position],
    candidates: Iterable[Candidate],
    vote_counts: Iterable[Tuple[int, int, int]],
) -> Dict:
    """
    Build the election report.

    Args:
        users: All users; admins are filtered out here
        positions: Positions in display order
        candidates: All candidates
        vote_counts: (position_id, candidate_id, count) tuples

    Returns:
        Dict with ``summary``, ``votes_by_position``, ``votes_by_school_level``
        and ``votes_by_candidate_and_position``
    """
    students = [u for u in users if not u.is_admin]
    total_students = len(students)
    voted_students = sum(1 for u in students if u.has_voted)

    position_totals: Dict[int, int] = {}
    pair_totals: Dict[Tuple[int, int], int] = {}
    for position_id, candidate_id, count in vote_counts:
        position_totals[position_id] = position_totals.get(position_id, 0) + count
        pair_totals[(position_id, candidate_id)] = pair_totals.get((position_id, candidate_id), 0) + count

    positions = list(positions)
    candidates = list(candidates)

    votes_by_position = []
    for position in positions:
        votes = position_totals.get(position.id, 0)
        votes_by_position.append({
            "position_id": position.id,
            "position_name": position.name,
            "votes": votes,
            "percentage": percentage(votes, total_students),
        })

    votes_by_school_level = []
    for level in SCHOOL_LEVELS:
        level_students = [u for u in students if u.school_level == level]
        level_voted = sum(1 for u in level_students if u.has_voted)
        votes_by_school_level.append({
            "school_level": level,
            "total_students": len(level_students),
            "voted_students": level_voted,
            "percentage": percentage(level_voted, len(level_students)),
        })

    votes_by_candidate_and_position: List[Dict] = []
    for position in positions:
        results = []
        for candidate in candidates:
            if candidate.position_id != position.id:
                continue
            votes = pair_totals.get((position.id, candidate.id), 0)
            results.append({
                "candidate_id": candidate.id,
                "candidate_name": candidate.name,
                "votes": votes,
                # Overall headcount, not the position's eligible subgroup
                "percentage": percentage(votes, total_students),
            })
        votes_by_candidate_and_position.append({
            "position_id": position.id,
            "position_name": position.name,
            "candidates": results,
        })

    return {
        "summary": {
            "total_students": total_students,
            "voted_students": voted_students,
            "participation_rate": percentage(voted_students, total_students),
        },
        "votes_by_position": votes_by_position,
        "votes_by_school_level": votes_by_school_level,
        "votes_by_candidate_and_position": votes_by_candidate_and_position,
    }


def get_vote_stats(db: Session) -> Dict:
    """Compute the election report from the current database state."""
    vote_counts = get_vote_counts(db)
    users = db.query(User).all()
    positions = db.query(Position).order_by(Position.display_order, Position.id).all()
    candidates = db.query(Candidate).order_by(Candidate.id).all()
    return compute_vote_stats(users, positions, candidates, vote_counts)
