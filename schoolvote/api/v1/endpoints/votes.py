"""Vote endpoints."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from schoolvote.api.deps import get_current_user, get_db, get_session_user_id, require_admin
from schoolvote.core.rate_limit import RATE_LIMITS, limiter
from schoolvote.core.security import set_session_cookie
from schoolvote.db.models import User
from schoolvote.schemas import VoteRequest, VoteResponse, VoteStats
from schoolvote.services.stats import get_vote_stats
from schoolvote.services.vote import cast_vote, get_user_votes

router = APIRouter()


@router.post("", response_model=VoteResponse, status_code=201)
@limiter.limit(RATE_LIMITS["vote"])
async def vote_endpoint(
    request: Request,
    response: Response,
    vote_request: VoteRequest,
    user_id: Optional[int] = Depends(get_session_user_id),
    db: Session = Depends(get_db),
):
    """
    Cast one vote for one position.

    A student votes once per position. Each position is submitted separately,
    and the first successful vote marks the student as having voted.

    Example:
        Request:
            POST /api/v1/votes
            Cookie: session_token=eyJhbGc...
            {
                "positionId": 1,
                "candidateId": 4
            }

        Response (201):
            {
                "id": 31,
                "userId": 7,
                "candidateId": 4,
                "positionId": 1,
                "timestamp": "2025-11-03T08:15:42.118000Z"
            }

    Errors:
        401 Unauthenticated: no session, or the account was deleted
        400 ElectionClosed: settings say voting is not open
        404 NotFound: position or candidate does not exist
        400 Inconsistent: candidate is running for a different position
        403 NotEligible: position/candidate not open to the student's level or grade
        409 AlreadyVoted: the student already voted for this position

    Security:
        - The (user, position) pair is unique in the database, so concurrent
          duplicate submissions cannot both succeed
        - Retrying after AlreadyVoted fails again and changes nothing

    Note:
        On success the session cookie is re-issued with hasVoted=true.
    """
    vote = cast_vote(db, user_id, vote_request.candidate_id, vote_request.position_id)
    set_session_cookie(response, vote.user)
    return vote


@router.get("/mine", response_model=List[VoteResponse])
async def my_votes(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Votes the session user has cast, in ballot order."""
    return get_user_votes(db, user.id)


@router.get("/stats", response_model=VoteStats, dependencies=[Depends(require_admin)])
async def vote_stats(db: Session = Depends(get_db)):
    """
    Election report (admin only).

    All percentages except the per-school-level ones use the number of
    non-admin users as the denominator. Values are not rounded.
    """
    return get_vote_stats(db)
