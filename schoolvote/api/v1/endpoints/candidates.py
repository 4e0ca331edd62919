"""Candidate endpoints."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from schoolvote.api.deps import get_db, require_admin
from schoolvote.db.models import Candidate
from schoolvote.schemas import CandidateCreate, CandidateResponse, CandidateUpdate
from schoolvote.schemas.common import SchoolLevel
from schoolvote.services.candidates import (
    create_candidate,
    delete_candidate,
    get_all_candidates,
    get_candidates_by_position,
    get_candidates_by_school_and_grade,
    update_candidate,
)
from schoolvote.services.utils import get_or_404

router = APIRouter()


@router.get("", response_model=List[CandidateResponse])
async def list_candidates(
    position_id: Optional[int] = Query(None, alias="positionId"),
    school_level: Optional[SchoolLevel] = Query(None, alias="schoolLevel"),
    grade_level: Optional[int] = Query(None, alias="gradeLevel"),
    db: Session = Depends(get_db),
):
    """
    List candidates.

    Filters (first match wins):
        - positionId: candidates running for one position
        - schoolLevel + gradeLevel: the ballot a student of that level and
          grade is allowed to see
        - none: every candidate
    """
    if position_id is not None:
        return get_candidates_by_position(db, position_id)
    if school_level is not None and grade_level is not None:
        return get_candidates_by_school_and_grade(db, school_level, grade_level)
    return get_all_candidates(db)


@router.get("/{candidate_id}", response_model=CandidateResponse)
async def read_candidate(candidate_id: int, db: Session = Depends(get_db)):
    return get_or_404(db, Candidate, candidate_id, "Candidate")


@router.post("", response_model=CandidateResponse, status_code=201, dependencies=[Depends(require_admin)])
async def create_candidate_endpoint(candidate: CandidateCreate, db: Session = Depends(get_db)):
    """
    Create a candidate (admin only).

    Raises:
        404 if positionId or partylistId does not exist
        400 if a grade level is outside the candidate's school levels
    """
    return create_candidate(db, **candidate.model_dump())


@router.put("/{candidate_id}", response_model=CandidateResponse, dependencies=[Depends(require_admin)])
async def update_candidate_endpoint(
    candidate_id: int,
    changes: CandidateUpdate,
    db: Session = Depends(get_db)
):
    return update_candidate(db, candidate_id, changes.model_dump(exclude_unset=True))


@router.delete("/{candidate_id}", status_code=204, dependencies=[Depends(require_admin)])
async def delete_candidate_endpoint(candidate_id: int, db: Session = Depends(get_db)):
    delete_candidate(db, candidate_id)
    return Response(status_code=204)
