"""Vote schemas."""
from datetime import datetime
from typing import List

from pydantic import Field

from schoolvote.schemas.common import CamelModel


class VoteRequest(CamelModel):
    candidate_id: int = Field(..., ge=1)
    position_id: int = Field(..., ge=1)


class VoteResponse(CamelModel):
    id: int
    user_id: int
    candidate_id: int
    position_id: int
    timestamp: datetime


class StatsSummary(CamelModel):
    total_students: int
    voted_students: int
    participation_rate: float


class PositionVotes(CamelModel):
    position_id: int
    position_name: str
    votes: int
    percentage: float


class SchoolLevelVotes(CamelModel):
    school_level: str
    total_students: int
    voted_students: int
    percentage: float


class CandidateVotes(CamelModel):
    candidate_id: int
    candidate_name: str
    votes: int
    percentage: float


class PositionCandidateVotes(CamelModel):
    position_id: int
    position_name: str
    candidates: List[CandidateVotes]


class VoteStats(CamelModel):
    summary: StatsSummary
    votes_by_position: List[PositionVotes]
    votes_by_school_level: List[SchoolLevelVotes]
    votes_by_candidate_and_position: List[PositionCandidateVotes]
