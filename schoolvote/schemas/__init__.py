"""Pydantic schemas for request/response validation."""
from schoolvote.schemas.auth import LoginRequest, SchoolLevelSelection
from schoolvote.schemas.candidate import CandidateCreate, CandidateResponse, CandidateUpdate
from schoolvote.schemas.common import CamelModel, ErrorResponse, SuccessResponse
from schoolvote.schemas.partylist import PartylistCreate, PartylistResponse, PartylistUpdate
from schoolvote.schemas.position import PositionCreate, PositionResponse, PositionUpdate
from schoolvote.schemas.settings import SchoolSettingsResponse, SchoolSettingsUpdate
from schoolvote.schemas.user import (
    BulkUserResult,
    SessionUser,
    UserCreate,
    UserResponse,
    UserUpdate,
)
from schoolvote.schemas.vote import VoteRequest, VoteResponse, VoteStats

__all__ = [
    "LoginRequest",
    "SchoolLevelSelection",
    "CandidateCreate",
    "CandidateResponse",
    "CandidateUpdate",
    "CamelModel",
    "ErrorResponse",
    "SuccessResponse",
    "PartylistCreate",
    "PartylistResponse",
    "PartylistUpdate",
    "PositionCreate",
    "PositionResponse",
    "PositionUpdate",
    "SchoolSettingsResponse",
    "SchoolSettingsUpdate",
    "BulkUserResult",
    "SessionUser",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
    "VoteRequest",
    "VoteResponse",
    "VoteStats",
]
