"""Candidate schemas."""
from typing import List, Optional

from pydantic import Field, field_validator

from schoolvote.core.constants import GRADE_LEVELS
from schoolvote.core.sanitization import sanitize_name, validate_image_reference
from schoolvote.schemas.common import CamelModel, SchoolLevel


def _check_grades(grades: List[int]) -> List[int]:
    unknown = [g for g in grades if g not in GRADE_LEVELS]
    if unknown:
        raise ValueError(f"Unknown grade levels: {unknown}")
    return sorted(set(grades))


class CandidateCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    photo: Optional[str] = None
    position_id: int = Field(..., ge=1)
    partylist_id: int = Field(..., ge=1)
    school_levels: List[SchoolLevel] = Field(..., min_length=1)
    grade_levels: List[int] = Field(..., min_length=1)

    @field_validator('name')
    @classmethod
    def sanitize_name_field(cls, v: str) -> str:
        return sanitize_name(v, field="Candidate name")

    @field_validator('photo')
    @classmethod
    def validate_photo_field(cls, v: Optional[str]) -> Optional[str]:
        return validate_image_reference(v)

    @field_validator('school_levels')
    @classmethod
    def dedupe_school_levels(cls, v: List[str]) -> List[str]:
        return list(dict.fromkeys(v))

    @field_validator('grade_levels')
    @classmethod
    def validate_grade_levels(cls, v: List[int]) -> List[int]:
        return _check_grades(v)


class CandidateUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    photo: Optional[str] = None
    position_id: Optional[int] = Field(None, ge=1)
    partylist_id: Optional[int] = Field(None, ge=1)
    school_levels: Optional[List[SchoolLevel]] = Field(None, min_length=1)
    grade_levels: Optional[List[int]] = Field(None, min_length=1)

    @field_validator('name')
    @classmethod
    def sanitize_name_field(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            return sanitize_name(v, field="Candidate name")
        return v

    @field_validator('photo')
    @classmethod
    def validate_photo_field(cls, v: Optional[str]) -> Optional[str]:
        return validate_image_reference(v)

    @field_validator('school_levels')
    @classmethod
    def dedupe_school_levels(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is not None:
            return list(dict.fromkeys(v))
        return v

    @field_validator('grade_levels')
    @classmethod
    def validate_grade_levels(cls, v: Optional[List[int]]) -> Optional[List[int]]:
        if v is not None:
            return _check_grades(v)
        return v


class CandidateResponse(CamelModel):
    id: int
    name: str
    photo: Optional[str] = None
    position_id: int
    partylist_id: int
    school_levels: List[str]
    grade_levels: List[int]
