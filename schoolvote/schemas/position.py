"""Position schemas."""
from typing import List, Optional

from pydantic import Field, field_validator

from schoolvote.core.sanitization import sanitize_name
from schoolvote.schemas.common import CamelModel, SchoolLevel


def _dedupe(levels):
    return list(dict.fromkeys(levels))


class PositionCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    max_votes: int = Field(1, ge=1)
    school_levels: List[SchoolLevel] = Field(..., min_length=1)
    display_order: int = Field(0, ge=0)

    @field_validator('name')
    @classmethod
    def sanitize_name_field(cls, v: str) -> str:
        return sanitize_name(v, field="Position name")

    @field_validator('school_levels')
    @classmethod
    def dedupe_school_levels(cls, v: List[str]) -> List[str]:
        return _dedupe(v)


class PositionUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    max_votes: Optional[int] = Field(None, ge=1)
    school_levels: Optional[List[SchoolLevel]] = Field(None, min_length=1)
    display_order: Optional[int] = Field(None, ge=0)

    @field_validator('name')
    @classmethod
    def sanitize_name_field(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            return sanitize_name(v, field="Position name")
        return v

    @field_validator('school_levels')
    @classmethod
    def dedupe_school_levels(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is not None:
            return _dedupe(v)
        return v


class PositionResponse(CamelModel):
    id: int
    name: str
    max_votes: int
    school_levels: List[str]
    display_order: int
