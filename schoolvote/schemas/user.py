"""User schemas."""
from typing import Optional

from pydantic import Field, field_validator

from schoolvote.core.constants import MAX_GRADE_LEVEL, MIN_GRADE_LEVEL
from schoolvote.core.sanitization import sanitize_name, sanitize_reference_number
from schoolvote.schemas.common import CamelModel, SchoolLevel


class UserCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    reference_number: str = Field(..., min_length=1, max_length=50)
    is_admin: bool = False
    school_level: Optional[SchoolLevel] = None
    grade_level: Optional[int] = Field(None, ge=MIN_GRADE_LEVEL, le=MAX_GRADE_LEVEL)

    @field_validator('name')
    @classmethod
    def sanitize_name_field(cls, v: str) -> str:
        return sanitize_name(v)

    @field_validator('reference_number')
    @classmethod
    def sanitize_reference_number_field(cls, v: str) -> str:
        return sanitize_reference_number(v)


class UserUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    reference_number: Optional[str] = Field(None, min_length=1, max_length=50)
    is_admin: Optional[bool] = None
    school_level: Optional[SchoolLevel] = None
    grade_level: Optional[int] = Field(None, ge=MIN_GRADE_LEVEL, le=MAX_GRADE_LEVEL)

    @field_validator('name')
    @classmethod
    def sanitize_name_field(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            return sanitize_name(v)
        return v

    @field_validator('reference_number')
    @classmethod
    def sanitize_reference_number_field(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            return sanitize_reference_number(v)
        return v


class UserResponse(CamelModel):
    id: int
    name: str
    reference_number: str
    is_admin: bool
    has_voted: bool
    school_level: Optional[str] = None
    grade_level: Optional[int] = None


class SessionUser(CamelModel):
    """What a logged-in user sees about themself."""
    id: int
    name: str
    is_admin: bool
    has_voted: bool
    school_level: Optional[str] = None
    grade_level: Optional[int] = None


class BulkUserResult(CamelModel):
    success: bool
    reference_number: Optional[str] = None
    id: Optional[int] = None
    name: Optional[str] = None
    message: Optional[str] = None
