"""Authentication schemas."""
from pydantic import Field, field_validator, model_validator

from schoolvote.core.constants import MAX_GRADE_LEVEL, MIN_GRADE_LEVEL, grades_for_level
from schoolvote.core.sanitization import sanitize_name, sanitize_reference_number
from schoolvote.schemas.common import CamelModel, SchoolLevel


class LoginRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    reference_number: str = Field(..., min_length=1, max_length=50)

    @field_validator('name')
    @classmethod
    def sanitize_name_field(cls, v: str) -> str:
        return sanitize_name(v)

    @field_validator('reference_number')
    @classmethod
    def sanitize_reference_number_field(cls, v: str) -> str:
        return sanitize_reference_number(v)


class SchoolLevelSelection(CamelModel):
    school_level: SchoolLevel
    grade_level: int = Field(..., ge=MIN_GRADE_LEVEL, le=MAX_GRADE_LEVEL)

    @model_validator(mode='after')
    def grade_matches_level(self):
        """The grade must belong to the selected school level."""
        if self.grade_level not in grades_for_level(self.school_level):
            raise ValueError(f"Grade {self.grade_level} is not part of {self.school_level}")
        return self
