"""School settings schemas."""
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from schoolvote.core.constants import ElectionStatus
from schoolvote.core.sanitization import sanitize_name, validate_image_reference
from schoolvote.schemas.common import CamelModel


class SchoolSettingsUpdate(CamelModel):
    school_name: Optional[str] = Field(None, min_length=1, max_length=200)
    election_title: Optional[str] = Field(None, min_length=1, max_length=200)
    election_status: Optional[ElectionStatus] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    logo1: Optional[str] = None
    logo2: Optional[str] = None

    @field_validator('school_name', 'election_title')
    @classmethod
    def sanitize_text_fields(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            return sanitize_name(v, field="Value")
        return v

    @field_validator('start_date', 'end_date', mode='before')
    @classmethod
    def blank_date_is_none(cls, v):
        """The settings form posts an empty string for a cleared date."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('logo1', 'logo2')
    @classmethod
    def validate_logo_fields(cls, v: Optional[str]) -> Optional[str]:
        return validate_image_reference(v)


class SchoolSettingsResponse(CamelModel):
    school_name: str
    election_title: str
    election_status: str
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    logo1: Optional[str] = None
    logo2: Optional[str] = None
    voting_open: bool = False
