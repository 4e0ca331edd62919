"""Partylist schemas."""
from typing import Optional

from pydantic import Field, field_validator

from schoolvote.core.sanitization import sanitize_name, validate_color, validate_image_reference
from schoolvote.schemas.common import CamelModel


class PartylistCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    color: str
    logo: Optional[str] = None
    platform_image: Optional[str] = None
    group_photo: Optional[str] = None

    @field_validator('name')
    @classmethod
    def sanitize_name_field(cls, v: str) -> str:
        return sanitize_name(v, field="Partylist name")

    @field_validator('color')
    @classmethod
    def validate_color_field(cls, v: str) -> str:
        return validate_color(v)

    @field_validator('logo', 'platform_image', 'group_photo')
    @classmethod
    def validate_image_fields(cls, v: Optional[str]) -> Optional[str]:
        return validate_image_reference(v)


class PartylistUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    color: Optional[str] = None
    logo: Optional[str] = None
    platform_image: Optional[str] = None
    group_photo: Optional[str] = None

    @field_validator('name')
    @classmethod
    def sanitize_name_field(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            return sanitize_name(v, field="Partylist name")
        return v

    @field_validator('color')
    @classmethod
    def validate_color_field(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            return validate_color(v)
        return v

    @field_validator('logo', 'platform_image', 'group_photo')
    @classmethod
    def validate_image_fields(cls, v: Optional[str]) -> Optional[str]:
        return validate_image_reference(v)


class PartylistResponse(CamelModel):
    id: int
    name: str
    color: str
    logo: Optional[str] = None
    platform_image: Optional[str] = None
    group_photo: Optional[str] = None
