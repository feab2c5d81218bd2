"""Pydantic schemas for tag endpoints."""
from pydantic import field_validator

from schemas.base import ApiModel
from schemas.validators import validate_tag_name


class TagResponse(ApiModel):
    """Schema for a tag."""

    id: int
    name: str


class TagCreate(ApiModel):
    """Schema for creating a tag."""

    name: str

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        """Trim and validate the tag name."""
        return validate_tag_name(v)
