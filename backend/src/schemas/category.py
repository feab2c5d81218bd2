"""Pydantic schemas for category endpoints."""
from schemas.base import ApiModel


class CategoryResponse(ApiModel):
    """Schema for a category."""

    id: int
    name: str
    icon: str
    color: str
