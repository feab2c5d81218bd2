"""Pydantic schemas for the AI assistance endpoints."""
from pydantic import Field

from schemas.base import ApiModel


class EnhanceRequest(ApiModel):
    """Request to suggest improvements for an existing prompt."""

    prompt: str = Field(..., min_length=1)


class EnhanceResponse(ApiModel):
    """Up to three suggested enhancements."""

    suggestions: list[str]


class GenerateRequest(ApiModel):
    """Request to draft a new prompt from a topic."""

    topic: str = Field(..., min_length=1)
    description: str | None = None
    category: str | None = None


class GenerateResponse(ApiModel):
    """A generated prompt draft."""

    prompt: str
