"""Pydantic schemas for prompt endpoints."""
from datetime import datetime

from pydantic import Field, field_validator

from schemas.base import ApiModel
from schemas.category import CategoryResponse
from schemas.tag import TagResponse
from schemas.user import UserSummary
from schemas.validators import normalize_tag_names, validate_content, validate_title


class PromptCreate(ApiModel):
    """
    Schema for creating a new prompt.

    `user_id` defaults to the current user when omitted. `tags` is a list of
    tag names; unknown names are created on the fly.
    """

    title: str
    content: str
    category_id: int
    user_id: int | None = None
    is_public: bool = True
    tags: list[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def check_title(cls, v: str) -> str:
        """Validate title is non-blank and within limits."""
        return validate_title(v)

    @field_validator("content")
    @classmethod
    def check_content(cls, v: str) -> str:
        """Validate content is non-blank and within limits."""
        return validate_content(v)

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: list[str] | None) -> list[str]:
        """Trim tag names and drop blanks and duplicates."""
        if v is None:
            return []
        if not isinstance(v, list):
            raise ValueError("Tags must be a list of names")
        return normalize_tag_names(v)


class PromptUpdate(ApiModel):
    """
    Schema for a partial prompt update.

    Omitted (or null) fields are left unchanged. When `tags` is provided it is the
    desired tag set: missing names are attached, absent ones detached.
    """

    title: str | None = None
    content: str | None = None
    category_id: int | None = None
    is_public: bool | None = None
    tags: list[str] | None = None

    @field_validator("title")
    @classmethod
    def check_title(cls, v: str | None) -> str | None:
        """Validate title if provided."""
        if v is not None:
            return validate_title(v)
        return v

    @field_validator("content")
    @classmethod
    def check_content(cls, v: str | None) -> str | None:
        """Validate content if provided."""
        if v is not None:
            return validate_content(v)
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: list[str] | None) -> list[str] | None:
        """Trim tag names if provided."""
        if v is None:
            return None
        if not isinstance(v, list):
            raise ValueError("Tags must be a list of names")
        return normalize_tag_names(v)

    def field_changes(self) -> dict[str, object]:
        """Return the prompt fields to change, excluding tags and unset/null values."""
        return self.model_dump(exclude_unset=True, exclude_none=True, exclude={"tags"})


class PromptDetail(ApiModel):
    """
    A prompt composed with its category, owning user and tags.

    Returned by every prompt read endpoint and by create/update.
    """

    id: int
    title: str
    content: str
    category_id: int
    user_id: int
    is_public: bool
    created_at: datetime
    category: CategoryResponse
    user: UserSummary
    tags: list[TagResponse]


class MessageResponse(ApiModel):
    """Plain message response (e.g. after a delete)."""

    message: str
