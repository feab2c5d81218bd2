"""Pydantic schemas for user endpoints."""
from schemas.base import ApiModel


class UserSummary(ApiModel):
    """Public view of a user. The password is never exposed."""

    id: int
    username: str
