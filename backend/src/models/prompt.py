"""Prompt record."""
from dataclasses import dataclass
from datetime import datetime

from models.base import Entity


@dataclass(kw_only=True)
class Prompt(Entity):
    """
    A reusable AI prompt.

    created_at is stamped by the entity store on creation and never changes.
    """

    title: str
    content: str
    category_id: int
    user_id: int
    is_public: bool = True
    created_at: datetime | None = None
