"""Tag and prompt-tag association records."""
from dataclasses import dataclass

from models.base import Entity


@dataclass(kw_only=True)
class Tag(Entity):
    """
    A tag. Names are unique case-insensitively.

    The stored name keeps the casing used when the tag was first created.
    """

    name: str


@dataclass(kw_only=True)
class PromptTag(Entity):
    """Association row linking one prompt to one tag."""

    prompt_id: int
    tag_id: int
