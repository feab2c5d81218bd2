"""Category record."""
from dataclasses import dataclass

from models.base import Entity


@dataclass(kw_only=True)
class Category(Entity):
    """
    A prompt category.

    icon and color are symbolic names interpreted by the frontend
    (e.g. icon="code", color="purple").
    """

    name: str
    icon: str
    color: str
