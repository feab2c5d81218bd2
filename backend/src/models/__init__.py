"""In-memory entity records."""
from models.base import Entity
from models.category import Category
from models.prompt import Prompt
from models.tag import PromptTag, Tag
from models.user import User

__all__ = [
    "Category",
    "Entity",
    "Prompt",
    "PromptTag",
    "Tag",
    "User",
]
