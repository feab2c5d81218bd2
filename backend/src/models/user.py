"""User record."""
from dataclasses import dataclass

from models.base import Entity


@dataclass(kw_only=True)
class User(Entity):
    """A user who owns prompts. Usernames are unique."""

    username: str
    password: str
