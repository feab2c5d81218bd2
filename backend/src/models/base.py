"""Base record type shared by all in-memory entities."""
from dataclasses import dataclass


@dataclass(kw_only=True)
class Entity:
    """
    Base class for all stored records.

    The id is assigned by the entity store on creation; records built by callers
    carry the placeholder 0 until they are stored.
    """

    id: int = 0
