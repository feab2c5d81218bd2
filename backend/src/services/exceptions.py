"""Shared exceptions for service layer operations."""


class EntityNotFoundError(Exception):
    """Base class for lookups of an id that does not exist."""

    entity_name = "Entity"

    def __init__(self, entity_id: int) -> None:
        self.entity_id = entity_id
        super().__init__(f"{self.entity_name} not found")


class PromptNotFoundError(EntityNotFoundError):
    """Raised when a prompt is not found."""

    entity_name = "Prompt"


class TagAlreadyExistsError(Exception):
    """Raised when creating a tag whose name already exists (case-insensitive)."""

    def __init__(self, tag_name: str) -> None:
        self.tag_name = tag_name
        super().__init__(f"Tag '{tag_name}' already exists")


class InvalidReferenceError(Exception):
    """
    Raised when a prompt write references a category or user that does not exist.

    Nothing is mutated when this is raised.
    """

    def __init__(self, field: str, value: int) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value} does not exist")


class LLMProviderError(Exception):
    """Raised when the language-model provider fails or returns an unusable reply."""

