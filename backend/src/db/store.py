"""
In-memory entity store.

Each entity type lives in its own id-keyed table with a monotonically increasing
id counter. The store is volatile and owned by the running application; nothing
here validates references between entity types.
"""
from collections.abc import Callable, Iterator, Mapping
from dataclasses import fields, replace
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from models import Category, Entity, Prompt, PromptTag, Tag, User

T = TypeVar("T", bound=Entity)


class EntityTable(Generic[T]):
    """
    Id-keyed storage for one entity type.

    Ids start at 1 and are never reused, even after a record is deleted.
    Iteration follows insertion order.
    """

    # Fields that cannot be changed through update()
    immutable_fields: frozenset[str] = frozenset({"id"})

    def __init__(self, entity_name: str) -> None:
        self.entity_name = entity_name
        self._records: dict[int, T] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._records.values()))

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def _on_create(self, record: T) -> T:
        """Hook for per-type stamping of new records."""
        return record

    def create(self, record: T) -> T:
        """Assign the next id to the record, store it and return the stored copy."""
        stored = self._on_create(replace(record, id=self._next_id))
        self._next_id += 1
        self._records[stored.id] = stored
        return stored

    def get(self, record_id: int) -> T | None:
        """Return the record with the given id, or None if it does not exist."""
        return self._records.get(record_id)

    def find_first(self, predicate: Callable[[T], bool]) -> T | None:
        """Return the first record (in insertion order) matching the predicate."""
        return next((record for record in self._records.values() if predicate(record)), None)

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        """Return all records matching the predicate, in insertion order."""
        return [record for record in self._records.values() if predicate(record)]

    def list_all(self) -> list[T]:
        """Return all records in insertion order."""
        return list(self._records.values())

    def update(self, record_id: int, changes: Mapping[str, Any]) -> T | None:
        """
        Merge the given fields into an existing record.

        Fields not present in `changes` are left untouched.

        Returns:
            The updated record, or None if no record has this id.

        Raises:
            ValueError: If `changes` names an unknown or immutable field.
        """
        existing = self._records.get(record_id)
        if existing is None:
            return None

        known = {f.name for f in fields(existing)}
        for name in changes:
            if name not in known:
                raise ValueError(f"{self.entity_name} has no field '{name}'")
            if name in self.immutable_fields:
                raise ValueError(f"{self.entity_name} field '{name}' cannot be updated")

        updated = replace(existing, **changes)
        self._records[record_id] = updated
        return updated

    def delete(self, record_id: int) -> bool:
        """Remove a record. Returns True if a record was actually removed."""
        return self._records.pop(record_id, None) is not None


class PromptTable(EntityTable[Prompt]):
    """Prompt storage; stamps created_at when a prompt is first stored."""

    immutable_fields = frozenset({"id", "created_at"})

    def _on_create(self, record: Prompt) -> Prompt:
        return replace(record, created_at=datetime.now(UTC))


class EntityStore:
    """
    Authoritative holder of all entity records and sole issuer of ids.

    One instance is created per process (see api.main) and handed to request
    handlers through the `get_store` dependency.
    """

    def __init__(self) -> None:
        self.users: EntityTable[User] = EntityTable("User")
        self.categories: EntityTable[Category] = EntityTable("Category")
        self.tags: EntityTable[Tag] = EntityTable("Tag")
        self.prompts: PromptTable = PromptTable("Prompt")
        self.prompt_tags: EntityTable[PromptTag] = EntityTable("PromptTag")

    # --- Unique-field lookups ---

    def get_user_by_username(self, username: str) -> User | None:
        """Find a user by exact username."""
        return self.users.find_first(lambda user: user.username == username)

    def get_category_by_name(self, name: str) -> Category | None:
        """Find a category by name (case-insensitive)."""
        lowered = name.lower()
        return self.categories.find_first(lambda category: category.name.lower() == lowered)

    def get_tag_by_name(self, name: str) -> Tag | None:
        """Find a tag by name (case-insensitive)."""
        lowered = name.lower()
        return self.tags.find_first(lambda tag: tag.name.lower() == lowered)
