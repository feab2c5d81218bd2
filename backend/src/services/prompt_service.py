"""Service layer for prompt write operations."""
import logging

from db.store import EntityStore
from models import Prompt
from schemas.prompt import PromptCreate, PromptUpdate
from services.exceptions import InvalidReferenceError, PromptNotFoundError
from services.tag_service import add_prompt_tags, delete_prompt_tags, update_prompt_tags

logger = logging.getLogger(__name__)


class PromptService:
    """
    Create, update and delete prompts together with their tag associations.

    Each write validates references before mutating anything. Tag changes are
    applied after the prompt itself is written and are not rolled back if they
    fail.
    """

    def _check_category(self, store: EntityStore, category_id: int) -> None:
        if store.categories.get(category_id) is None:
            raise InvalidReferenceError("categoryId", category_id)

    def _check_user(self, store: EntityStore, user_id: int) -> None:
        if store.users.get(user_id) is None:
            raise InvalidReferenceError("userId", user_id)

    def get(self, store: EntityStore, prompt_id: int) -> Prompt:
        """
        Get a raw prompt record.

        Raises:
            PromptNotFoundError: If the prompt does not exist.
        """
        prompt = store.prompts.get(prompt_id)
        if prompt is None:
            raise PromptNotFoundError(prompt_id)
        return prompt

    def create(self, store: EntityStore, user_id: int, data: PromptCreate) -> Prompt:
        """
        Create a prompt and attach its tags.

        Args:
            store: The entity store.
            user_id: Owner used when `data.user_id` is not given.
            data: Prompt fields and tag names.

        Returns:
            The stored prompt.

        Raises:
            InvalidReferenceError: If the category or user does not exist.
        """
        owner_id = data.user_id if data.user_id is not None else user_id
        self._check_category(store, data.category_id)
        self._check_user(store, owner_id)

        prompt = store.prompts.create(
            Prompt(
                title=data.title,
                content=data.content,
                category_id=data.category_id,
                user_id=owner_id,
                is_public=data.is_public,
            ),
        )
        add_prompt_tags(store, prompt.id, data.tags)
        logger.info("Created prompt %d with %d tags", prompt.id, len(data.tags))
        return prompt

    def update(self, store: EntityStore, prompt_id: int, data: PromptUpdate) -> Prompt:
        """
        Apply a partial update to a prompt.

        Only fields set in `data` change. If `data.tags` is given, the prompt's
        tags are made to match it.

        Raises:
            PromptNotFoundError: If the prompt does not exist.
            InvalidReferenceError: If a new category does not exist.
        """
        self.get(store, prompt_id)
        if data.category_id is not None:
            self._check_category(store, data.category_id)

        changes = data.field_changes()
        prompt = store.prompts.update(prompt_id, changes)
        if prompt is None:
            raise PromptNotFoundError(prompt_id)

        if data.tags is not None:
            update_prompt_tags(store, prompt_id, data.tags)

        logger.info("Updated prompt %d (fields: %s)", prompt_id, sorted(changes))
        return prompt

    def delete(self, store: EntityStore, prompt_id: int) -> None:
        """
        Delete a prompt and all of its tag associations.

        Raises:
            PromptNotFoundError: If the prompt does not exist.
        """
        if not store.prompts.delete(prompt_id):
            raise PromptNotFoundError(prompt_id)
        removed = delete_prompt_tags(store, prompt_id)
        logger.info("Deleted prompt %d and %d tag associations", prompt_id, removed)
