"""
Read-side composition of prompts.

Every view is re-derived from the store on each call. A prompt whose category
or user cannot be resolved is left out of every view instead of failing the
request.
"""
from collections.abc import Callable, Iterable

from db.store import EntityStore
from models import Prompt
from schemas.category import CategoryResponse
from schemas.prompt import PromptDetail
from schemas.tag import TagResponse
from schemas.user import UserSummary
from services.tag_service import get_prompt_ids_for_tag, get_tags_for_prompt


def _compose(store: EntityStore, prompt: Prompt) -> PromptDetail | None:
    category = store.categories.get(prompt.category_id)
    if category is None:
        return None
    user = store.users.get(prompt.user_id)
    if user is None:
        return None

    return PromptDetail(
        id=prompt.id,
        title=prompt.title,
        content=prompt.content,
        category_id=prompt.category_id,
        user_id=prompt.user_id,
        is_public=prompt.is_public,
        created_at=prompt.created_at,
        category=CategoryResponse.model_validate(category),
        user=UserSummary(id=user.id, username=user.username),
        tags=[TagResponse.model_validate(tag) for tag in get_tags_for_prompt(store, prompt.id)],
    )


def _compose_all(store: EntityStore, prompts: Iterable[Prompt]) -> list[PromptDetail]:
    details = (_compose(store, prompt) for prompt in prompts)
    return [detail for detail in details if detail is not None]


def _public_where(store: EntityStore, predicate: Callable[[Prompt], bool]) -> list[PromptDetail]:
    return _compose_all(
        store, store.prompts.filter(lambda prompt: prompt.is_public and predicate(prompt)),
    )


def get_prompt_detail(store: EntityStore, prompt_id: int) -> PromptDetail | None:
    """
    Get a prompt with its category, user and tags.

    Returns None if the prompt does not exist or its category or user is missing.
    """
    prompt = store.prompts.get(prompt_id)
    if prompt is None:
        return None
    return _compose(store, prompt)


def list_public_prompts(store: EntityStore) -> list[PromptDetail]:
    """All public prompts, in insertion order."""
    return _public_where(store, lambda _prompt: True)


def list_prompts_by_category(store: EntityStore, category_id: int) -> list[PromptDetail]:
    """Public prompts in a category."""
    return _public_where(store, lambda prompt: prompt.category_id == category_id)


def list_prompts_by_tag(store: EntityStore, tag_id: int) -> list[PromptDetail]:
    """Public prompts linked to a tag."""
    prompt_ids = get_prompt_ids_for_tag(store, tag_id)
    return _public_where(store, lambda prompt: prompt.id in prompt_ids)


def search_prompts(store: EntityStore, query: str) -> list[PromptDetail]:
    """
    Public prompts whose title or content contains the query.

    Matching is a case-insensitive substring test; results are not ranked.
    """
    needle = query.lower()
    return _public_where(
        store,
        lambda prompt: needle in prompt.title.lower() or needle in prompt.content.lower(),
    )


def list_user_prompts(store: EntityStore, user_id: int) -> list[PromptDetail]:
    """All prompts owned by a user, private ones included."""
    return _compose_all(store, store.prompts.filter(lambda prompt: prompt.user_id == user_id))
