"""
Service layer for tags and the prompt-tag association table.

Associations are unique per (prompt_id, tag_id) pair. Tags are created lazily
from free-text names and de-duplicated case-insensitively.
"""
import logging

from db.store import EntityStore
from models import PromptTag, Tag
from services.exceptions import TagAlreadyExistsError

logger = logging.getLogger(__name__)


def create_tag(store: EntityStore, name: str) -> Tag:
    """
    Create a new tag.

    Raises:
        TagAlreadyExistsError: If a tag with this name exists (case-insensitive).
    """
    if store.get_tag_by_name(name) is not None:
        raise TagAlreadyExistsError(name)
    tag = store.tags.create(Tag(name=name))
    logger.info("Created tag %d '%s'", tag.id, tag.name)
    return tag


def get_or_create_tag(store: EntityStore, name: str) -> Tag:
    """
    Return the tag with this name (case-insensitive), creating it if needed.

    A newly created tag keeps the spelling given here.
    """
    tag = store.get_tag_by_name(name)
    if tag is None:
        tag = create_tag(store, name)
    return tag


def _find_association(store: EntityStore, prompt_id: int, tag_id: int) -> PromptTag | None:
    return store.prompt_tags.find_first(
        lambda pt: pt.prompt_id == prompt_id and pt.tag_id == tag_id,
    )


def attach_tag(store: EntityStore, prompt_id: int, tag_id: int) -> PromptTag:
    """
    Link a tag to a prompt.

    Idempotent: if the pair is already linked, the existing association is
    returned and nothing is created.
    """
    existing = _find_association(store, prompt_id, tag_id)
    if existing is not None:
        return existing
    return store.prompt_tags.create(PromptTag(prompt_id=prompt_id, tag_id=tag_id))


def detach_tag(store: EntityStore, prompt_id: int, tag_id: int) -> bool:
    """
    Unlink a tag from a prompt.

    Returns:
        True if an association was removed, False if the pair was not linked.
    """
    existing = _find_association(store, prompt_id, tag_id)
    if existing is None:
        return False
    return store.prompt_tags.delete(existing.id)


def get_tags_for_prompt(store: EntityStore, prompt_id: int) -> list[Tag]:
    """
    Get the tags linked to a prompt, in the order they were attached.

    Associations pointing at a missing tag are skipped.
    """
    tags = []
    for association in store.prompt_tags.filter(lambda pt: pt.prompt_id == prompt_id):
        tag = store.tags.get(association.tag_id)
        if tag is not None:
            tags.append(tag)
    return tags


def get_prompt_ids_for_tag(store: EntityStore, tag_id: int) -> set[int]:
    """Get the ids of all prompts linked to a tag."""
    return {pt.prompt_id for pt in store.prompt_tags.filter(lambda pt: pt.tag_id == tag_id)}


def delete_prompt_tags(store: EntityStore, prompt_id: int) -> int:
    """
    Remove every association referencing a prompt.

    Called when the prompt itself is deleted.

    Returns:
        The number of associations removed.
    """
    removed = 0
    for association in store.prompt_tags.filter(lambda pt: pt.prompt_id == prompt_id):
        if store.prompt_tags.delete(association.id):
            removed += 1
    return removed


def add_prompt_tags(store: EntityStore, prompt_id: int, tag_names: list[str]) -> None:
    """Attach tags by name, creating unknown tags."""
    for name in tag_names:
        tag = get_or_create_tag(store, name)
        attach_tag(store, prompt_id, tag.id)


def update_prompt_tags(store: EntityStore, prompt_id: int, tag_names: list[str]) -> None:
    """
    Make a prompt's tags match the desired list of names.

    Names are compared case-insensitively. Tags already linked and still wanted
    are left untouched, missing names are attached (creating tags as needed) and
    linked tags no longer wanted are detached.
    """
    current_tags = get_tags_for_prompt(store, prompt_id)
    current_names = {tag.name.lower() for tag in current_tags}
    desired_names = {name.lower() for name in tag_names}

    add_prompt_tags(
        store, prompt_id, [name for name in tag_names if name.lower() not in current_names],
    )

    for tag in current_tags:
        if tag.name.lower() not in desired_names:
            detach_tag(store, prompt_id, tag.id)
