"""Tests for composed prompt views."""
import pytest

from db.store import EntityStore
from models import Prompt, User
from schemas.prompt import PromptCreate
from services.prompt_service import PromptService
from services.prompt_view_service import (
    get_prompt_detail,
    list_prompts_by_category,
    list_prompts_by_tag,
    list_public_prompts,
    list_user_prompts,
    search_prompts,
)

prompt_service = PromptService()


def create(store: EntityStore, **overrides: object) -> Prompt:
    fields = {"title": "T", "content": "C", "category_id": 1}
    fields.update(overrides)
    return prompt_service.create(store, 1, PromptCreate(**fields))


def ids(details: list) -> list[int]:
    return [detail.id for detail in details]


@pytest.fixture
def mixed(store: EntityStore) -> dict[str, Prompt]:
    """A public and a private prompt sharing a category and tag."""
    return {
        "public": create(store, title="Haiku Helper", content="Write a haiku", tags=["poetry"]),
        "private": create(
            store, title="Secret Haiku", content="Hidden", is_public=False, tags=["poetry"],
        ),
    }


# =============================================================================
# get_prompt_detail
# =============================================================================


def test__get_prompt_detail__round_trip(store: EntityStore) -> None:
    prompt = create(store, title="T", content="C", tags=["x", "y"])

    detail = get_prompt_detail(store, prompt.id)

    assert detail is not None
    assert detail.title == "T"
    assert detail.content == "C"
    assert detail.category.id == 1
    assert detail.category.name == "Creative Writing"
    assert detail.user.id == 1
    assert detail.user.username == "John Doe"
    assert [tag.name for tag in detail.tags] == ["x", "y"]
    assert detail.created_at == prompt.created_at


def test__get_prompt_detail__missing_prompt(store: EntityStore) -> None:
    assert get_prompt_detail(store, 12345) is None


def test__get_prompt_detail__dangling_category_is_absent(store: EntityStore) -> None:
    prompt = store.prompts.create(Prompt(title="T", content="C", category_id=99, user_id=1))

    assert get_prompt_detail(store, prompt.id) is None


def test__get_prompt_detail__dangling_user_is_absent(store: EntityStore) -> None:
    prompt = store.prompts.create(Prompt(title="T", content="C", category_id=1, user_id=99))

    assert get_prompt_detail(store, prompt.id) is None


def test__get_prompt_detail__does_not_expose_password(store: EntityStore) -> None:
    detail = get_prompt_detail(store, create(store).id)

    assert "password" not in detail.user.model_dump()


# =============================================================================
# Filtered views
# =============================================================================


def test__list_public_prompts__excludes_private(
    store: EntityStore, mixed: dict[str, Prompt],
) -> None:
    assert ids(list_public_prompts(store)) == [mixed["public"].id]


def test__list_public_prompts__skips_broken_references(store: EntityStore) -> None:
    good = create(store)
    store.prompts.create(Prompt(title="Broken", content="x", category_id=99, user_id=1))
    later = create(store)

    assert ids(list_public_prompts(store)) == [good.id, later.id]


def test__list_prompts_by_category(store: EntityStore, mixed: dict[str, Prompt]) -> None:
    business = create(store, category_id=2)

    assert ids(list_prompts_by_category(store, 1)) == [mixed["public"].id]
    assert ids(list_prompts_by_category(store, 2)) == [business.id]
    assert list_prompts_by_category(store, 5) == []


def test__list_prompts_by_tag(store: EntityStore, mixed: dict[str, Prompt]) -> None:
    poetry = store.get_tag_by_name("poetry")

    assert ids(list_prompts_by_tag(store, poetry.id)) == [mixed["public"].id]
    assert list_prompts_by_tag(store, 1) == []


def test__search_prompts__matches_title_or_content_case_insensitively(
    store: EntityStore,
) -> None:
    by_title = create(store, title="Marketing Plan", content="Draft a plan")
    by_content = create(store, title="Email", content="Write MARKETING copy")
    create(store, title="Unrelated", content="Nothing here")

    assert ids(search_prompts(store, "marketing")) == [by_title.id, by_content.id]
    assert ids(search_prompts(store, "mArKeTiNg pLaN")) == [by_title.id]


def test__search_prompts__never_returns_private(
    store: EntityStore, mixed: dict[str, Prompt],
) -> None:
    assert ids(search_prompts(store, "haiku")) == [mixed["public"].id]
    assert search_prompts(store, "hidden") == []


def test__list_user_prompts__includes_private(
    store: EntityStore, mixed: dict[str, Prompt],
) -> None:
    other = store.users.create(User(username="Other", password="p"))
    create(store, user_id=other.id)

    assert ids(list_user_prompts(store, 1)) == [mixed["public"].id, mixed["private"].id]
    assert len(list_user_prompts(store, other.id)) == 1


def test__deleted_prompt_disappears_from_every_view(
    store: EntityStore, mixed: dict[str, Prompt],
) -> None:
    public = mixed["public"]
    poetry = store.get_tag_by_name("poetry")

    prompt_service.delete(store, public.id)

    assert get_prompt_detail(store, public.id) is None
    assert list_public_prompts(store) == []
    assert list_prompts_by_category(store, 1) == []
    assert list_prompts_by_tag(store, poetry.id) == []
    assert search_prompts(store, "haiku") == []
    assert store.prompt_tags.filter(lambda pt: pt.prompt_id == public.id) == []


def test__views_reflect_updates_immediately(store: EntityStore) -> None:
    prompt = create(store, title="Before")
    assert ids(search_prompts(store, "before")) == [prompt.id]

    store.prompts.update(prompt.id, {"title": "After"})

    assert search_prompts(store, "before") == []
    assert ids(search_prompts(store, "after")) == [prompt.id]
