"""Tests for prompt request/response schemas."""
from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from schemas.category import CategoryResponse
from schemas.prompt import PromptCreate, PromptDetail, PromptUpdate
from schemas.tag import TagResponse
from schemas.user import UserSummary
from schemas.validators import normalize_tag_names


class TestNormalizeTagNames:
    """Tests for tag name normalization."""

    def test_trims_and_preserves_case(self) -> None:
        assert normalize_tag_names(["  Machine Learning "]) == ["Machine Learning"]

    def test_drops_blanks_and_case_insensitive_duplicates(self) -> None:
        assert normalize_tag_names(["x", "", "  ", "X", "y", "x"]) == ["x", "y"]

    def test_rejects_overlong_names(self) -> None:
        with pytest.raises(ValueError, match="maximum length"):
            normalize_tag_names(["a" * 101])

    def test_rejects_non_strings(self) -> None:
        with pytest.raises(ValueError, match="must be strings"):
            normalize_tag_names(["ok", 3])  # type: ignore[list-item]


class TestPromptCreate:
    """Tests for PromptCreate validation."""

    def test_accepts_camel_case(self) -> None:
        data = PromptCreate.model_validate(
            {"title": "T", "content": "C", "categoryId": 2, "userId": 1, "isPublic": False},
        )
        assert data.category_id == 2
        assert data.user_id == 1
        assert data.is_public is False
        assert data.tags == []

    def test_null_tags_become_empty(self) -> None:
        data = PromptCreate.model_validate(
            {"title": "T", "content": "C", "categoryId": 1, "tags": None},
        )
        assert data.tags == []

    def test_tags_must_be_a_list(self) -> None:
        with pytest.raises(ValidationError):
            PromptCreate.model_validate(
                {"title": "T", "content": "C", "categoryId": 1, "tags": "x,y"},
            )

    def test_requires_title_content_and_category(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            PromptCreate.model_validate({})
        missing = {err["loc"][0] for err in exc_info.value.errors()}
        assert missing == {"title", "content", "categoryId"}

    def test_rejects_blank_content(self) -> None:
        with pytest.raises(ValidationError, match="Content cannot be empty"):
            PromptCreate(title="T", content="  ", category_id=1)

    def test_rejects_overlong_title(self) -> None:
        with pytest.raises(ValidationError, match="maximum length"):
            PromptCreate(title="t" * 501, content="C", category_id=1)


class TestPromptUpdate:
    """Tests for PromptUpdate partial semantics."""

    def test_field_changes_only_includes_set_fields(self) -> None:
        data = PromptUpdate.model_validate({"title": "New", "tags": ["a"]})
        assert data.field_changes() == {"title": "New"}

    def test_omitted_tags_is_none(self) -> None:
        data = PromptUpdate.model_validate({"isPublic": False})
        assert data.tags is None
        assert data.field_changes() == {"is_public": False}

    def test_empty_tags_list_is_kept(self) -> None:
        data = PromptUpdate.model_validate({"tags": []})
        assert data.tags == []


def test__prompt_detail__serializes_camel_case() -> None:
    detail = PromptDetail(
        id=1,
        title="T",
        content="C",
        category_id=1,
        user_id=1,
        is_public=True,
        created_at=datetime(2024, 5, 1, tzinfo=UTC),
        category=CategoryResponse(id=1, name="Business", icon="chart-simple", color="green"),
        user=UserSummary(id=1, username="John Doe"),
        tags=[TagResponse(id=4, name="business")],
    )

    dumped = detail.model_dump(by_alias=True)

    assert dumped["categoryId"] == 1
    assert dumped["userId"] == 1
    assert dumped["isPublic"] is True
    assert dumped["createdAt"] == datetime(2024, 5, 1, tzinfo=UTC)
    assert dumped["tags"] == [{"id": 4, "name": "business"}]
