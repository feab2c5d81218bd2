"""Category endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_store
from api.helpers import parse_id
from db.store import EntityStore
from models import Category
from schemas.category import CategoryResponse
from schemas.prompt import PromptDetail
from services.prompt_view_service import list_prompts_by_category

router = APIRouter(prefix="/api/categories", tags=["categories"])


def _get_category_or_404(store: EntityStore, raw_id: str) -> Category:
    category = store.categories.get(parse_id(raw_id, "category"))
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category


@router.get("", response_model=list[CategoryResponse])
async def list_categories(store: EntityStore = Depends(get_store)) -> list[CategoryResponse]:
    """List all categories."""
    return [CategoryResponse.model_validate(c) for c in store.categories.list_all()]


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: str,
    store: EntityStore = Depends(get_store),
) -> CategoryResponse:
    """Get a single category."""
    return CategoryResponse.model_validate(_get_category_or_404(store, category_id))


@router.get("/{category_id}/prompts", response_model=list[PromptDetail])
async def get_category_prompts(
    category_id: str,
    store: EntityStore = Depends(get_store),
) -> list[PromptDetail]:
    """List public prompts in a category. Returns 404 if the category doesn't exist."""
    category = _get_category_or_404(store, category_id)
    return list_prompts_by_category(store, category.id)
