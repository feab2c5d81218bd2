"""Prompts CRUD and search endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_current_user, get_store
from api.helpers import parse_id
from db.store import EntityStore
from models import User
from schemas.prompt import MessageResponse, PromptCreate, PromptDetail, PromptUpdate
from services.exceptions import InvalidReferenceError, PromptNotFoundError
from services.prompt_service import PromptService
from services.prompt_view_service import (
    get_prompt_detail,
    list_public_prompts,
    search_prompts,
)

router = APIRouter(prefix="/api/prompts", tags=["prompts"])

prompt_service = PromptService()


def _detail_or_404(store: EntityStore, prompt_id: int) -> PromptDetail:
    detail = get_prompt_detail(store, prompt_id)
    if detail is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Prompt not found")
    return detail


@router.get("", response_model=list[PromptDetail])
async def list_prompts(store: EntityStore = Depends(get_store)) -> list[PromptDetail]:
    """List all public prompts with their category, user and tags."""
    return list_public_prompts(store)


@router.get("/search/{query}", response_model=list[PromptDetail])
async def search(query: str, store: EntityStore = Depends(get_store)) -> list[PromptDetail]:
    """
    Search public prompts.

    Case-insensitive substring match on title or content. Results are in
    storage order, not ranked.
    """
    if not query.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Search query is required",
        )
    return search_prompts(store, query)


@router.get("/{prompt_id}", response_model=PromptDetail)
async def get_prompt(prompt_id: str, store: EntityStore = Depends(get_store)) -> PromptDetail:
    """Get a single prompt with its category, user and tags."""
    return _detail_or_404(store, parse_id(prompt_id, "prompt"))


@router.post("", response_model=PromptDetail, status_code=status.HTTP_201_CREATED)
async def create_prompt(
    data: PromptCreate,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
) -> PromptDetail:
    """
    Create a new prompt.

    Tag names that do not exist yet are created. `userId` defaults to the
    current user.
    """
    try:
        prompt = prompt_service.create(store, current_user.id, data)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return _detail_or_404(store, prompt.id)


@router.put("/{prompt_id}", response_model=PromptDetail)
async def update_prompt(
    prompt_id: str,
    data: PromptUpdate,
    store: EntityStore = Depends(get_store),
) -> PromptDetail:
    """
    Partially update a prompt.

    When `tags` is given it replaces the prompt's tag set: new names are
    attached and names no longer listed are detached.
    """
    parsed_id = parse_id(prompt_id, "prompt")
    try:
        prompt_service.update(store, parsed_id, data)
    except PromptNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return _detail_or_404(store, parsed_id)


@router.delete("/{prompt_id}", response_model=MessageResponse)
async def delete_prompt(
    prompt_id: str,
    store: EntityStore = Depends(get_store),
) -> MessageResponse:
    """Delete a prompt and its tag associations."""
    try:
        prompt_service.delete(store, parse_id(prompt_id, "prompt"))
    except PromptNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return MessageResponse(message="Prompt deleted successfully")
