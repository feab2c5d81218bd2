"""Tag endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_store
from api.helpers import parse_id
from db.store import EntityStore
from models import Tag
from schemas.prompt import PromptDetail
from schemas.tag import TagCreate, TagResponse
from services.exceptions import TagAlreadyExistsError
from services.prompt_view_service import list_prompts_by_tag
from services.tag_service import create_tag

router = APIRouter(prefix="/api/tags", tags=["tags"])


def _get_tag_or_404(store: EntityStore, raw_id: str) -> Tag:
    tag = store.tags.get(parse_id(raw_id, "tag"))
    if tag is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tag not found")
    return tag


@router.get("", response_model=list[TagResponse])
async def list_tags(store: EntityStore = Depends(get_store)) -> list[TagResponse]:
    """List all tags."""
    return [TagResponse.model_validate(tag) for tag in store.tags.list_all()]


@router.post("", response_model=TagResponse, status_code=status.HTTP_201_CREATED)
async def create_tag_endpoint(
    data: TagCreate,
    store: EntityStore = Depends(get_store),
) -> TagResponse:
    """
    Create a tag.

    Returns 400 if a tag with the same name (case-insensitive) already exists.
    """
    try:
        tag = create_tag(store, data.name)
    except TagAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return TagResponse.model_validate(tag)


@router.get("/{tag_id}", response_model=TagResponse)
async def get_tag(tag_id: str, store: EntityStore = Depends(get_store)) -> TagResponse:
    """Get a single tag."""
    return TagResponse.model_validate(_get_tag_or_404(store, tag_id))


@router.get("/{tag_id}/prompts", response_model=list[PromptDetail])
async def get_tag_prompts(
    tag_id: str,
    store: EntityStore = Depends(get_store),
) -> list[PromptDetail]:
    """List public prompts with a tag. Returns 404 if the tag doesn't exist."""
    tag = _get_tag_or_404(store, tag_id)
    return list_prompts_by_tag(store, tag.id)
