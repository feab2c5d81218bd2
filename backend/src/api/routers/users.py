"""User endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_current_user, get_store
from api.helpers import parse_id
from db.store import EntityStore
from models import User
from schemas.prompt import PromptDetail
from schemas.user import UserSummary
from services.prompt_view_service import list_user_prompts

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/me", response_model=UserSummary)
async def get_current_user_info(
    current_user: User = Depends(get_current_user),
) -> UserSummary:
    """Get the current user."""
    return UserSummary(id=current_user.id, username=current_user.username)


@router.get("/me/prompts", response_model=list[PromptDetail])
async def get_my_prompts(
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
) -> list[PromptDetail]:
    """List the current user's prompts, private ones included."""
    return list_user_prompts(store, current_user.id)


@router.get("/{user_id}/prompts", response_model=list[PromptDetail])
async def get_user_prompts(
    user_id: str,
    store: EntityStore = Depends(get_store),
) -> list[PromptDetail]:
    """List a user's prompts, private ones included. Returns 404 for unknown users."""
    user = store.users.get(parse_id(user_id, "user"))
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return list_user_prompts(store, user.id)
