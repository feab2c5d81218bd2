"""Health check endpoints."""
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from db.session import get_store
from db.store import EntityStore

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    prompts: int


@router.get("/health", response_model=HealthResponse)
async def health_check(store: EntityStore = Depends(get_store)) -> HealthResponse:
    """Check application health and report how many prompts are stored."""
    return HealthResponse(status="healthy", prompts=len(store.prompts))
