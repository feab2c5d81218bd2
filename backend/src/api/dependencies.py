"""FastAPI dependencies for injection."""
from fastapi import Request

from core.auth import get_current_user
from core.config import get_settings
from db.session import get_store
from services.llm import LLMProvider


def get_llm_provider(request: Request) -> LLMProvider:
    """Return the language-model provider created at startup."""
    return request.app.state.llm_provider


__all__ = [
    "get_current_user",
    "get_llm_provider",
    "get_settings",
    "get_store",
]
