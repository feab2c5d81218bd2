"""Language-model capability interface and shared helpers."""
from abc import ABC, abstractmethod

from schemas.ai import GenerateRequest

# Callers never receive more suggestions than this
MAX_SUGGESTIONS = 3


class LLMProvider(ABC):
    """
    A language model able to draft and improve prompts.

    Calls are made once: there is no retry, caching or rate limiting. Any
    failure is raised as LLMProviderError.
    """

    name: str

    @abstractmethod
    async def generate(self, request: GenerateRequest) -> str:
        """Draft a prompt from a topic with optional description and category."""

    @abstractmethod
    async def enhance(self, prompt_text: str) -> list[str]:
        """Suggest up to MAX_SUGGESTIONS improvements for an existing prompt."""

    async def aclose(self) -> None:
        """Release any network resources held by the provider."""
        return None


def clean_suggestions(suggestions: list[str]) -> list[str]:
    """Trim suggestions, drop empty ones and cap the count."""
    cleaned = [s.strip() for s in suggestions if isinstance(s, str) and s.strip()]
    return cleaned[:MAX_SUGGESTIONS]
