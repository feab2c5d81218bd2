"""Pytest fixtures for testing."""
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from api.dependencies import get_llm_provider, get_store
from api.main import app
from db.seed import create_seeded_store
from db.store import EntityStore
from schemas.ai import GenerateRequest
from services.exceptions import LLMProviderError
from services.llm import LLMProvider


class FakeLLMProvider(LLMProvider):
    """In-process provider that records calls and returns canned replies."""

    name = "fake"

    def __init__(self) -> None:
        self.suggestions = ["Add a target audience.", "Specify the output format."]
        self.generated = "Write a [genre] story about [subject]."
        self.fail = False
        self.enhance_calls: list[str] = []
        self.generate_calls: list[GenerateRequest] = []

    async def generate(self, request: GenerateRequest) -> str:
        self.generate_calls.append(request)
        if self.fail:
            raise LLMProviderError("upstream unavailable")
        return self.generated

    async def enhance(self, prompt_text: str) -> list[str]:
        self.enhance_calls.append(prompt_text)
        if self.fail:
            raise LLMProviderError("upstream unavailable")
        return self.suggestions


@pytest.fixture
def store() -> EntityStore:
    """A store loaded with the default user, categories and tags."""
    return create_seeded_store()


@pytest.fixture
def empty_store() -> EntityStore:
    """A store with no records."""
    return EntityStore()


@pytest.fixture
def llm_provider() -> FakeLLMProvider:
    """A fake language-model provider."""
    return FakeLLMProvider()


@pytest.fixture
async def client(
    store: EntityStore,
    llm_provider: FakeLLMProvider,
) -> AsyncGenerator[AsyncClient]:
    """Create a test client bound to the test store and fake provider."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_llm_provider] = lambda: llm_provider

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()
