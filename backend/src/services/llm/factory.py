"""Build the configured language-model provider."""
import logging

from core.config import Settings
from services.llm.base import LLMProvider
from services.llm.gemini_provider import GeminiProvider
from services.llm.openai_provider import OpenAIProvider

logger = logging.getLogger(__name__)


def build_llm_provider(settings: Settings) -> LLMProvider:
    """Create the provider named by `settings.llm_provider`."""
    if settings.llm_provider == "openai":
        provider: LLMProvider = OpenAIProvider(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url,
            timeout=settings.llm_timeout,
        )
    else:
        provider = GeminiProvider(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout=settings.llm_timeout,
        )
    if not getattr(settings, f"{settings.llm_provider}_api_key"):
        logger.warning("No API key configured for LLM provider '%s'", provider.name)
    logger.info("Using LLM provider '%s' (model %s)", provider.name, provider.model)
    return provider
