"""Google Gemini provider using the generateContent REST endpoint."""
import logging
from typing import Any

import httpx

from schemas.ai import GenerateRequest
from services.exceptions import LLMProviderError
from services.llm.base import MAX_SUGGESTIONS, LLMProvider

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


def build_generate_prompt(request: GenerateRequest) -> str:
    """Build the instruction asking Gemini for a new prompt."""
    lines = [
        "Create a detailed and effective prompt for AI systems based on the following "
        "information:",
        "",
        f"Topic: {request.topic}",
    ]
    if request.description:
        lines.append(f"Description: {request.description}")
    if request.category:
        lines.append(f"Category: {request.category}")
    lines += [
        "",
        "Your response should be a well-structured prompt that:",
        "1. Is clear and specific",
        "2. Includes relevant context",
        "3. Uses appropriate tone and style for the category",
        "4. Includes any necessary parameters or constraints",
        "5. Is optimized for getting high-quality results from AI",
        "",
        "Respond with ONLY the prompt text, without any explanations, introductions or "
        "additional text.",
    ]
    return "\n".join(lines)


def build_enhance_prompt(prompt_text: str) -> str:
    """Build the instruction asking Gemini for enhanced versions of a prompt."""
    return (
        "Analyze and improve the following AI prompt:\n\n"
        f'"{prompt_text}"\n\n'
        "Provide 3 different enhanced versions of this prompt that:\n"
        "1. Make it more specific and detailed\n"
        "2. Add more context and constraints\n"
        "3. Improve clarity and optimize for better AI responses\n\n"
        "Format your response as 3 separate suggestions only, separated by blank lines, "
        "without any additional text, explanations or numbering.\n"
        "Each suggestion should be a complete prompt that can be used as-is."
    )


def split_suggestions(text: str) -> list[str]:
    """
    Split a reply into suggestions on blank lines.

    Keeps at most MAX_SUGGESTIONS non-empty parts. If splitting yields nothing
    but the reply is not empty, the whole reply is the single suggestion.
    """
    parts = [part.strip() for part in text.split("\n\n") if part.strip()]
    if parts:
        return parts[:MAX_SUGGESTIONS]
    stripped = text.strip()
    return [stripped] if stripped else []


def extract_text(payload: dict[str, Any]) -> str:
    """
    Concatenate the text parts of the first candidate.

    Raises:
        LLMProviderError: If the payload does not have the expected shape.
    """
    try:
        parts = payload["candidates"][0]["content"]["parts"]
        return "".join(part.get("text", "") for part in parts)
    except (KeyError, IndexError, TypeError, AttributeError) as e:
        raise LLMProviderError("Gemini returned an unexpected response") from e


class GeminiProvider(LLMProvider):
    """Provider backed by the Gemini generateContent API."""

    name = "gemini"

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-pro",
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def _generate_text(self, prompt: str) -> str:
        url = f"{self.base_url}/models/{self.model}:generateContent"
        try:
            response = await self._client.post(
                url,
                headers={"x-goog-api-key": self.api_key},
                json={"contents": [{"parts": [{"text": prompt}]}]},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise LLMProviderError(f"Gemini request failed: {e}") from e
        except ValueError as e:
            raise LLMProviderError("Gemini returned invalid JSON") from e
        return extract_text(payload)

    async def generate(self, request: GenerateRequest) -> str:
        """Draft a prompt."""
        text = await self._generate_text(build_generate_prompt(request))
        return text.strip()

    async def enhance(self, prompt_text: str) -> list[str]:
        """Ask for enhanced versions separated by blank lines."""
        text = await self._generate_text(build_enhance_prompt(prompt_text))
        return split_suggestions(text)

    async def aclose(self) -> None:
        await self._client.aclose()
