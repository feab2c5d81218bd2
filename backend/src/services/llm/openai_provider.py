"""OpenAI chat-completions provider."""
import json
import logging
import re

import openai
from openai import AsyncOpenAI

from schemas.ai import GenerateRequest
from services.exceptions import LLMProviderError
from services.llm.base import LLMProvider, clean_suggestions

logger = logging.getLogger(__name__)

GENERATE_SYSTEM_MESSAGE = "You are an expert at creating effective AI prompts."
ENHANCE_SYSTEM_MESSAGE = "You are an expert at improving AI prompts for clarity and effectiveness."

# Returned when the model answers with empty content
FALLBACK_PROMPT = "Create a [type] about [subject] with [specific details] in a [style] format."

_QUOTED = re.compile(r'"([^"]*)"')


def build_generate_message(request: GenerateRequest) -> str:
    """Build the user message asking for a new prompt."""
    message = f"Create a detailed, effective AI prompt about {request.topic}"
    if request.description:
        message += f" that addresses: {request.description}"
    if request.category:
        message += f". This prompt should be appropriate for the category: {request.category}"
    message += (
        ". The format should use placeholders like [placeholder] for variables users can "
        "customize.\nMake the prompt detailed, specific, and designed to get high-quality "
        "AI responses.\nDo not include explanations, just return the prompt text directly."
    )
    return message


def build_enhance_message(prompt_text: str) -> str:
    """Build the user message asking for improvement suggestions."""
    return (
        "Analyze this AI prompt and suggest 3 specific ways to enhance it for better results:\n\n"
        f'"{prompt_text}"\n\n'
        "Provide your suggestions in a clear, actionable format. Each suggestion should be "
        "complete and ready to implement.\n"
        'Return a JSON object with a "suggestions" key holding an array of strings.'
    )


def parse_json_suggestions(content: str | None) -> list[str]:
    """
    Extract suggestions from a JSON reply of the form {"suggestions": [...]}.

    If the reply is not valid JSON, double-quoted strings found in the text are
    used instead. Anything else yields no suggestions.
    """
    if not content:
        return []
    try:
        parsed = json.loads(content)
    except json.JSONDecodeError:
        logger.warning("Enhancement reply was not valid JSON; extracting quoted strings")
        return clean_suggestions(_QUOTED.findall(content))

    if isinstance(parsed, dict) and isinstance(parsed.get("suggestions"), list):
        return clean_suggestions(parsed["suggestions"])
    logger.warning("Enhancement reply had no suggestions array")
    return []


class OpenAIProvider(LLMProvider):
    """Provider backed by the OpenAI chat completions API."""

    name = "openai"

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        base_url: str | None = None,
        timeout: float = 60.0,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self.model = model
        self._client = client or AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
        )

    async def _complete(self, system: str, user: str, **kwargs: object) -> str | None:
        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                **kwargs,
            )
        except openai.OpenAIError as e:
            raise LLMProviderError(f"OpenAI request failed: {e}") from e

        if not response.choices:
            raise LLMProviderError("OpenAI returned no choices")
        return response.choices[0].message.content

    async def generate(self, request: GenerateRequest) -> str:
        """Draft a prompt; falls back to a generic template if the reply is empty."""
        content = await self._complete(
            GENERATE_SYSTEM_MESSAGE, build_generate_message(request), max_tokens=500,
        )
        if content and content.strip():
            return content.strip()
        return FALLBACK_PROMPT

    async def enhance(self, prompt_text: str) -> list[str]:
        """Ask for a JSON list of suggestions."""
        content = await self._complete(
            ENHANCE_SYSTEM_MESSAGE,
            build_enhance_message(prompt_text),
            response_format={"type": "json_object"},
            max_tokens=800,
        )
        return parse_json_suggestions(content)

    async def aclose(self) -> None:
        await self._client.close()
