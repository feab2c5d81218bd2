"""AI-assisted prompt generation and enhancement endpoints."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_llm_provider
from schemas.ai import EnhanceRequest, EnhanceResponse, GenerateRequest, GenerateResponse
from services.exceptions import LLMProviderError
from services.llm import LLMProvider

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai", tags=["ai"])


@router.post("/enhance", response_model=EnhanceResponse)
async def enhance_prompt(
    data: EnhanceRequest,
    provider: LLMProvider = Depends(get_llm_provider),
) -> EnhanceResponse:
    """
    Suggest up to three improvements for a prompt.

    The upstream call is made once; failures return 500.
    """
    try:
        suggestions = await provider.enhance(data.prompt)
    except LLMProviderError as e:
        logger.exception("Error enhancing prompt with %s", provider.name)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to enhance prompt",
        ) from e
    return EnhanceResponse(suggestions=suggestions)


@router.post("/generate", response_model=GenerateResponse)
async def generate_prompt(
    data: GenerateRequest,
    provider: LLMProvider = Depends(get_llm_provider),
) -> GenerateResponse:
    """Draft a new prompt from a topic, optional description and category."""
    try:
        generated = await provider.generate(data)
    except LLMProviderError as e:
        logger.exception("Error generating prompt with %s", provider.name)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate prompt",
        ) from e
    return GenerateResponse(prompt=generated)
