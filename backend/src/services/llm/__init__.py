"""Pluggable language-model providers for prompt generation and enhancement."""
from services.llm.base import LLMProvider
from services.llm.factory import build_llm_provider

__all__ = ["LLMProvider", "build_llm_provider"]
