"""Inference provider module for ollacommit.

Only a local Ollama server is supported; the provider interface keeps the
hook logic independent of the transport.
"""

from ollacommit.global_config import HookSettings
from ollacommit.llm.base import BaseLLMProvider, GenerateResponse
from ollacommit.llm.exceptions import (
    InferenceTimeoutError,
    LLMError,
    ResponseParseError,
)
from ollacommit.llm.ollama_provider import OllamaProvider
from ollacommit.llm.prompts import PROMPT_PREAMBLE, build_prompt


def get_provider(settings: HookSettings) -> BaseLLMProvider:
    """Get the inference provider for the given settings.

    Args:
        settings: Effective hook settings.

    Returns:
        An OllamaProvider bound to the configured host and model.
    """
    return OllamaProvider(model=settings.model, host=settings.host)


__all__ = [
    "BaseLLMProvider",
    "GenerateResponse",
    "LLMError",
    "InferenceTimeoutError",
    "ResponseParseError",
    "OllamaProvider",
    "PROMPT_PREAMBLE",
    "build_prompt",
    "get_provider",
]
