"""Ollama provider implementation (local /api/generate endpoint)."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from ollacommit.config import DEFAULT_MODEL, DEFAULT_OLLAMA_HOST, GENERATE_ENDPOINT
from ollacommit.llm.base import BaseLLMProvider, GenerateResponse
from ollacommit.llm.exceptions import (
    InferenceTimeoutError,
    LLMError,
    ResponseParseError,
)

logger = logging.getLogger(__name__)


class OllamaProvider(BaseLLMProvider):
    """Ollama LLM provider. Requires a running `ollama serve`."""

    def __init__(
        self,
        model: Optional[str] = None,
        host: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ):
        """Initialize the Ollama provider.

        Args:
            model: The model to use. Defaults to DEFAULT_MODEL.
            host: Base URL of the Ollama server. Defaults to DEFAULT_OLLAMA_HOST.
            client: Optional pre-built httpx client (owned by the caller).
        """
        self.model = model or DEFAULT_MODEL
        self.host = (host or DEFAULT_OLLAMA_HOST).rstrip("/")
        self._client = client

    @property
    def url(self) -> str:
        return f"{self.host}{GENERATE_ENDPOINT}"

    def _post(self, payload: dict, timeout: float) -> httpx.Response:
        if self._client is not None:
            return self._client.post(self.url, json=payload, timeout=timeout)
        with httpx.Client(timeout=timeout) as client:
            return client.post(self.url, json=payload)

    def generate(self, prompt: str, timeout: float) -> Optional[str]:
        """Generate a commit message using a local Ollama model.

        Args:
            prompt: The full prompt (rules and diff).
            timeout: Upper bound for the request, in seconds.

        Returns:
            The `response` field of the reply, or None if absent.

        Raises:
            InferenceTimeoutError: If Ollama does not answer within timeout.
            ResponseParseError: If the body is not the expected JSON object.
            LLMError: For connection failures and non-2xx statuses.
        """
        payload = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
        }

        logger.debug(
            f"Sending request to Ollama model '{self.model}' at {self.url}. "
            f"Prompt length: {len(prompt)}"
        )

        try:
            response = self._post(payload, timeout)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise InferenceTimeoutError(f"Ollama request timed out after {timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise LLMError(
                f"Ollama returned HTTP {e.response.status_code} for model '{self.model}'"
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise LLMError(f"Ollama request to {self.url} failed: {e}") from e

        try:
            parsed = GenerateResponse.model_validate(response.json())
        except ValueError as e:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            raise ResponseParseError(f"Unexpected response from Ollama: {e}") from e

        logger.debug(
            f"Ollama answered (model: {parsed.model or self.model}, "
            f"eval_count: {parsed.eval_count})"
        )
        return parsed.response
