"""Base classes and shared models for inference providers."""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class GenerateResponse(BaseModel):
    """Body of a non-streaming /api/generate response.

    Only `response` is consumed; the other fields are kept for logging.
    Unknown fields are ignored.
    """

    response: Optional[str] = None
    model: Optional[str] = None
    done: Optional[bool] = None
    eval_count: Optional[int] = None


class BaseLLMProvider(ABC):
    """Abstract base class for inference providers."""

    model: str

    @abstractmethod
    def generate(self, prompt: str, timeout: float) -> Optional[str]:
        """Generate text for a prompt with a single request.

        Args:
            prompt: The full prompt.
            timeout: Upper bound for the request, in seconds.

        Returns:
            The generated text, or None if the response carried none.

        Raises:
            InferenceTimeoutError: If the request timed out.
            ResponseParseError: If the response body is malformed.
            LLMError: For transport and HTTP status errors.
        """
        pass
