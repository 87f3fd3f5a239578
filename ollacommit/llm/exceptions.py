"""LLM-related exception classes.

Contains all exception classes for inference calls:
- LLMError: Base exception for LLM-related errors
- InferenceTimeoutError: Raised when the endpoint does not answer in time
- ResponseParseError: Raised when the response body is not usable JSON
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class InferenceTimeoutError(LLMError):
    """Raised when the inference request exceeds its timeout."""

    pass


class ResponseParseError(LLMError):
    """Raised when the inference response cannot be parsed."""

    pass
