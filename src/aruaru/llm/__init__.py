"""LLM provider abstractions.

Design goals:
- Keep provider-specific SDKs isolated.
- Provide a small, stable "messages in, raw text out" interface.
- Surface provider failures as a short list of error types callers can map.
"""

from .base import LLMClient, LLMConfig
from .errors import LLMError, LLMQuotaError, LLMTransportError
from .factory import build_llm
from .types import LLMMessage, LLMResult

__all__ = [
    "LLMClient",
    "LLMConfig",
    "LLMError",
    "LLMMessage",
    "LLMQuotaError",
    "LLMResult",
    "LLMTransportError",
    "build_llm",
]
