from __future__ import annotations

from aruaru import config

from .base import LLMClient, LLMConfig
from .errors import LLMError
from .openai_client import OpenAILLM


def build_llm(*, provider: str | None = None, model: str | None = None) -> LLMClient:
    """Factory for provider clients.

    Providers:
    - openai

    Sampling settings come from `aruaru.config`. Extend by adding new
    provider clients and mapping here.
    """

    p = (provider or config.LLM_PROVIDER).lower().strip()
    if p == "openai":
        return OpenAILLM(
            LLMConfig(
                provider="openai",
                model=model or config.LLM_MODEL,
                api_key_env=config.OPENAI_API_KEY_ENV,
                temperature=config.LLM_TEMPERATURE,
                max_tokens=config.LLM_MAX_TOKENS,
                timeout_s=config.LLM_TIMEOUT_S,
            )
        )

    raise LLMError(f"Unknown LLM provider: {provider}")
