from __future__ import annotations

import os
from typing import Any

import openai

from aruaru import logger as logger_mod

from .base import LLMClient, LLMConfig
from .errors import LLMError, LLMQuotaError, LLMTransportError
from .types import LLMMessage, LLMResult

log = logger_mod.get_logger()

QUOTA_ERROR_CODE = "insufficient_quota"


def classify_openai_error(error: Exception) -> LLMError:
    """Map an OpenAI SDK exception onto the provider-neutral error types."""

    code = getattr(error, "code", None)
    if code == QUOTA_ERROR_CODE or isinstance(error, openai.RateLimitError):
        return LLMQuotaError(f"OpenAI usage limit reached: {error}")

    # APITimeoutError is a subclass of APIConnectionError
    if isinstance(error, (openai.APIConnectionError, openai.InternalServerError)):
        return LLMTransportError(f"OpenAI transport failure: {error}")

    if isinstance(error, openai.APIStatusError) and error.status_code >= 500:
        return LLMTransportError(
            f"OpenAI returned status {error.status_code}: {error}"
        )

    return LLMError(f"OpenAI request failed: {error}")


class OpenAILLM(LLMClient):
    """OpenAI chat-completions wrapper.

    One request per call: the SDK's built-in retry is disabled so retry
    policy stays with whoever calls the pipeline.
    """

    def __init__(self, config: LLMConfig, *, client: Any | None = None):
        self._cfg = config
        if client is not None:
            self._client = client
            return

        api_key = os.getenv(config.api_key_env)
        if not api_key:
            raise LLMError(f"Missing env var {config.api_key_env} for OpenAI API key")

        self._client = openai.OpenAI(
            api_key=api_key, max_retries=0, timeout=config.timeout_s
        )

    @property
    def config(self) -> LLMConfig:
        return self._cfg

    def complete(self, *, messages: list[LLMMessage]) -> LLMResult:
        try:
            resp = self._client.chat.completions.create(
                model=self._cfg.model,
                messages=[{"role": m.role, "content": m.content} for m in messages],
                temperature=self._cfg.temperature,
                max_tokens=self._cfg.max_tokens,
                timeout=self._cfg.timeout_s,
            )
        except openai.OpenAIError as e:
            log.error(f"OpenAI API error ({type(e).__name__}): {e}")
            raise classify_openai_error(e) from e

        raw = ""
        choices = getattr(resp, "choices", None) or []
        if choices:
            raw = (choices[0].message.content or "").strip()

        log.debug(f"OpenAI completion received ({len(raw)} chars)")
        return LLMResult(provider="openai", model=self._cfg.model, raw_text=raw)
