from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .types import LLMMessage, LLMResult


@dataclass(frozen=True)
class LLMConfig:
    provider: str
    model: str
    api_key_env: str
    temperature: float = 0.8
    max_tokens: int = 400
    timeout_s: float = 30.0


class LLMClient(Protocol):
    """Small interface for "instructions -> raw completion text" tasks."""

    def complete(self, *, messages: list[LLMMessage]) -> LLMResult:
        raise NotImplementedError
