from __future__ import annotations

import random
import socket
import time
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

import httplib2
from googleapiclient.errors import HttpError

from aruaru import logger as logger_mod

log = logger_mod.get_logger()

T = TypeVar("T")

# ECONNRESET, ETIMEDOUT, ECONNREFUSED, EHOSTUNREACH
_TRANSIENT_ERRNOS = {104, 110, 111, 113}
_QUOTA_HINTS = ("quota", "rate limit", "ratelimit", "user-rate", "backenderror")


@dataclass(frozen=True)
class RetryConfig:
    """Retry/backoff settings for Sheets calls.

    Out-of-range values are clamped rather than rejected.
    """

    max_retries: int = 3
    base_delay_s: float = 0.5
    max_delay_s: float = 8.0

    def __post_init__(self) -> None:
        if self.max_retries < 1:
            object.__setattr__(self, "max_retries", 1)
        if self.base_delay_s <= 0:
            object.__setattr__(self, "base_delay_s", 0.1)
        if self.max_delay_s < self.base_delay_s:
            object.__setattr__(self, "max_delay_s", float(self.base_delay_s))


def http_status(error: HttpError) -> Optional[int]:
    return getattr(getattr(error, "resp", None), "status", None)


def is_retryable_http_error(error: HttpError) -> bool:
    """Transient server errors, throttling, timeouts and quota-flavoured 403s."""

    status = http_status(error)
    if not isinstance(status, int):
        return False
    if 500 <= status <= 599 or status in (408, 429):
        return True
    if status == 403:
        msg = str(error).lower()
        return any(hint in msg for hint in _QUOTA_HINTS)
    return False


def is_retryable_error(error: Exception) -> bool:
    if isinstance(error, HttpError):
        return is_retryable_http_error(error)
    if isinstance(error, (TimeoutError, socket.timeout, httplib2.HttpLib2Error)):
        return True
    if isinstance(error, OSError):
        return getattr(error, "errno", None) in _TRANSIENT_ERRNOS
    return False


def backoff_delay(attempt: int, retry: RetryConfig) -> float:
    """Exponential backoff with 0.7x-1.3x jitter."""

    delay = min(retry.max_delay_s, retry.base_delay_s * (2 ** (attempt - 1)))
    return delay * (0.7 + random.random() * 0.6)


def execute_with_retry(
    fn: Callable[[], T],
    *,
    context: str,
    retry: RetryConfig | None = None,
) -> T:
    """Execute a Google API call with consistent retry/backoff."""

    retry = retry or RetryConfig()
    attempt = 1
    while True:
        try:
            return fn()
        except Exception as e:
            if not is_retryable_error(e) or attempt >= retry.max_retries:
                log.error(
                    f"Google API error while {context} "
                    f"(attempt {attempt}/{retry.max_retries}): {e}"
                )
                raise

            wait = backoff_delay(attempt, retry)
            log.warning(
                f"Retryable Google API error while {context}; retrying in {wait:.1f}s "
                f"(attempt {attempt})"
            )
            time.sleep(wait)
            attempt += 1
