"""Attempt log: record successful generations and read them back for the dashboard."""

from .models import AttemptStats, GenerationAttemptLog
from .recorder import AttemptLogger
from .stats import summarize
from .store import (
    AttemptStore,
    MemoryAttemptStore,
    SheetsAttemptStore,
    build_attempt_store,
)

__all__ = [
    "AttemptLogger",
    "AttemptStats",
    "AttemptStore",
    "GenerationAttemptLog",
    "MemoryAttemptStore",
    "SheetsAttemptStore",
    "build_attempt_store",
    "summarize",
]
