from __future__ import annotations

import datetime
import uuid
from dataclasses import dataclass, field


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


@dataclass(frozen=True)
class GenerationAttemptLog:
    """One successful generation, as written to the attempt store."""

    topic: str
    generated_texts: tuple[str, ...]
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime.datetime = field(default_factory=_utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "topic": self.topic,
            "generated_texts": list(self.generated_texts),
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class AttemptStats:
    total: int
    unique_topics: int
    today: int

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "uniqueTopics": self.unique_topics,
            "today": self.today,
        }
