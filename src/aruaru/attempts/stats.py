from __future__ import annotations

import datetime
from typing import Sequence
from zoneinfo import ZoneInfo

from aruaru import config

from .models import AttemptStats, GenerationAttemptLog


def summarize(
    logs: Sequence[GenerationAttemptLog],
    *,
    now: datetime.datetime | None = None,
    tz: str | None = None,
) -> AttemptStats:
    """Dashboard statistics over a window of attempts.

    `today` counts attempts whose created_at falls on the current calendar
    day in `tz` (default: config.TIMEZONE).
    """

    zone = ZoneInfo(tz or config.TIMEZONE)
    now = now or datetime.datetime.now(datetime.timezone.utc)
    today = now.astimezone(zone).date()

    return AttemptStats(
        total=len(logs),
        unique_topics=len({log.topic for log in logs}),
        today=sum(1 for log in logs if log.created_at.astimezone(zone).date() == today),
    )
