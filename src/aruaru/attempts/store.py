from __future__ import annotations

import datetime
import json
import threading
from typing import Any, Protocol

from aruaru import config
from aruaru import logger as logger_mod

from .models import GenerationAttemptLog

log = logger_mod.get_logger()


class AttemptStore(Protocol):
    """Insert-only record of generations plus the dashboard read path."""

    def insert(self, attempt: GenerationAttemptLog) -> None:
        raise NotImplementedError

    def recent(self, limit: int = config.RECENT_LOGS_LIMIT) -> list[GenerationAttemptLog]:
        """Most recent attempts, newest first."""
        raise NotImplementedError


def clamp_limit(limit: int) -> int:
    """Size of the recent window: non-positive means the default, capped at it."""
    if limit < 1:
        return config.RECENT_LOGS_LIMIT
    return min(limit, config.RECENT_LOGS_LIMIT)


class MemoryAttemptStore(AttemptStore):
    """Process-local store, used when no spreadsheet is configured."""

    def __init__(self) -> None:
        self._rows: list[GenerationAttemptLog] = []
        self._lock = threading.Lock()

    def insert(self, attempt: GenerationAttemptLog) -> None:
        with self._lock:
            self._rows.append(attempt)

    def recent(self, limit: int = config.RECENT_LOGS_LIMIT) -> list[GenerationAttemptLog]:
        with self._lock:
            rows = list(self._rows)
        rows.sort(key=lambda a: a.created_at, reverse=True)
        return rows[: clamp_limit(limit)]


def attempt_to_row(attempt: GenerationAttemptLog) -> list[str]:
    return [
        attempt.id,
        attempt.topic,
        json.dumps(list(attempt.generated_texts), ensure_ascii=False),
        attempt.created_at.isoformat(),
    ]


def row_to_attempt(row: list[str]) -> GenerationAttemptLog | None:
    """Parse one sheet row; returns None for rows that are incomplete or corrupt."""

    if len(row) < 4 or not row[0]:
        return None
    try:
        texts = json.loads(row[2]) if row[2] else []
        created_at = datetime.datetime.fromisoformat(row[3])
    except ValueError:
        return None
    if not isinstance(texts, list):
        return None
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=datetime.timezone.utc)
    return GenerationAttemptLog(
        id=row[0],
        topic=row[1],
        generated_texts=tuple(str(t) for t in texts),
        created_at=created_at,
    )


class SheetsAttemptStore(AttemptStore):
    """Attempt log kept in a Google Sheet, one row per attempt.

    Columns: id | topic | generated_texts (JSON array) | created_at (ISO-8601)

    `recent` reads the whole data range on each call: the values API has no
    "last N rows" query, and rows are not guaranteed to be appended in
    created_at order. Cost grows with the sheet, so rotate the tab once it
    gets large.
    """

    def __init__(
        self,
        sheets: Any,
        spreadsheet_id: str,
        sheet_name: str = config.ATTEMPT_LOG_SHEET_NAME,
    ):
        self._sheets = sheets
        self._spreadsheet_id = spreadsheet_id
        self._sheet_name = sheet_name
        self._sheet_ready = False
        self._sheet_lock = threading.Lock()

    def _ensure_sheet(self) -> None:
        if self._sheet_ready:
            return
        # concurrent first inserts must not both send addSheet
        with self._sheet_lock:
            if self._sheet_ready:
                return
            self._sheets.ensure_sheet_exists(
                self._spreadsheet_id, self._sheet_name, headers=config.ATTEMPT_LOG_HEADERS
            )
            self._sheet_ready = True

    def insert(self, attempt: GenerationAttemptLog) -> None:
        self._ensure_sheet()
        self._sheets.append_values(
            self._spreadsheet_id,
            f"{self._sheet_name}!A:D",
            [attempt_to_row(attempt)],
        )
        log.debug(f"Appended attempt {attempt.id} to sheet '{self._sheet_name}'")

    def recent(self, limit: int = config.RECENT_LOGS_LIMIT) -> list[GenerationAttemptLog]:
        rows = self._sheets.read_values(self._spreadsheet_id, f"{self._sheet_name}!A2:D")
        attempts = []
        for row in rows:
            attempt = row_to_attempt(row)
            if attempt is None:
                log.warning(f"Skipping unreadable attempt row: {row}")
                continue
            attempts.append(attempt)
        attempts.sort(key=lambda a: a.created_at, reverse=True)
        return attempts[: clamp_limit(limit)]


def build_attempt_store() -> AttemptStore:
    """Sheet-backed store when ATTEMPT_LOG_SPREADSHEET_ID is set, else in-memory."""

    if config.ATTEMPT_LOG_SPREADSHEET_ID:
        from aruaru.google import GoogleAPI

        g = GoogleAPI.from_env()
        log.info(f"Attempt log: Google Sheet {config.ATTEMPT_LOG_SPREADSHEET_ID}")
        return SheetsAttemptStore(g.sheets, config.ATTEMPT_LOG_SPREADSHEET_ID)

    log.warning("ATTEMPT_LOG_SPREADSHEET_ID not set; attempts kept in memory only")
    return MemoryAttemptStore()
