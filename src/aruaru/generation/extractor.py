"""Turn a raw completion into candidate snippets.

Two passes, the first that succeeds wins:

1. strict: the whole response is a JSON array; every element is a candidate.
2. lenient: the response is read line by line, numbering and quote brackets
   are peeled off, and short fragments are dropped.

Neither pass raises. A response with nothing usable yields an empty outcome
and the acceptance step decides what that means.
"""

from __future__ import annotations

import json
import re
from typing import Any

from aruaru import logger as logger_mod
from aruaru.llm._json import parse_json, validate_json
from aruaru.llm.errors import LLMValidationError

from .models import SNIPPET_COUNT, ParseOutcome

log = logger_mod.get_logger()

CANDIDATES_SCHEMA: dict[str, Any] = {"type": "array"}

# "1. ", "2) ", "3．", "4、"
ENUMERATION_PREFIX = re.compile(r"^\d+[.)．、]\s*")
OPENING_QUOTES = "「『\""
CLOSING_QUOTES = "」』\""
MIN_LINE_LENGTH = 11


def _as_candidate(item: Any) -> str:
    if isinstance(item, str):
        return item
    return json.dumps(item, ensure_ascii=False)


def parse_strict(raw: str) -> list[str] | None:
    """Return the array elements, or None when raw is not a JSON array."""

    try:
        data = parse_json(raw)
        validate_json(data, CANDIDATES_SCHEMA)
    except LLMValidationError as e:
        log.debug(f"Strict parse rejected response: {e}")
        return None
    return [_as_candidate(item) for item in data]


def clean_line(line: str) -> str:
    s = ENUMERATION_PREFIX.sub("", line.strip())
    if s[:1] and s[0] in OPENING_QUOTES:
        s = s[1:]
    if s[-1:] and s[-1] in CLOSING_QUOTES:
        s = s[:-1]
    return s.strip()


def parse_lenient(raw: str) -> list[str]:
    lines = [line for line in raw.splitlines() if line.strip()]
    cleaned = [clean_line(line) for line in lines]
    kept = [line for line in cleaned if len(line) >= MIN_LINE_LENGTH]
    return kept[:SNIPPET_COUNT]


def parse_response(raw: str | None) -> ParseOutcome:
    text = raw or ""

    strict = parse_strict(text)
    if strict is not None:
        if not strict:
            return ParseOutcome(mode="empty")
        return ParseOutcome(mode="strict", candidates=tuple(strict))

    lenient = parse_lenient(text)
    if not lenient:
        return ParseOutcome(mode="empty")
    return ParseOutcome(mode="lenient", candidates=tuple(lenient))


def extract(raw: str | None) -> list[str]:
    return list(parse_response(raw).candidates)
