from __future__ import annotations

from typing import Sequence

from .errors import InsufficientOutputError
from .models import SNIPPET_COUNT, AcceptedResult


def accept(topic: str, candidates: Sequence[str]) -> AcceptedResult:
    """Keep the first three candidates, or fail when there are fewer.

    Style rules from the prompt (suffix, length, nouns) are not re-checked
    here.
    """

    if len(candidates) < SNIPPET_COUNT:
        raise InsufficientOutputError()
    return AcceptedResult(topic=topic, snippets=tuple(candidates[:SNIPPET_COUNT]))
