from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

SNIPPET_COUNT = 3

ParseMode = Literal["strict", "lenient", "empty"]


@dataclass(frozen=True)
class GenerationRequest:
    topic: str


@dataclass(frozen=True)
class ParseOutcome:
    """Result of reading a raw completion.

    mode:
    - strict: the response was a JSON array
    - lenient: recovered line by line from free text
    - empty: nothing usable was found
    """

    mode: ParseMode
    candidates: tuple[str, ...] = ()


@dataclass(frozen=True)
class AcceptedResult:
    topic: str
    snippets: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.snippets) != SNIPPET_COUNT:
            raise ValueError(
                f"AcceptedResult needs exactly {SNIPPET_COUNT} snippets, "
                f"got {len(self.snippets)}"
            )

    def to_response(self) -> dict:
        return {"texts": list(self.snippets)}
