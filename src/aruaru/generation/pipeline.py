"""Topic in, three snippets out.

    validating -> prompting -> extracting -> accepting -> done

Any stage failure ends the run with exactly one `GenerationError`. Nothing is
retried and no partial result is ever returned.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from aruaru import logger as logger_mod
from aruaru.llm import LLMClient, LLMQuotaError, LLMTransportError

from .acceptance import accept
from .errors import (
    EmptyTopicError,
    GenerationError,
    QuotaExceededError,
    TransportError,
    UnknownGenerationError,
)
from .extractor import parse_response
from .models import AcceptedResult, GenerationRequest
from .prompt import build_prompt

log = logger_mod.get_logger()


class Stage(str, Enum):
    VALIDATING = "validating"
    PROMPTING = "prompting"
    EXTRACTING = "extracting"
    ACCEPTING = "accepting"
    DONE = "done"


class AttemptSink(Protocol):
    def record(self, topic: str, snippets: list[str]) -> None: ...


def validate_topic(topic: str | None) -> str:
    cleaned = (topic or "").strip()
    if not cleaned:
        raise EmptyTopicError()
    return cleaned


class GenerationPipeline:
    """Orchestrates prompt building, the provider call, parsing and acceptance.

    Holds no per-request state, so one instance can serve concurrent
    requests.
    """

    def __init__(self, llm: LLMClient, *, attempt_logger: AttemptSink | None = None):
        self._llm = llm
        self._attempt_logger = attempt_logger

    def run(self, request: GenerationRequest) -> AcceptedResult:
        stage = Stage.VALIDATING
        try:
            topic = validate_topic(request.topic)

            stage = Stage.PROMPTING
            completion = self._llm.complete(messages=build_prompt(topic))

            stage = Stage.EXTRACTING
            outcome = parse_response(completion.raw_text)
            log.debug(
                f"Parsed {len(outcome.candidates)} candidate(s) "
                f"({outcome.mode}) for topic {topic!r}"
            )

            stage = Stage.ACCEPTING
            result = accept(topic, outcome.candidates)

        except GenerationError as e:
            log.warning(f"Generation failed at {stage.value}: {e.kind}")
            raise
        except LLMQuotaError as e:
            log.warning(f"Provider quota exhausted: {e}")
            raise QuotaExceededError() from e
        except LLMTransportError as e:
            log.error(f"Provider transport failure: {e}")
            raise TransportError() from e
        except Exception as e:  # noqa: BLE001
            log.exception(f"Unexpected error at {stage.value}: {e}")
            raise UnknownGenerationError() from e

        log.info(f"Generated {len(result.snippets)} snippets for topic {topic!r}")
        self._record(result)
        return result

    def _record(self, result: AcceptedResult) -> None:
        if self._attempt_logger is None:
            return
        try:
            self._attempt_logger.record(result.topic, list(result.snippets))
        except Exception as e:  # noqa: BLE001
            log.error(f"Failed to record generation attempt: {e}")


def generate_texts(pipeline: GenerationPipeline, topic: str | None) -> tuple[int, dict]:
    """Run the pipeline and shape the outbound payload.

    Returns (status_code, body) where body is either {"texts": [...]} or
    {"error": "..."}.
    """

    try:
        result = pipeline.run(GenerationRequest(topic=topic or ""))
    except GenerationError as e:
        return e.status_code, {"error": e.message}
    return 200, result.to_response()
