"""Generation pipeline: topic -> prompt -> completion -> three snippets."""

from .acceptance import accept
from .errors import (
    EmptyTopicError,
    GenerationError,
    InsufficientOutputError,
    QuotaExceededError,
    TransportError,
    UnknownGenerationError,
)
from .extractor import extract, parse_response
from .models import AcceptedResult, GenerationRequest, ParseOutcome
from .pipeline import GenerationPipeline, generate_texts
from .prompt import build_prompt

__all__ = [
    "AcceptedResult",
    "EmptyTopicError",
    "GenerationError",
    "GenerationPipeline",
    "GenerationRequest",
    "InsufficientOutputError",
    "ParseOutcome",
    "QuotaExceededError",
    "TransportError",
    "UnknownGenerationError",
    "accept",
    "build_prompt",
    "extract",
    "generate_texts",
    "parse_response",
]
