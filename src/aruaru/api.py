"""HTTP surface: the generate route and the dashboard's log route.

    uvicorn aruaru.api:create_app --factory
    python -m aruaru.api
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from aruaru import config
from aruaru import logger as logger_mod
from aruaru.attempts import AttemptLogger, AttemptStore, build_attempt_store, summarize
from aruaru.generation import EmptyTopicError, GenerationPipeline, generate_texts
from aruaru.llm import build_llm

log = logger_mod.get_logger()

LOGS_ERROR_MESSAGE = "データの取得に失敗しました"
INVALID_REQUEST_MESSAGE = "リクエストの形式が正しくありません"
GENERATE_PATH = "/api/generate-texts"


class GenerateTextsRequest(BaseModel):
    topic: Optional[str] = None


def create_app(
    pipeline: GenerationPipeline | None = None,
    store: AttemptStore | None = None,
    attempt_logger: AttemptLogger | None = None,
) -> FastAPI:
    """Wire the pipeline, the attempt store and the routes.

    Anything not passed in is built from `aruaru.config`.
    """

    if store is None:
        store = attempt_logger.store if attempt_logger else build_attempt_store()
    if pipeline is None:
        attempt_logger = attempt_logger or AttemptLogger(store)
        pipeline = GenerationPipeline(build_llm(), attempt_logger=attempt_logger)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info(f"aruaru API started (model={config.LLM_MODEL})")
        yield
        if attempt_logger is not None:
            attempt_logger.close()
        log.info("aruaru API shutting down")

    app = FastAPI(title="aruaru", version="0.1.0", lifespan=lifespan)
    app.state.pipeline = pipeline
    app.state.store = store

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        log.info(f"Rejected request to {request.url.path}: {exc.errors()}")
        # a generate body without a usable topic reads as an empty topic
        if request.url.path == GENERATE_PATH:
            err = EmptyTopicError()
            return JSONResponse(content={"error": err.message}, status_code=err.status_code)
        return JSONResponse(content={"error": INVALID_REQUEST_MESSAGE}, status_code=400)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.post(GENERATE_PATH)
    def generate(request: GenerateTextsRequest) -> JSONResponse:
        status, body = generate_texts(app.state.pipeline, request.topic)
        return JSONResponse(content=body, status_code=status)

    @app.get("/api/logs")
    def logs(limit: int = config.RECENT_LOGS_LIMIT) -> JSONResponse:
        try:
            recent = app.state.store.recent(limit)
        except Exception as e:  # noqa: BLE001
            log.exception(f"Failed to read attempt logs: {e}")
            return JSONResponse(content={"error": LOGS_ERROR_MESSAGE}, status_code=500)

        return JSONResponse(
            content={
                "logs": [attempt.to_dict() for attempt in recent],
                "stats": summarize(recent).to_dict(),
            }
        )

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "aruaru.api:create_app",
        factory=True,
        host=config.API_HOST,
        port=config.API_PORT,
        log_level="info",
    )
