from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Sequence

from aruaru import config
from aruaru import logger as logger_mod

from .models import GenerationAttemptLog
from .store import AttemptStore

log = logger_mod.get_logger()


class AttemptLogger:
    """Fire-and-forget writer for successful generations.

    `record` returns immediately; the insert runs on a worker thread and any
    failure is logged, never raised to the caller.
    """

    def __init__(self, store: AttemptStore, *, executor: ThreadPoolExecutor | None = None):
        self._store = store
        self._executor = executor or ThreadPoolExecutor(
            max_workers=2, thread_name_prefix="attempt-log"
        )
        self._pending: set[Future] = set()
        self._lock = threading.Lock()

    @property
    def store(self) -> AttemptStore:
        return self._store

    def record(self, topic: str, snippets: Sequence[str]) -> None:
        attempt = GenerationAttemptLog(topic=topic, generated_texts=tuple(snippets))
        try:
            future = self._executor.submit(self._store.insert, attempt)
        except RuntimeError as e:
            # executor already shut down
            log.error(f"Could not schedule attempt log write: {e}")
            return
        with self._lock:
            self._pending.add(future)
        future.add_done_callback(lambda f, a=attempt: self._on_done(f, a))

    def _on_done(self, future: Future, attempt: GenerationAttemptLog) -> None:
        with self._lock:
            self._pending.discard(future)
        if future.cancelled():
            log.warning(f"Attempt log write for {attempt.id} was discarded")
            return
        err = future.exception()
        if err is not None:
            log.error(f"Attempt log write failed for topic {attempt.topic!r}: {err}")

    def flush(self, timeout: float | None = config.ATTEMPT_LOG_FLUSH_TIMEOUT_S) -> int:
        """Wait up to `timeout` seconds for pending writes.

        Writes that have not started by then are cancelled. Returns the number
        of writes still outstanding (running, so not cancellable).
        """

        with self._lock:
            pending = list(self._pending)
        if not pending:
            return 0
        _, not_done = wait(pending, timeout=timeout)
        for future in not_done:
            future.cancel()
        return sum(1 for f in not_done if not f.done())

    def close(self) -> None:
        self.flush()
        self._executor.shutdown(wait=False, cancel_futures=True)
