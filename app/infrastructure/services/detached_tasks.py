"""Bounded in-process queue for fire-and-forget side effects.

Jobs are zero-argument coroutine factories so a retry builds a fresh
coroutine. The worker restores the submitting request's correlation id
before each job, so retries and final failures log under the same id as
the request that caused them. Nothing here raises into the submitter.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from app.shared.context import get_correlation_id, set_correlation_id
from app.shared.telemetry.tracing import start_step_span

logger = logging.getLogger(__name__)


@dataclass
class DetachedJob:
    name: str
    factory: Callable[[], Awaitable[Any]]
    context: dict[str, str] = field(default_factory=dict)
    correlation_id: str | None = None


class DetachedTaskQueue:
    """Single worker draining an asyncio.Queue, with linear-backoff retry.

    Implements IDetachedTaskDispatcher. Counters: completed, failed (gave up
    after max_attempts), dropped (queue full or not running).
    """

    def __init__(
        self,
        maxsize: int = 1000,
        max_attempts: int = 3,
        backoff_seconds: float = 2.0,
        drain_timeout_seconds: float = 10.0,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self.maxsize = maxsize
        self.max_attempts = max_attempts
        self.backoff_seconds = backoff_seconds
        self.drain_timeout_seconds = drain_timeout_seconds
        self._queue: asyncio.Queue[DetachedJob] = asyncio.Queue(maxsize=maxsize)
        self._worker: asyncio.Task[None] | None = None
        self._accepting = False
        self.completed = 0
        self.failed = 0
        self.dropped = 0
        self.retried = 0

    @property
    def running(self) -> bool:
        return self._worker is not None and not self._worker.done()

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def stats(self) -> dict[str, int | bool]:
        return {
            "running": self.running,
            "pending": self.pending,
            "completed": self.completed,
            "failed": self.failed,
            "dropped": self.dropped,
            "retried": self.retried,
        }

    def start(self) -> None:
        """Spawn the worker. Must be called from a running event loop."""
        if self.running:
            return
        self._accepting = True
        self._worker = asyncio.create_task(self._run_worker(), name="detached-task-worker")
        logger.info(
            "Detached task queue started (maxsize=%d, max_attempts=%d)",
            self.maxsize,
            self.max_attempts,
        )

    def submit(
        self,
        name: str,
        job: Callable[[], Awaitable[Any]],
        **context: str,
    ) -> bool:
        """Queue job; False (and a WARNING) when stopped or full."""
        if not self._accepting:
            self.dropped += 1
            logger.warning(
                "detached.dropped job=%s reason=not_running context=%s",
                name,
                context,
                extra={"job": name, **context},
            )
            return False
        entry = DetachedJob(
            name=name, factory=job, context=dict(context), correlation_id=get_correlation_id()
        )
        try:
            self._queue.put_nowait(entry)
        except asyncio.QueueFull:
            self.dropped += 1
            logger.warning(
                "detached.dropped job=%s reason=queue_full context=%s",
                name,
                context,
                extra={"job": name, **context},
            )
            return False
        logger.debug("detached.queued job=%s pending=%d", name, self._queue.qsize())
        return True

    async def join(self) -> None:
        """Wait until every queued job has finished (including retries)."""
        await self._queue.join()

    async def stop(self) -> None:
        """Stop accepting, drain what is queued (bounded), then cancel the worker."""
        self._accepting = False
        if self._worker is None:
            return
        try:
            await asyncio.wait_for(self._queue.join(), timeout=self.drain_timeout_seconds)
        except TimeoutError:
            logger.warning(
                "Detached task queue drain timed out with %d job(s) pending",
                self._queue.qsize(),
            )
        self._worker.cancel()
        try:
            await self._worker
        except asyncio.CancelledError:
            pass
        self._worker = None
        logger.info(
            "Detached task queue stopped (completed=%d failed=%d dropped=%d)",
            self.completed,
            self.failed,
            self.dropped,
        )

    async def _run_worker(self) -> None:
        while True:
            job = await self._queue.get()
            try:
                await self._run_job(job)
            finally:
                self._queue.task_done()

    async def _run_job(self, job: DetachedJob) -> None:
        set_correlation_id(job.correlation_id)
        log_fields = {"job": job.name, **job.context}
        try:
            for attempt in range(1, self.max_attempts + 1):
                try:
                    with start_step_span(f"detached.{job.name}", attempt=attempt):
                        await job.factory()
                except Exception as e:
                    if attempt >= self.max_attempts:
                        self.failed += 1
                        logger.error(
                            "detached.failed job=%s attempts=%d context=%s error=%s",
                            job.name,
                            attempt,
                            job.context,
                            e,
                            extra={**log_fields, "attempts": attempt},
                            exc_info=True,
                        )
                        return
                    self.retried += 1
                    delay = self.backoff_seconds * attempt
                    logger.warning(
                        "detached.retry job=%s attempt=%d delay=%.1fs error=%s",
                        job.name,
                        attempt,
                        delay,
                        e,
                        extra={**log_fields, "attempt": attempt},
                    )
                    await asyncio.sleep(delay)
                else:
                    self.completed += 1
                    logger.info(
                        "detached.done job=%s attempts=%d",
                        job.name,
                        attempt,
                        extra={**log_fields, "attempts": attempt},
                    )
                    return
        finally:
            set_correlation_id(None)
