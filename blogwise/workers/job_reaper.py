"""Background task that evicts finished generation jobs."""

from __future__ import annotations

import asyncio
import logging

from blogwise.config import settings
from blogwise.services.generation_jobs import GenerationJobTracker, get_generation_job_tracker

logger = logging.getLogger(__name__)


class JobReaper:
    """Periodically removes terminal jobs past their retention window."""

    def __init__(
        self,
        *,
        tracker: GenerationJobTracker | None = None,
        interval_seconds: float | None = None,
    ) -> None:
        self.tracker = tracker or get_generation_job_tracker()
        self.interval_seconds = max(
            0.01,
            float(interval_seconds or settings.job_reaper_interval_seconds),
        )
        self._task: asyncio.Task[None] | None = None
        self._stopping = asyncio.Event()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start the reaper loop if not already running."""
        if self.running:
            return
        self._stopping.clear()
        self._task = asyncio.create_task(self._loop(), name="generation-job-reaper")
        logger.info("Job reaper started", extra={"interval_seconds": self.interval_seconds})

    async def stop(self) -> None:
        """Stop the reaper loop."""
        if self._task is None:
            return
        self._stopping.set()
        self._task.cancel()
        await asyncio.gather(self._task, return_exceptions=True)
        self._task = None
        logger.info("Job reaper stopped")

    async def _loop(self) -> None:
        try:
            while not self._stopping.is_set():
                await asyncio.sleep(self.interval_seconds)
                try:
                    self.tracker.reap_expired()
                except Exception:
                    logger.exception("Job reaper tick failed")
        except asyncio.CancelledError:
            pass
