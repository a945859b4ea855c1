"""In-process registry and state machine for content generation jobs."""

from __future__ import annotations

import copy
import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal

from blogwise.config import settings
from blogwise.core.ids import generate_job_id

logger = logging.getLogger(__name__)

JobMode = Literal["single", "manual", "batch"]
JobStage = Literal["idle", "trends", "benchmark", "generate", "done", "error"]
RetentionAnchor = Literal["started", "finished"]

STAGE_ORDER: dict[str, int] = {
    "idle": 0,
    "trends": 1,
    "benchmark": 2,
    "generate": 3,
    "done": 4,
    "error": 4,
}
TERMINAL_STAGES = frozenset({"done", "error"})
INACTIVE_STAGES = frozenset({"idle", "done", "error"})


@dataclass(slots=True)
class JobResult:
    title: str
    keyword: str
    success: bool


@dataclass(slots=True)
class GenerationJob:
    """Observable state of one single/manual/batch generation run."""

    id: str
    mode: JobMode
    stage: JobStage = "idle"
    keyword: str | None = None
    started_at: float = 0.0
    batch_current: int = 0
    batch_total: int = 1
    results: list[JobResult] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    finished_at: float | None = None

    @property
    def is_terminal(self) -> bool:
        return self.stage in TERMINAL_STAGES


class GenerationJobRegistry:
    """Thread-safe store of jobs keyed by id, in insertion order.

    Callers only ever receive copies; mutation goes through ``update``.
    """

    def __init__(self) -> None:
        self._jobs: dict[str, GenerationJob] = {}
        self._lock = threading.Lock()

    def create(self, job: GenerationJob) -> None:
        with self._lock:
            if job.id in self._jobs:
                raise ValueError(f"Generation job already exists: {job.id}")
            self._jobs[job.id] = job

    def get(self, job_id: str) -> GenerationJob | None:
        with self._lock:
            job = self._jobs.get(job_id)
            return copy.deepcopy(job) if job is not None else None

    def update(self, job_id: str, mutate: Callable[[GenerationJob], bool]) -> bool:
        """Apply ``mutate`` under the lock; returns whether it changed the job."""
        with self._lock:
            job = self._jobs.get(job_id)
            if job is None:
                return False
            return mutate(job)

    def list(self) -> list[GenerationJob]:
        with self._lock:
            return [copy.deepcopy(job) for job in self._jobs.values()]

    def evict(self, predicate: Callable[[GenerationJob], bool]) -> list[str]:
        with self._lock:
            evicted = [job_id for job_id, job in self._jobs.items() if predicate(job)]
            for job_id in evicted:
                del self._jobs[job_id]
            return evicted

    def remove(self, job_id: str) -> bool:
        with self._lock:
            return self._jobs.pop(job_id, None) is not None

    def clear(self) -> int:
        with self._lock:
            count = len(self._jobs)
            self._jobs.clear()
            return count


class GenerationJobTracker:
    """Operations that move jobs through ``idle -> trends -> benchmark -> generate``.

    A job ends in ``done`` or ``error`` via ``finish``; after that every
    mutation is ignored. Unknown ids never raise, mutators return False.
    """

    def __init__(
        self,
        registry: GenerationJobRegistry | None = None,
        *,
        clock: Callable[[], float] = time.time,
        retention_seconds: float | None = None,
        retention_anchor: RetentionAnchor | None = None,
    ) -> None:
        self.registry = registry or GenerationJobRegistry()
        self.clock = clock
        self.retention_seconds = (
            settings.job_retention_seconds if retention_seconds is None else retention_seconds
        )
        self.retention_anchor = retention_anchor or settings.job_retention_anchor

    def start(
        self,
        mode: JobMode,
        keyword: str | None = None,
        batch_total: int | None = None,
        job_id: str | None = None,
    ) -> str:
        job = GenerationJob(
            id=job_id or generate_job_id(),
            mode=mode,
            stage="trends",
            keyword=keyword,
            started_at=self.clock(),
            batch_current=0,
            batch_total=max(1, batch_total or 1),
        )
        try:
            self.registry.create(job)
        except ValueError:
            logger.warning(
                "Generation job id already in use, keeping existing job",
                extra={"job_id": job.id, "mode": mode},
            )
            return job.id
        logger.info(
            "Generation job started",
            extra={"job_id": job.id, "mode": mode, "batch_total": job.batch_total},
        )
        return job.id

    def advance_stage(self, job_id: str, stage: JobStage, keyword: str | None = None) -> bool:
        """Move a job forward; the current stage may be repeated to update the keyword."""
        if stage in TERMINAL_STAGES or stage == "idle":
            logger.warning(
                "Rejected stage change; use finish for terminal stages",
                extra={"job_id": job_id, "stage": stage},
            )
            return False

        def mutate(job: GenerationJob) -> bool:
            if job.is_terminal:
                return False
            if STAGE_ORDER[stage] < STAGE_ORDER[job.stage]:
                logger.warning(
                    "Ignored backward stage change",
                    extra={"job_id": job_id, "from_stage": job.stage, "to_stage": stage},
                )
                return False
            job.stage = stage
            if keyword is not None:
                job.keyword = keyword
            return True

        return self.registry.update(job_id, mutate)

    def report_batch_progress(self, job_id: str, current: int, keyword: str | None = None) -> bool:
        def mutate(job: GenerationJob) -> bool:
            if job.is_terminal:
                return False
            job.batch_current = min(max(0, current), job.batch_total)
            if keyword is not None:
                job.keyword = keyword
            return True

        return self.registry.update(job_id, mutate)

    def record_result(self, job_id: str, title: str, keyword: str, success: bool) -> bool:
        def mutate(job: GenerationJob) -> bool:
            if job.is_terminal:
                return False
            job.results.append(JobResult(title=title, keyword=keyword, success=success))
            return True

        return self.registry.update(job_id, mutate)

    def record_error(self, job_id: str, message: str) -> bool:
        def mutate(job: GenerationJob) -> bool:
            if job.is_terminal:
                return False
            job.errors.append(message)
            return True

        return self.registry.update(job_id, mutate)

    def finish(self, job_id: str, success: bool) -> bool:
        now = self.clock()

        def mutate(job: GenerationJob) -> bool:
            if job.is_terminal:
                return False
            job.stage = "done" if success else "error"
            job.finished_at = now
            return True

        applied = self.registry.update(job_id, mutate)
        if applied:
            logger.info(
                "Generation job finished",
                extra={"job_id": job_id, "stage": "done" if success else "error"},
            )
        return applied

    def dismiss(self, job_id: str) -> bool:
        return self.registry.remove(job_id)

    def clear_all(self) -> int:
        return self.registry.clear()

    def get(self, job_id: str) -> GenerationJob | None:
        return self.registry.get(job_id)

    def list_jobs(self) -> list[GenerationJob]:
        return self.registry.list()

    def active_job(self) -> GenerationJob | None:
        """First job, in creation order, that is still running."""
        return next(
            (job for job in self.registry.list() if job.stage not in INACTIVE_STAGES),
            None,
        )

    def is_expired(self, job: GenerationJob, now: float) -> bool:
        if not job.is_terminal:
            return False
        if self.retention_anchor == "finished" and job.finished_at is not None:
            anchor = job.finished_at
        else:
            anchor = job.started_at
        return now - anchor >= self.retention_seconds

    def reap_expired(self, now: float | None = None) -> int:
        """Evict terminal jobs past the retention window."""
        current = self.clock() if now is None else now
        evicted = self.registry.evict(lambda job: self.is_expired(job, current))
        if evicted:
            logger.info("Reaped finished generation jobs", extra={"job_ids": evicted})
        return len(evicted)


_generation_job_tracker: GenerationJobTracker | None = None


def get_generation_job_tracker() -> GenerationJobTracker:
    """Get singleton job tracker."""
    global _generation_job_tracker
    if _generation_job_tracker is None:
        _generation_job_tracker = GenerationJobTracker()
    return _generation_job_tracker
