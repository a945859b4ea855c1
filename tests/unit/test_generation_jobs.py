"""Unit tests for the generation job tracker."""

from __future__ import annotations

import asyncio

import pytest

from blogwise.services.generation_jobs import GenerationJobTracker
from blogwise.workers.job_reaper import JobReaper


class _Clock:
    def __init__(self, now: float = 1_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def _tracker(clock: _Clock | None = None, **kwargs: object) -> GenerationJobTracker:
    return GenerationJobTracker(clock=clock or _Clock(), retention_seconds=60, **kwargs)  # type: ignore[arg-type]


def test_start_registers_running_job() -> None:
    tracker = _tracker()

    job_id = tracker.start("single", keyword="실업급여 신청")
    job = tracker.get(job_id)

    assert job is not None
    assert job.stage == "trends"
    assert job.keyword == "실업급여 신청"
    assert job.batch_total == 1
    assert job.started_at == 1_000.0
    assert tracker.active_job() is not None


def test_start_with_existing_id_keeps_original_job() -> None:
    tracker = _tracker()
    job_id = tracker.start("single", keyword="실업급여 신청", job_id="gen-fixed")

    assert tracker.start("batch", batch_total=3, job_id="gen-fixed") == job_id

    job = tracker.get(job_id)
    assert job is not None
    assert job.mode == "single"
    assert job.keyword == "실업급여 신청"
    assert len(tracker.list_jobs()) == 1

def test_batch_job_walks_stages_to_done() -> None:
    tracker = _tracker()
    job_id = tracker.start("batch", batch_total=3)

    assert tracker.advance_stage(job_id, "benchmark", "a")
    assert tracker.advance_stage(job_id, "generate", "a")
    for current, keyword in enumerate(["a", "b", "c"], start=1):
        assert tracker.report_batch_progress(job_id, current, keyword)
        assert tracker.record_result(job_id, f"{keyword} 제목", keyword, True)
    assert tracker.finish(job_id, success=True)

    job = tracker.get(job_id)
    assert job is not None
    assert job.stage == "done"
    assert job.batch_current == 3
    assert job.keyword == "c"
    assert [r.keyword for r in job.results] == ["a", "b", "c"]
    assert job.finished_at == 1_000.0
    assert tracker.active_job() is None


def test_terminal_stage_absorbs_mutations() -> None:
    tracker = _tracker()
    job_id = tracker.start("manual", keyword="k")
    tracker.finish(job_id, success=False)

    assert not tracker.advance_stage(job_id, "generate")
    assert not tracker.report_batch_progress(job_id, 1)
    assert not tracker.record_result(job_id, "t", "k", True)
    assert not tracker.record_error(job_id, "late")
    assert not tracker.finish(job_id, success=True)

    job = tracker.get(job_id)
    assert job is not None
    assert job.stage == "error"
    assert job.results == []
    assert job.errors == []


def test_stage_never_moves_backward() -> None:
    tracker = _tracker()
    job_id = tracker.start("batch", batch_total=2)
    tracker.advance_stage(job_id, "generate")

    assert not tracker.advance_stage(job_id, "benchmark")
    assert tracker.advance_stage(job_id, "generate", "next")

    job = tracker.get(job_id)
    assert job is not None
    assert job.stage == "generate"
    assert job.keyword == "next"


def test_terminal_stages_only_via_finish() -> None:
    tracker = _tracker()
    job_id = tracker.start("single", keyword="k")

    assert not tracker.advance_stage(job_id, "done")
    assert not tracker.advance_stage(job_id, "idle")


def test_batch_progress_is_clamped() -> None:
    tracker = _tracker()
    job_id = tracker.start("batch", batch_total=3)

    tracker.report_batch_progress(job_id, 7)
    job = tracker.get(job_id)
    assert job is not None
    assert job.batch_current == 3

    tracker.report_batch_progress(job_id, -1)
    job = tracker.get(job_id)
    assert job is not None
    assert job.batch_current == 0


def test_unknown_job_operations_return_false() -> None:
    tracker = _tracker()

    assert tracker.get("missing") is None
    assert not tracker.advance_stage("missing", "benchmark")
    assert not tracker.record_error("missing", "x")
    assert not tracker.finish("missing", success=True)
    assert not tracker.dismiss("missing")


def test_snapshots_are_copies() -> None:
    tracker = _tracker()
    job_id = tracker.start("single", keyword="k")

    snapshot = tracker.get(job_id)
    assert snapshot is not None
    snapshot.errors.append("tampered")

    job = tracker.get(job_id)
    assert job is not None
    assert job.errors == []


def test_active_job_is_first_running_in_creation_order() -> None:
    tracker = _tracker()
    first = tracker.start("single", keyword="a")
    second = tracker.start("single", keyword="b")
    tracker.finish(first, success=True)

    active = tracker.active_job()

    assert active is not None
    assert active.id == second
    assert [job.id for job in tracker.list_jobs()] == [first, second]


def test_reap_with_started_anchor() -> None:
    clock = _Clock()
    tracker = _tracker(clock, retention_anchor="started")
    finished = tracker.start("single", keyword="a")
    running = tracker.start("single", keyword="b")
    clock.now = 1_050.0
    tracker.finish(finished, success=True)

    assert tracker.reap_expired(now=1_059.0) == 0
    assert tracker.reap_expired(now=1_060.0) == 1
    assert tracker.get(finished) is None
    assert tracker.get(running) is not None


def test_reap_with_finished_anchor() -> None:
    clock = _Clock()
    tracker = _tracker(clock, retention_anchor="finished")
    job_id = tracker.start("single", keyword="a")
    clock.now = 1_050.0
    tracker.finish(job_id, success=True)

    assert tracker.reap_expired(now=1_100.0) == 0
    assert tracker.reap_expired(now=1_110.0) == 1


def test_dismiss_and_clear() -> None:
    tracker = _tracker()
    first = tracker.start("single", keyword="a")
    tracker.start("single", keyword="b")

    assert tracker.dismiss(first)
    assert tracker.get(first) is None
    assert tracker.clear_all() == 1
    assert tracker.list_jobs() == []


@pytest.mark.asyncio
async def test_reaper_evicts_expired_jobs() -> None:
    clock = _Clock()
    tracker = GenerationJobTracker(clock=clock, retention_seconds=0)
    job_id = tracker.start("single", keyword="a")
    tracker.finish(job_id, success=True)
    reaper = JobReaper(tracker=tracker, interval_seconds=0.01)

    await reaper.start()
    assert reaper.running
    for _ in range(50):
        if tracker.get(job_id) is None:
            break
        await asyncio.sleep(0.01)
    await reaper.stop()

    assert tracker.get(job_id) is None
    assert not reaper.running
