"""Generation job schemas."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from blogwise.services.generation_jobs import GenerationJob


class JobResultResponse(BaseModel):
    title: str
    keyword: str
    success: bool


class GenerationJobResponse(BaseModel):
    """Snapshot of a generation job."""

    id: str
    mode: str
    stage: str
    keyword: str | None = None
    started_at: datetime
    finished_at: datetime | None = None
    batch_current: int = 0
    batch_total: int = 1
    results: list[JobResultResponse] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    @classmethod
    def from_job(cls, job: GenerationJob) -> "GenerationJobResponse":
        return cls(
            id=job.id,
            mode=job.mode,
            stage=job.stage,
            keyword=job.keyword,
            started_at=datetime.fromtimestamp(job.started_at, tz=timezone.utc),
            finished_at=(
                datetime.fromtimestamp(job.finished_at, tz=timezone.utc)
                if job.finished_at is not None
                else None
            ),
            batch_current=job.batch_current,
            batch_total=job.batch_total,
            results=[
                JobResultResponse(title=r.title, keyword=r.keyword, success=r.success)
                for r in job.results
            ],
            errors=list(job.errors),
        )


class GenerationJobListResponse(BaseModel):
    items: list[GenerationJobResponse]
    total: int


class ClearJobsResponse(BaseModel):
    cleared: int
