"""Generation job API endpoints."""

from fastapi import APIRouter, HTTPException, Response, status

from blogwise.api.v1.dependencies import JobTracker
from blogwise.schemas.job import ClearJobsResponse, GenerationJobListResponse, GenerationJobResponse

JOB_NOT_FOUND_DETAIL = "Generation job not found"

router = APIRouter()


@router.get("", response_model=GenerationJobListResponse)
async def list_jobs(tracker: JobTracker) -> GenerationJobListResponse:
    """List known jobs in creation order."""
    jobs = tracker.list_jobs()
    return GenerationJobListResponse(
        items=[GenerationJobResponse.from_job(job) for job in jobs],
        total=len(jobs),
    )


@router.get("/active", response_model=GenerationJobResponse | None)
async def get_active_job(tracker: JobTracker) -> GenerationJobResponse | None:
    """The first still-running job, or null."""
    job = tracker.active_job()
    return GenerationJobResponse.from_job(job) if job is not None else None


@router.get("/{job_id}", response_model=GenerationJobResponse)
async def get_job(job_id: str, tracker: JobTracker) -> GenerationJobResponse:
    job = tracker.get(job_id)
    if job is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=JOB_NOT_FOUND_DETAIL)
    return GenerationJobResponse.from_job(job)


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
async def dismiss_job(job_id: str, tracker: JobTracker) -> Response:
    """Remove a job; a running batch stops before its next topic."""
    if not tracker.dismiss(job_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=JOB_NOT_FOUND_DETAIL)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", response_model=ClearJobsResponse)
async def clear_jobs(tracker: JobTracker) -> ClearJobsResponse:
    return ClearJobsResponse(cleared=tracker.clear_all())
