"""Pipeline API endpoints."""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status

from blogwise.api.v1.dependencies import Pipeline, rate_limited
from blogwise.config import settings
from blogwise.schemas.pipeline import PipelineRunRequest, PipelineRunResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/run",
    response_model=PipelineRunResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Start generation job",
    description=(
        "Register a single, manual or batch generation job and run it in the background. "
        "Poll the jobs endpoints for progress."
    ),
    dependencies=[
        Depends(
            rate_limited(settings.rate_limit_pipeline_max, settings.rate_limit_pipeline_window_ms)
        )
    ],
)
async def run_pipeline(
    request: PipelineRunRequest,
    background_tasks: BackgroundTasks,
    pipeline: Pipeline,
) -> PipelineRunResponse:
    """Start a generation job."""
    pipeline_request = request.to_request()
    try:
        job_id = pipeline.start_job(pipeline_request)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    background_tasks.add_task(pipeline.run, job_id, pipeline_request)
    logger.info("Generation job queued", extra={"job_id": job_id, "mode": request.mode})
    return PipelineRunResponse(job_id=job_id, mode=request.mode)
