"""API v1 router aggregator."""

from fastapi import APIRouter

from blogwise.api.v1.jobs.routes import router as jobs_router
from blogwise.api.v1.keywords.routes import router as keywords_router
from blogwise.api.v1.links.routes import router as links_router
from blogwise.api.v1.pipeline.routes import router as pipeline_router

api_router = APIRouter()

api_router.include_router(pipeline_router, prefix="/pipeline", tags=["Pipeline"])
api_router.include_router(jobs_router, prefix="/jobs", tags=["Jobs"])
api_router.include_router(keywords_router, prefix="/keywords", tags=["Keywords"])
api_router.include_router(links_router, prefix="/links", tags=["Links"])
