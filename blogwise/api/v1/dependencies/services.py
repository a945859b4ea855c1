"""Service wiring for v1 routes; override these in tests."""

from typing import Annotated

from fastapi import Depends

from blogwise.config import settings
from blogwise.integrations.dataforseo import DataForSEOKeywordEstimator
from blogwise.integrations.generation import AgentGenerationProvider
from blogwise.repositories.content_repository import ContentRepository
from blogwise.services.content_pipeline import ContentPipeline
from blogwise.services.generation_jobs import GenerationJobTracker, get_generation_job_tracker
from blogwise.services.providers import ContentStore, KeywordEstimator
from blogwise.services.revenue_ranker import HeuristicKeywordEstimator, RevenueRanker
from blogwise.services.trend_discovery import TrendDiscovery, get_default_signal_providers


def get_job_tracker() -> GenerationJobTracker:
    return get_generation_job_tracker()


def get_content_store() -> ContentStore:
    return ContentRepository()


def get_keyword_estimator() -> KeywordEstimator:
    if settings.dataforseo_enabled:
        return DataForSEOKeywordEstimator()
    return HeuristicKeywordEstimator()


def get_revenue_ranker(
    estimator: Annotated[KeywordEstimator, Depends(get_keyword_estimator)],
) -> RevenueRanker:
    return RevenueRanker(estimator)


def get_content_pipeline(
    tracker: Annotated[GenerationJobTracker, Depends(get_job_tracker)],
    store: Annotated[ContentStore, Depends(get_content_store)],
    ranker: Annotated[RevenueRanker, Depends(get_revenue_ranker)],
) -> ContentPipeline:
    return ContentPipeline(
        tracker=tracker,
        store=store,
        generator=AgentGenerationProvider(),
        discovery=TrendDiscovery(get_default_signal_providers()),
        ranker=ranker,
    )


JobTracker = Annotated[GenerationJobTracker, Depends(get_job_tracker)]
Store = Annotated[ContentStore, Depends(get_content_store)]
Ranker = Annotated[RevenueRanker, Depends(get_revenue_ranker)]
Pipeline = Annotated[ContentPipeline, Depends(get_content_pipeline)]
