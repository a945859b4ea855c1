"""Keyword ranking and duplicate-check endpoints."""

from fastapi import APIRouter, Depends

from blogwise.api.v1.dependencies import Ranker, Store, rate_limited
from blogwise.config import settings
from blogwise.schemas.keyword import (
    DuplicateCheckRequest,
    DuplicateCheckResponse,
    KeywordAnalysisResponse,
    RankKeywordsRequest,
    RankKeywordsResponse,
)
from blogwise.services.duplicate_guard import check_duplicate

router = APIRouter(
    dependencies=[
        Depends(
            rate_limited(settings.rate_limit_analysis_max, settings.rate_limit_analysis_window_ms)
        )
    ],
)


@router.post("/rank", response_model=RankKeywordsResponse)
async def rank_keywords(request: RankKeywordsRequest, ranker: Ranker) -> RankKeywordsResponse:
    """Rank candidate keywords by revenue potential, best first."""
    analyses = await ranker.rank([candidate.to_topic() for candidate in request.candidates])
    return RankKeywordsResponse(
        items=[KeywordAnalysisResponse.model_validate(analysis) for analysis in analyses],
        total=len(analyses),
    )


@router.post("/duplicate-check", response_model=DuplicateCheckResponse)
async def duplicate_check(request: DuplicateCheckRequest, store: Store) -> DuplicateCheckResponse:
    """Check a keyword against stored content."""
    result = await check_duplicate(store, request.keyword, request.category)
    return DuplicateCheckResponse.model_validate(result)
