"""Revenue-potential scoring and ranking of candidate topics."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from blogwise.config import settings
from blogwise.services.keyword_signals import (
    classify_search_intent,
    estimate_competition,
    generate_long_tail_variants,
    keyword_bonus,
    match_niche,
    suggest_title,
)
from blogwise.services.providers import KeywordEstimator
from blogwise.services.types import (
    CandidateTopic,
    CompetitionLevel,
    KeywordAnalysis,
    KeywordEstimate,
    SearchIntent,
    SearchVolume,
)

logger = logging.getLogger(__name__)

VOLUME_MULTIPLIERS: dict[SearchVolume, float] = {
    "low": 0.3,
    "medium": 0.6,
    "high": 0.85,
    "very_high": 1.0,
}
COMPETITION_FACTORS: dict[CompetitionLevel, float] = {
    "low": 1.0,
    "medium": 0.45,
    "high": 0.1,
}
INTENT_CTR_MULTIPLIERS: dict[SearchIntent, float] = {
    "transactional": 1.35,
    "commercial": 1.2,
    "informational": 1.0,
    "navigational": 0.7,
}
TREND_BOOST_WEIGHT = 0.2
# Raw value of a strong financial long-tail keyword; maps to a score of 100.
SCORE_NORMALIZER = 22.5


def calculate_revenue_potential(
    cpc_range: tuple[float, float],
    competition: CompetitionLevel,
    volume: SearchVolume,
    trend_score: float,
    keyword: str = "",
    intent: SearchIntent = "informational",
) -> int:
    """Score commercial value on 1..100. Pure function of its arguments."""
    mid_cpc = (cpc_range[0] + cpc_range[1]) / 2
    trend_boost = 1 + (trend_score / 100) * TREND_BOOST_WEIGHT
    raw = (
        mid_cpc
        * VOLUME_MULTIPLIERS[volume]
        * COMPETITION_FACTORS[competition]
        * trend_boost
        * keyword_bonus(keyword)
        * INTENT_CTR_MULTIPLIERS[intent]
    )
    score = min(100, round(raw / SCORE_NORMALIZER * 100))
    return max(1, score)


def build_analysis(topic: CandidateTopic, estimate: KeywordEstimate) -> KeywordAnalysis:
    """Combine a candidate with its estimate into a scored analysis."""
    low, high = estimate.cpc_range
    return KeywordAnalysis(
        keyword=topic.keyword,
        estimated_cpc=round((low + high) / 2, 2),
        competition_level=estimate.competition_level,
        search_volume_estimate=estimate.search_volume,
        revenue_potential=calculate_revenue_potential(
            estimate.cpc_range,
            estimate.competition_level,
            estimate.search_volume,
            topic.trend_score,
            topic.keyword,
            estimate.search_intent,
        ),
        suggested_title=suggest_title(topic.keyword, estimate.category),
        suggested_category=estimate.category,
        long_tail_variants=tuple(generate_long_tail_variants(topic.keyword)),
        search_intent=estimate.search_intent,
        trend_score=topic.trend_score,
    )


class HeuristicKeywordEstimator:
    """Offline estimator backed by the niche tables and keyword signals."""

    async def estimate(self, topic: CandidateTopic) -> KeywordEstimate:
        niche = match_niche(topic.keyword)
        return KeywordEstimate(
            cpc_range=niche.cpc_range,
            competition_level=estimate_competition(topic.keyword),
            search_volume=niche.search_volume,
            category=niche.category,
            search_intent=classify_search_intent(topic.keyword),
        )


class RevenueRanker:
    """Orders candidate topics by estimated revenue potential."""

    def __init__(
        self,
        estimator: KeywordEstimator | None = None,
        *,
        max_concurrency: int | None = None,
        fallback: KeywordEstimator | None = None,
    ) -> None:
        self.estimator = estimator or HeuristicKeywordEstimator()
        self.fallback = fallback or HeuristicKeywordEstimator()
        self.max_concurrency = max(1, max_concurrency or settings.estimation_max_concurrency)

    async def rank(self, candidates: Sequence[CandidateTopic]) -> list[KeywordAnalysis]:
        """Analyse candidates concurrently and sort by revenue potential.

        At most ``max_concurrency`` estimates are in flight at once.
        Candidates whose estimation raises are dropped. The sort is stable,
        so equal scores keep their input order.
        """
        if not candidates:
            return []

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def estimate_one(topic: CandidateTopic) -> KeywordEstimate:
            async with semaphore:
                return await self.estimator.estimate(topic)

        estimates = await asyncio.gather(
            *(estimate_one(topic) for topic in candidates),
            return_exceptions=True,
        )

        analyses: list[KeywordAnalysis] = []
        for topic, estimate in zip(candidates, estimates):
            if isinstance(estimate, BaseException):
                if not isinstance(estimate, Exception):
                    raise estimate
                logger.warning(
                    "Dropping candidate after estimation failure",
                    extra={"keyword": topic.keyword, "error": str(estimate)},
                )
                continue
            analyses.append(build_analysis(topic, estimate))

        analyses.sort(key=lambda analysis: analysis.revenue_potential, reverse=True)
        logger.info(
            "Ranked candidate topics",
            extra={"candidates": len(candidates), "ranked": len(analyses)},
        )
        return analyses

    async def analyze_keyword(self, keyword: str, trend_score: float = 50) -> KeywordAnalysis:
        """Analyse a single manually supplied keyword.

        A failing estimator degrades to the fallback estimate instead of
        raising, since there is no other candidate to rank.
        """
        topic = CandidateTopic(
            keyword=keyword,
            source="manual",
            category=match_niche(keyword).category,
            trend_score=trend_score,
            fetched_at=datetime.now(timezone.utc),
        )
        try:
            estimate = await self.estimator.estimate(topic)
        except Exception as e:
            logger.warning(
                "Estimation failed, using fallback estimate",
                extra={"keyword": keyword, "error": str(e)},
            )
            estimate = await self.fallback.estimate(topic)
        return build_analysis(topic, estimate)


async def rank_topics(
    candidates: Sequence[CandidateTopic],
    estimator: KeywordEstimator | None = None,
) -> list[KeywordAnalysis]:
    return await RevenueRanker(estimator).rank(candidates)


async def analyze_keyword(
    keyword: str,
    trend_score: float = 50,
    estimator: KeywordEstimator | None = None,
) -> KeywordAnalysis:
    return await RevenueRanker(estimator).analyze_keyword(keyword, trend_score)
