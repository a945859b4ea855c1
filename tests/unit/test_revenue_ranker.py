"""Unit tests for revenue scoring and candidate ranking."""

from __future__ import annotations

import asyncio

import pytest

from blogwise.core.exceptions import EstimationError
from blogwise.services.revenue_ranker import (
    HeuristicKeywordEstimator,
    RevenueRanker,
    analyze_keyword,
    calculate_revenue_potential,
    rank_topics,
)
from blogwise.services.types import CandidateTopic, KeywordEstimate


def _topic(keyword: str, trend_score: float = 50) -> CandidateTopic:
    return CandidateTopic(keyword=keyword, source="manual", category="생활정보", trend_score=trend_score)


class _TableEstimator:
    """Returns canned estimates; raises for keywords listed in ``failing``."""

    def __init__(self, cpc: dict[str, float], failing: set[str] | None = None) -> None:
        self.cpc = cpc
        self.failing = failing or set()

    async def estimate(self, topic: CandidateTopic) -> KeywordEstimate:
        if topic.keyword in self.failing:
            raise EstimationError(topic.keyword, "upstream timeout")
        value = self.cpc[topic.keyword]
        return KeywordEstimate(
            cpc_range=(value, value),
            competition_level="medium",
            search_volume="medium",
            category="생활정보",
        )


class _CountingEstimator:
    def __init__(self) -> None:
        self.active = 0
        self.peak = 0

    async def estimate(self, topic: CandidateTopic) -> KeywordEstimate:
        self.active += 1
        self.peak = max(self.peak, self.active)
        await asyncio.sleep(0)
        self.active -= 1
        return KeywordEstimate(
            cpc_range=(1.0, 2.0),
            competition_level="medium",
            search_volume="medium",
            category="생활정보",
        )

def test_revenue_potential_is_clamped() -> None:
    assert calculate_revenue_potential((100.0, 100.0), "low", "very_high", 100) == 100
    assert calculate_revenue_potential((0.01, 0.01), "high", "low", 0) == 1


def test_revenue_potential_favours_low_competition() -> None:
    low = calculate_revenue_potential((2.0, 4.0), "low", "medium", 50)
    high = calculate_revenue_potential((2.0, 4.0), "high", "medium", 50)

    assert low > high


def test_revenue_potential_is_pure() -> None:
    args = ((1.0, 3.0), "medium", "high", 70, "청년 월세 지원 신청", "transactional")

    assert calculate_revenue_potential(*args) == calculate_revenue_potential(*args)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_rank_sorts_descending() -> None:
    ranker = RevenueRanker(_TableEstimator({"가나다": 1.0, "라마바": 5.0, "사아자": 3.0}))

    ranked = await ranker.rank([_topic("가나다"), _topic("라마바"), _topic("사아자")])

    assert [a.keyword for a in ranked] == ["라마바", "사아자", "가나다"]
    scores = [a.revenue_potential for a in ranked]
    assert scores == sorted(scores, reverse=True)


@pytest.mark.asyncio
async def test_rank_drops_failed_estimates() -> None:
    ranker = RevenueRanker(
        _TableEstimator({"가나다": 1.0, "라마바": 5.0, "사아자": 3.0}, failing={"라마바"})
    )

    ranked = await ranker.rank([_topic("가나다"), _topic("라마바"), _topic("사아자")])

    assert [a.keyword for a in ranked] == ["사아자", "가나다"]


@pytest.mark.asyncio
async def test_rank_keeps_input_order_on_ties() -> None:
    ranker = RevenueRanker(_TableEstimator({"가나다": 2.0, "라마바": 2.0, "사아자": 2.0}))

    ranked = await ranker.rank([_topic("사아자"), _topic("가나다"), _topic("라마바")])

    assert [a.keyword for a in ranked] == ["사아자", "가나다", "라마바"]


@pytest.mark.asyncio
async def test_rank_empty_input() -> None:
    assert await RevenueRanker().rank([]) == []


@pytest.mark.asyncio
async def test_analyze_keyword_with_heuristics() -> None:
    analysis = await RevenueRanker(HeuristicKeywordEstimator()).analyze_keyword(
        "주택담보대출 금리 비교", trend_score=80
    )

    assert analysis.keyword == "주택담보대출 금리 비교"
    assert analysis.suggested_category == "금융"
    assert analysis.estimated_cpc == 4.0
    assert analysis.search_intent == "commercial"
    assert analysis.trend_score == 80
    assert 1 <= analysis.revenue_potential <= 100
    assert "주택담보대출 금리 비교" in analysis.suggested_title
    assert analysis.long_tail_variants


@pytest.mark.asyncio
async def test_module_helpers_use_given_estimator() -> None:
    estimator = _TableEstimator({"가나다": 1.0, "라마바": 5.0})

    ranked = await rank_topics([_topic("가나다"), _topic("라마바")], estimator)
    single = await analyze_keyword("라마바", 30, estimator)

    assert [a.keyword for a in ranked] == ["라마바", "가나다"]
    assert single.estimated_cpc == 5.0
    assert single.trend_score == 30


@pytest.mark.asyncio
async def test_rank_caps_concurrent_estimates() -> None:
    estimator = _CountingEstimator()
    ranker = RevenueRanker(estimator, max_concurrency=2)

    ranked = await ranker.rank([_topic(f"키워드{i}") for i in range(6)])

    assert len(ranked) == 6
    assert estimator.peak == 2


@pytest.mark.asyncio
async def test_analyze_keyword_falls_back_when_estimator_fails() -> None:
    ranker = RevenueRanker(_TableEstimator({}, failing={"주택담보대출 금리 비교"}))

    analysis = await ranker.analyze_keyword("주택담보대출 금리 비교", trend_score=80)
    expected = await RevenueRanker(HeuristicKeywordEstimator()).analyze_keyword(
        "주택담보대출 금리 비교", trend_score=80
    )

    assert analysis.estimated_cpc == expected.estimated_cpc
    assert analysis.revenue_potential == expected.revenue_potential
