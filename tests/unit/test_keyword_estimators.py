"""Unit tests for the DataForSEO-backed keyword estimator."""

from __future__ import annotations

from typing import Any

import pytest

from blogwise.core.exceptions import APIKeyMissingError, ExternalAPIError
from blogwise.integrations.dataforseo import (
    DataForSEOKeywordEstimator,
    competition_bucket,
    volume_bucket,
)
from blogwise.services.revenue_ranker import HeuristicKeywordEstimator, RevenueRanker
from blogwise.services.types import CandidateTopic


class _FakeClient:
    def __init__(self, metrics: list[dict[str, Any]] | None = None, error: Exception | None = None) -> None:
        self.metrics = metrics or []
        self.error = error
        self.requested: list[list[str]] = []

    async def __aenter__(self) -> "_FakeClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        return None

    async def get_keyword_metrics(self, keywords: list[str]) -> list[dict[str, Any]]:
        self.requested.append(keywords)
        if self.error is not None:
            raise self.error
        return self.metrics


def _topic(keyword: str) -> CandidateTopic:
    return CandidateTopic(keyword=keyword, source="manual", category="금융", trend_score=50)


def test_buckets() -> None:
    assert volume_bucket(None) is None
    assert volume_bucket(500) == "low"
    assert volume_bucket(5_000) == "medium"
    assert volume_bucket(50_000) == "high"
    assert volume_bucket(500_000) == "very_high"
    assert competition_bucket("HIGH") == "high"
    assert competition_bucket("") is None
    assert competition_bucket("unknown") is None


@pytest.mark.asyncio
async def test_estimate_uses_live_metrics() -> None:
    client = _FakeClient(
        [
            {
                "keyword": "신용대출 금리 비교",
                "search_volume": 12_000,
                "cpc": 4.0,
                "competition_index": "LOW",
            }
        ]
    )
    estimator = DataForSEOKeywordEstimator(client_factory=lambda: client)

    estimate = await estimator.estimate(_topic("신용대출 금리 비교"))

    assert client.requested == [["신용대출 금리 비교"]]
    assert estimate.cpc_range == (2.8, 5.2)
    assert estimate.competition_level == "low"
    assert estimate.search_volume == "high"
    assert estimate.category == "금융"
    assert estimate.search_intent == "commercial"


@pytest.mark.asyncio
async def test_estimate_fills_missing_metrics_from_niche_tables() -> None:
    client = _FakeClient([{"keyword": "주택담보대출", "search_volume": None, "cpc": None}])
    estimator = DataForSEOKeywordEstimator(client_factory=lambda: client)

    estimate = await estimator.estimate(_topic("주택담보대출"))

    assert estimate.cpc_range == (2.0, 6.0)
    assert estimate.search_volume == "high"


@pytest.mark.asyncio
async def test_estimate_falls_back_when_keyword_missing() -> None:
    estimator = DataForSEOKeywordEstimator(client_factory=lambda: _FakeClient([]))

    estimate = await estimator.estimate(_topic("신용대출"))

    assert estimate == await HeuristicKeywordEstimator().estimate(_topic("신용대출"))


@pytest.mark.asyncio
async def test_estimate_falls_back_on_api_errors() -> None:
    client = _FakeClient(error=ExternalAPIError("DataForSEO", "Internal error"))
    estimator = DataForSEOKeywordEstimator(client_factory=lambda: client)

    estimate = await estimator.estimate(_topic("주택담보대출"))

    assert client.requested == [["주택담보대출"]]
    assert estimate.cpc_range == (2.0, 6.0)
    assert estimate.category == "금융"


@pytest.mark.asyncio
async def test_missing_credentials_fall_back_to_heuristics() -> None:
    def factory() -> Any:
        raise APIKeyMissingError("DataForSEO")

    estimator = DataForSEOKeywordEstimator(client_factory=factory)

    estimate = await estimator.estimate(_topic("신용대출"))

    assert estimate == await HeuristicKeywordEstimator().estimate(_topic("신용대출"))


@pytest.mark.asyncio
async def test_outage_does_not_drop_ranked_candidates() -> None:
    client = _FakeClient(error=ExternalAPIError("DataForSEO", "503"))
    ranker = RevenueRanker(DataForSEOKeywordEstimator(client_factory=lambda: client))

    ranked = await ranker.rank([_topic("신용대출"), _topic("주택담보대출")])

    assert len(ranked) == 2
