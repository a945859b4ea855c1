"""DataForSEO API integration for keyword metrics.

Used as a live alternative to the heuristic niche tables when credentials
are configured.
"""

import base64
import logging
from typing import Any

import httpx

from blogwise.config import settings
from blogwise.core.exceptions import (
    APIKeyMissingError,
    ExternalAPIError,
    RateLimitExceededError,
)
from blogwise.services.keyword_signals import classify_search_intent, estimate_competition, match_niche
from blogwise.services.providers import KeywordEstimator
from blogwise.services.revenue_ranker import HeuristicKeywordEstimator
from blogwise.services.types import CandidateTopic, CompetitionLevel, KeywordEstimate, SearchVolume

logger = logging.getLogger(__name__)

# Spread applied around a single reported CPC to form a range.
CPC_SPREAD = 0.3


class DataForSEOClient:
    """Client for the DataForSEO Labs keyword endpoints."""

    BASE_URL = "https://api.dataforseo.com/v3"

    def __init__(
        self,
        login: str | None = None,
        password: str | None = None,
        timeout: float = 60.0,
    ) -> None:
        self.login = login or settings.dataforseo_login
        self.password = password or settings.dataforseo_password
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

        if not self.login or not self.password:
            raise APIKeyMissingError("DataForSEO")

    @property
    def _auth_header(self) -> str:
        credentials = f"{self.login}:{self.password}"
        return f"Basic {base64.b64encode(credentials.encode()).decode()}"

    async def __aenter__(self) -> "DataForSEOClient":
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            headers={
                "Authorization": self._auth_header,
                "Content-Type": "application/json",
            },
        )
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self._client:
            await self._client.aclose()

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("Client must be used as async context manager")
        return self._client

    async def _make_request(
        self,
        endpoint: str,
        data: list[dict[str, Any]],
    ) -> list[dict[str, Any]]:
        """POST a task batch and return the flattened task results."""
        logger.info("DataForSEO API request", extra={"endpoint": endpoint})
        url = f"{self.BASE_URL}/{endpoint}"

        try:
            response = await self.client.post(url, json=data)

            if response.status_code == 429:
                logger.warning("DataForSEO rate limit hit", extra={"endpoint": endpoint})
                raise RateLimitExceededError("DataForSEO")

            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            logger.warning("DataForSEO HTTP error", extra={"endpoint": endpoint, "error": str(e)})
            raise ExternalAPIError("DataForSEO", str(e)) from e

        if payload.get("status_code") != 20000:
            logger.warning(
                "DataForSEO API error",
                extra={"endpoint": endpoint, "status": payload.get("status_message")},
            )
            raise ExternalAPIError("DataForSEO", payload.get("status_message", "Unknown error"))

        results: list[dict[str, Any]] = []
        for task in payload.get("tasks", []):
            if task.get("status_code") == 20000 and task.get("result"):
                results.extend(task["result"])
        return results

    async def get_keyword_metrics(
        self,
        keywords: list[str],
        location_code: int | None = None,
        language_code: str | None = None,
    ) -> list[dict[str, Any]]:
        """Get search volume, CPC and competition for a list of keywords.

        Args:
            keywords: Keywords to look up (max 700 per request)
            location_code: DataForSEO location code, defaults to settings
            language_code: Language code, defaults to settings

        Returns:
            One metrics dict per keyword the API knows about
        """
        if not keywords:
            return []
        logger.info("Fetching keyword metrics", extra={"keyword_count": len(keywords)})

        batch_size = 700
        metrics: list[dict[str, Any]] = []
        for i in range(0, len(keywords), batch_size):
            data = [
                {
                    "keywords": keywords[i : i + batch_size],
                    "location_code": location_code or settings.dataforseo_location_code,
                    "language_code": language_code or settings.dataforseo_language_code,
                }
            ]
            results = await self._make_request("dataforseo_labs/google/keyword_overview/live", data)

            for result in results:
                for item in result.get("items") or []:
                    info = item.get("keyword_info") or {}
                    metrics.append({
                        "keyword": item.get("keyword"),
                        "search_volume": info.get("search_volume"),
                        "cpc": info.get("cpc"),
                        "competition": info.get("competition"),
                        "competition_index": info.get("competition_level"),
                    })

        return metrics


def volume_bucket(search_volume: int | None) -> SearchVolume | None:
    """Map a monthly search volume onto the estimate buckets."""
    if search_volume is None:
        return None
    if search_volume >= 100_000:
        return "very_high"
    if search_volume >= 10_000:
        return "high"
    if search_volume >= 1_000:
        return "medium"
    return "low"


def competition_bucket(competition_index: str | None) -> CompetitionLevel | None:
    """Map DataForSEO's LOW/MEDIUM/HIGH competition level."""
    if not competition_index:
        return None
    level = competition_index.strip().lower()
    if level in ("low", "medium", "high"):
        return level  # type: ignore[return-value]
    return None


class DataForSEOKeywordEstimator:
    """Keyword estimator backed by live DataForSEO metrics.

    Metrics the API does not report are filled from the heuristic niche
    tables, which also always supply the category. When the API fails or
    returns no row for the keyword, the heuristic estimate is used instead.
    """

    def __init__(
        self,
        client_factory: Any = DataForSEOClient,
        fallback: KeywordEstimator | None = None,
    ) -> None:
        self.client_factory = client_factory
        self.fallback = fallback or HeuristicKeywordEstimator()

    async def estimate(self, topic: CandidateTopic) -> KeywordEstimate:
        try:
            async with self.client_factory() as client:
                metrics = await client.get_keyword_metrics([topic.keyword])
        except ExternalAPIError as e:
            logger.warning(
                "DataForSEO unavailable, using heuristic estimate",
                extra={"keyword": topic.keyword, "error": e.message},
            )
            return await self.fallback.estimate(topic)

        row = next(
            (m for m in metrics if (m.get("keyword") or "").lower() == topic.keyword.lower()),
            None,
        )
        if row is None:
            logger.warning(
                "DataForSEO returned no metrics, using heuristic estimate",
                extra={"keyword": topic.keyword},
            )
            return await self.fallback.estimate(topic)

        niche = match_niche(topic.keyword)
        cpc = row.get("cpc")
        cpc_range = (
            (round(cpc * (1 - CPC_SPREAD), 2), round(cpc * (1 + CPC_SPREAD), 2))
            if cpc
            else niche.cpc_range
        )
        return KeywordEstimate(
            cpc_range=cpc_range,
            competition_level=competition_bucket(row.get("competition_index"))
            or estimate_competition(topic.keyword),
            search_volume=volume_bucket(row.get("search_volume")) or niche.search_volume,
            category=niche.category,
            search_intent=classify_search_intent(topic.keyword),
        )
