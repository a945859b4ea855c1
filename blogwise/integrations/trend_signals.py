"""Trend signal providers: the Google Trends RSS feed and a curated high-CPC list."""

import logging
import math
import re
from datetime import datetime, timezone
from typing import Any

import httpx
from lxml import etree

from blogwise.config import settings
from blogwise.core.exceptions import SignalUnavailableError
from blogwise.services.evergreen_keywords import related_keywords
from blogwise.services.keyword_signals import detect_trend_category, is_low_value_keyword
from blogwise.services.types import CandidateTopic

logger = logging.getLogger(__name__)

USER_AGENT = "Blogwise-Bot/1.0"
NON_DIGIT_PATTERN = re.compile(r"[^0-9]")


def traffic_to_trend_score(approx_traffic: str | None, position: int) -> int:
    """Log-scale the approximate traffic ("20,000+") onto 0..100.

    Items without a traffic figure score by feed position instead.
    """
    digits = NON_DIGIT_PATTERN.sub("", approx_traffic or "")
    traffic = int(digits) if digits else 0
    if traffic > 0:
        return min(100, round(math.log10(traffic + 1) * 16.67))
    return max(10, 95 - position * 5)


class GoogleTrendsSignalProvider:
    """Reads today's trending searches from the Google Trends RSS feed."""

    name = "google"

    def __init__(
        self,
        feed_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.feed_url = feed_url or settings.google_trends_rss_url
        self.timeout = timeout or settings.trend_fetch_timeout_seconds
        self._transport = transport

    async def fetch_trends(self) -> list[CandidateTopic]:
        logger.info("Fetching Google Trends feed", extra={"url": self.feed_url})
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": USER_AGENT},
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(self.feed_url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise SignalUnavailableError(self.name, str(e)) from e

        try:
            root = etree.fromstring(response.content)
        except etree.XMLSyntaxError as e:
            raise SignalUnavailableError(self.name, f"invalid feed XML: {e}") from e

        topics = self.parse_items(root)
        filtered = [topic for topic in topics if not is_low_value_keyword(topic.keyword)]
        logger.info(
            "Google Trends feed parsed",
            extra={"items": len(topics), "kept": len(filtered)},
        )
        return filtered

    def parse_items(self, root: Any) -> list[CandidateTopic]:
        fetched_at = datetime.now(timezone.utc)
        topics: list[CandidateTopic] = []
        for position, item in enumerate(root.xpath("//channel/item")):
            keyword = (item.findtext("title") or "").strip()
            if not keyword:
                continue
            traffic = item.xpath("string(*[local-name()='approx_traffic'])")
            topics.append(
                CandidateTopic(
                    keyword=keyword,
                    source="google",
                    category=detect_trend_category(keyword) or "생활정보",
                    trend_score=traffic_to_trend_score(traffic, position),
                    related_keywords=related_keywords(keyword),
                    fetched_at=fetched_at,
                    keyword_type="trending",
                )
            )
        return topics


CURATED_HIGH_CPC_KEYWORDS: tuple[tuple[str, str, int], ...] = (
    ("소상공인 대출 금리 비교", "금융", 82),
    ("신용대출 금리 낮은 곳", "금융", 78),
    ("전세자금 대출 조건", "금융", 74),
    ("아파트 청약 자격 조건", "부동산", 80),
    ("전세 계약 갱신권", "부동산", 72),
    ("실업급여 신청 방법", "정부지원", 84),
    ("근로장려금 신청 자격", "정부지원", 76),
    ("건강검진 무료 대상", "건강", 70),
    ("국민건강보험 환급금", "건강", 68),
    ("자동차보험 비교 사이트", "보험", 75),
    ("실비보험 청구 방법", "보험", 71),
)


class CuratedKeywordSignalProvider:
    """Static high-CPC keywords that supplement the live feed."""

    name = "curated"

    async def fetch_trends(self) -> list[CandidateTopic]:
        fetched_at = datetime.now(timezone.utc)
        return [
            CandidateTopic(
                keyword=keyword,
                source="google",
                category=category,
                trend_score=score,
                related_keywords=related_keywords(keyword),
                fetched_at=fetched_at,
                keyword_type="trending",
            )
            for keyword, category, score in CURATED_HIGH_CPC_KEYWORDS
        ]
