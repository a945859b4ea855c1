"""Merge candidate topics from all signal providers into one ordered list."""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Sequence
from dataclasses import replace

from blogwise.config import settings
from blogwise.core.exceptions import SignalUnavailableError
from blogwise.services.evergreen_keywords import evergreen_topics, fallback_topics
from blogwise.services.keyword_signals import keyword_quality
from blogwise.services.providers import SignalProvider
from blogwise.services.types import CandidateTopic

logger = logging.getLogger(__name__)

MAX_RELATED_KEYWORDS = 10
TREND_WEIGHT = 0.3
QUALITY_WEIGHT = 0.7
DEDUPE_STRIP_PATTERN = re.compile(r"[^가-힣a-z0-9]")


def dedupe_key(keyword: str) -> str:
    return DEDUPE_STRIP_PATTERN.sub("", keyword.lower())


def merge_topics(topics: Sequence[CandidateTopic]) -> list[CandidateTopic]:
    """Collapse topics sharing a normalized keyword.

    The first occurrence wins, keeping the highest trend score and the
    union of related keywords.
    """
    merged: dict[str, CandidateTopic] = {}
    for topic in topics:
        key = dedupe_key(topic.keyword)
        existing = merged.get(key)
        if existing is None:
            merged[key] = topic
            continue
        related = list(dict.fromkeys([*existing.related_keywords, *topic.related_keywords]))
        merged[key] = replace(
            existing,
            trend_score=max(existing.trend_score, topic.trend_score),
            related_keywords=tuple(related[:MAX_RELATED_KEYWORDS]),
        )
    return list(merged.values())


def order_by_value(topics: Sequence[CandidateTopic], min_quality: int) -> list[CandidateTopic]:
    scored = [(topic, keyword_quality(topic.keyword)) for topic in topics]
    kept = [(topic, quality) for topic, quality in scored if quality >= min_quality]
    kept.sort(
        key=lambda pair: pair[0].trend_score * TREND_WEIGHT + pair[1] * QUALITY_WEIGHT,
        reverse=True,
    )
    return [topic for topic, _ in kept]


class TrendDiscovery:
    """Collects candidates from live providers plus the evergreen catalogue."""

    def __init__(
        self,
        providers: Sequence[SignalProvider],
        *,
        include_evergreen: bool = True,
        min_quality: int | None = None,
    ) -> None:
        self.providers = list(providers)
        self.include_evergreen = include_evergreen
        self.min_quality = settings.trend_min_quality_score if min_quality is None else min_quality

    async def discover(self) -> list[CandidateTopic]:
        """Return deduplicated, quality-filtered candidates, best first.

        When every live provider fails or comes back empty, the evergreen
        catalogue and fallback topics stand in. Raises SignalUnavailableError
        only if nothing at all survives.
        """
        results = await asyncio.gather(
            *(provider.fetch_trends() for provider in self.providers),
            return_exceptions=True,
        )

        live: list[CandidateTopic] = []
        for provider, result in zip(self.providers, results):
            if isinstance(result, Exception):
                logger.warning(
                    "Trend signal provider failed",
                    extra={"provider": getattr(provider, "name", type(provider).__name__), "error": str(result)},
                )
                continue
            if isinstance(result, BaseException):
                raise result
            live.extend(result)

        if live:
            pool = [*live, *evergreen_topics()] if self.include_evergreen else live
        else:
            logger.warning(
                "No live trend signals, using evergreen catalogue",
                extra={"providers": len(self.providers)},
            )
            pool = [*evergreen_topics(), *fallback_topics()]

        merged = merge_topics(pool)
        ordered = order_by_value(merged, self.min_quality)
        if not ordered:
            raise SignalUnavailableError("all", "no candidate topics after filtering")

        logger.info(
            "Trend discovery complete",
            extra={"total": len(pool), "unique": len(merged), "kept": len(ordered)},
        )
        return ordered


def get_default_signal_providers() -> list[SignalProvider]:
    from blogwise.integrations.trend_signals import (
        CuratedKeywordSignalProvider,
        GoogleTrendsSignalProvider,
    )

    return [GoogleTrendsSignalProvider(), CuratedKeywordSignalProvider()]
