"""End-to-end content generation flow driven through the job tracker.

Stages per job:
- trends: discover and rank candidates (or analyse the manual keyword)
- benchmark: duplicate guard and related-link lookup for each pick
- generate: walk the picks in order, recording skips and writing, linking
  and storing the rest
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from blogwise.config import settings
from blogwise.core.exceptions import BlogwiseError, SignalUnavailableError
from blogwise.core.logging import job_log_context
from blogwise.services.article_text import (
    estimate_read_time,
    extract_excerpt,
    extract_title,
    slugify,
)
from blogwise.services.duplicate_guard import DuplicateContentGuard
from blogwise.services.generation_jobs import GenerationJobTracker, JobMode
from blogwise.services.internal_links import InternalLinkService, inject_links
from blogwise.services.prompt_builder import build_system_prompt, build_user_prompt, max_tokens_for
from blogwise.services.providers import ContentStore, GenerationProvider
from blogwise.services.revenue_ranker import RevenueRanker
from blogwise.services.trend_discovery import TrendDiscovery
from blogwise.services.types import (
    GenerationConstraints,
    InternalLink,
    KeywordAnalysis,
    NewContent,
)

logger = logging.getLogger(__name__)

KEYWORD_MODES: frozenset[str] = frozenset({"single", "manual"})
POOL_MULTIPLIER = 3
SEO_KEYWORD_COUNT = 5
RELATED_LINK_LIMIT = 5
PROMPT_TEMPLATE_NAME = "blog_article_v1"


@dataclass(frozen=True, slots=True)
class PipelineRequest:
    """Options for one pipeline run."""

    mode: JobMode
    keyword: str | None = None
    count: int = 3
    tone: str = field(default_factory=lambda: settings.generation_tone)
    word_count: int = field(default_factory=lambda: settings.generation_word_count)
    persona: str | None = None
    category_style: str | None = None

    def validate(self) -> None:
        if self.mode in KEYWORD_MODES and not (self.keyword or "").strip():
            raise ValueError(f"A keyword is required in {self.mode} mode")
        if self.count < 1:
            raise ValueError("count must be at least 1")


@dataclass(frozen=True, slots=True)
class GeneratedArticle:
    content_id: str
    title: str
    slug: str
    keyword: str
    revenue_potential: int


@dataclass(slots=True)
class _VettedTopic:
    analysis: KeywordAnalysis
    related_links: list[InternalLink]
    avoid_titles: list[str]
    skip_reason: str | None = None


def pick_weighted(
    pool: Sequence[KeywordAnalysis],
    count: int,
    rng: random.Random,
) -> list[KeywordAnalysis]:
    """Sample without replacement, favouring higher-ranked entries.

    Entry ``i`` of ``n`` remaining gets weight ``n - i``.
    """
    remaining = list(pool)
    picks: list[KeywordAnalysis] = []
    while remaining and len(picks) < count:
        weights = [len(remaining) - index for index in range(len(remaining))]
        (index,) = rng.choices(range(len(remaining)), weights=weights)
        picks.append(remaining.pop(index))
    return picks


class ContentPipeline:
    """Runs discovery, vetting, generation and storage for one job."""

    def __init__(
        self,
        *,
        tracker: GenerationJobTracker,
        store: ContentStore,
        generator: GenerationProvider,
        discovery: TrendDiscovery | None = None,
        ranker: RevenueRanker | None = None,
        guard: DuplicateContentGuard | None = None,
        links: InternalLinkService | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.tracker = tracker
        self.store = store
        self.generator = generator
        self.discovery = discovery
        self.ranker = ranker or RevenueRanker()
        self.guard = guard or DuplicateContentGuard(store)
        self.links = links or InternalLinkService(store)
        self.rng = rng or random.Random()

    def start_job(self, request: PipelineRequest) -> str:
        """Validate a request and register its job; raises ValueError on bad input."""
        request.validate()
        batch_total = request.count if request.mode == "batch" else 1
        return self.tracker.start(request.mode, keyword=request.keyword, batch_total=batch_total)

    async def run(self, job_id: str, request: PipelineRequest) -> list[GeneratedArticle]:
        """Drive a started job to a terminal stage; never raises."""
        try:
            with job_log_context(job_id, request.keyword):
                return await self._run(job_id, request)
        except Exception as e:
            logger.exception("Content pipeline crashed", extra={"job_id": job_id})
            self.tracker.record_error(job_id, f"Pipeline failed: {e}")
            self.tracker.finish(job_id, success=False)
            return []

    async def _run(self, job_id: str, request: PipelineRequest) -> list[GeneratedArticle]:
        picks = await self._select_topics(job_id, request)
        if not picks:
            self.tracker.finish(job_id, success=False)
            return []

        if not self.tracker.advance_stage(job_id, "benchmark", picks[0].keyword):
            return []
        vetted: list[_VettedTopic] = []
        for analysis in picks:
            if self._dismissed(job_id):
                return []
            with job_log_context(keyword=analysis.keyword):
                vetted.append(await self._vet(job_id, analysis))

        if not self.tracker.advance_stage(job_id, "generate", vetted[0].analysis.keyword):
            return []
        articles: list[GeneratedArticle] = []
        for position, topic in enumerate(vetted, start=1):
            if self._dismissed(job_id):
                logger.info("Job dismissed, stopping batch", extra={"job_id": job_id})
                return articles
            keyword = topic.analysis.keyword
            self.tracker.report_batch_progress(job_id, position, keyword)
            if topic.skip_reason is not None:
                self.tracker.record_result(job_id, topic.analysis.suggested_title, keyword, False)
                self.tracker.record_error(job_id, topic.skip_reason)
                continue
            with job_log_context(keyword=keyword):
                article = await self._generate(job_id, topic, request)
            if article is not None:
                articles.append(article)

        self.tracker.finish(job_id, success=bool(articles))
        return articles

    async def _select_topics(self, job_id: str, request: PipelineRequest) -> list[KeywordAnalysis]:
        if request.mode in KEYWORD_MODES:
            keyword = (request.keyword or "").strip()
            try:
                return [await self.ranker.analyze_keyword(keyword, trend_score=50)]
            except BlogwiseError as e:
                self.tracker.record_error(job_id, f"[{keyword}] keyword analysis failed: {e.message}")
                return []

        if self.discovery is None:
            self.tracker.record_error(job_id, "No trend signal providers configured")
            return []
        try:
            candidates = await self.discovery.discover()
        except SignalUnavailableError as e:
            self.tracker.record_error(job_id, e.message)
            return []

        ranked = await self.ranker.rank(candidates)
        if not ranked and candidates:
            logger.warning(
                "Every estimate failed, ranking with fallback estimates",
                extra={"job_id": job_id, "candidates": len(candidates)},
            )
            ranked = await RevenueRanker(self.ranker.fallback).rank(candidates)
        if not ranked:
            self.tracker.record_error(job_id, "No candidate topics could be ranked")
            return []

        pool = ranked[: request.count * POOL_MULTIPLIER]
        picks = pick_weighted(pool, request.count, self.rng)
        logger.info(
            "Selected topics for batch",
            extra={"job_id": job_id, "pool": len(pool), "picks": [p.keyword for p in picks]},
        )
        return picks

    async def _vet(self, job_id: str, analysis: KeywordAnalysis) -> _VettedTopic:
        keyword = analysis.keyword
        self.tracker.advance_stage(job_id, "benchmark", keyword)
        check = await self.guard.check(keyword, analysis.suggested_category)

        if check.recommendation == "skip":
            closest = check.similar_posts[0]
            return _VettedTopic(
                analysis=analysis,
                related_links=[],
                avoid_titles=[],
                skip_reason=(
                    f"[{keyword}] skipped: too similar to '{closest.title}' "
                    f"({closest.similarity:.2f})"
                ),
            )

        avoid_titles = (
            [post.title for post in check.similar_posts]
            if check.recommendation == "modify_angle"
            else []
        )
        related = await self.links.find_related(
            keyword,
            analysis.suggested_category,
            limit=RELATED_LINK_LIMIT,
        )
        return _VettedTopic(analysis=analysis, related_links=related, avoid_titles=avoid_titles)

    async def _generate(
        self,
        job_id: str,
        topic: _VettedTopic,
        request: PipelineRequest,
    ) -> GeneratedArticle | None:
        analysis = topic.analysis
        keyword = analysis.keyword
        system_prompt = build_system_prompt(
            keyword,
            word_count=request.word_count,
            tone=request.tone,
            persona=request.persona,
            category_style=request.category_style or analysis.suggested_category,
        )
        user_prompt = build_user_prompt(
            keyword,
            avoid_titles=topic.avoid_titles,
            related_keywords=analysis.long_tail_variants[:3],
        )
        constraints = GenerationConstraints(
            system_prompt=system_prompt,
            word_count=request.word_count,
            max_tokens=max_tokens_for(request.word_count),
        )

        try:
            output = await self.generator.generate(user_prompt, constraints)
            text = inject_links(output.text, topic.related_links)
            title = extract_title(text, analysis.suggested_title)
            slug = slugify(title)
            content_id = await self.store.insert_content(
                NewContent(
                    title=title,
                    slug=slug,
                    content=text,
                    excerpt=extract_excerpt(text),
                    read_time_minutes=estimate_read_time(text),
                    seo_title=title,
                    seo_description=f"{keyword}에 대한 완벽 가이드",
                    seo_keywords=list(analysis.long_tail_variants[:SEO_KEYWORD_COUNT]),
                    category_id=analysis.suggested_category,
                    ai_provider=output.provider,
                    ai_model=output.model,
                )
            )
        except Exception as e:
            message = e.message if isinstance(e, BlogwiseError) else str(e)
            logger.warning(
                "Topic generation failed",
                extra={"job_id": job_id, "keyword": keyword, "error": message},
            )
            self.tracker.record_result(job_id, analysis.suggested_title, keyword, False)
            self.tracker.record_error(job_id, f"[{keyword}] {message}")
            return None

        try:
            await self.store.log_generation(
                content_id=content_id,
                output=output,
                prompt_template=PROMPT_TEMPLATE_NAME,
                prompt_variables={
                    "keyword": keyword,
                    "tone": request.tone,
                    "word_count": request.word_count,
                    "persona": request.persona,
                    "category": analysis.suggested_category,
                },
            )
        except BlogwiseError as e:
            logger.warning(
                "Generation log write failed",
                extra={"job_id": job_id, "content_id": content_id, "error": e.message},
            )

        self.tracker.record_result(job_id, title, keyword, True)
        return GeneratedArticle(
            content_id=content_id,
            title=title,
            slug=slug,
            keyword=keyword,
            revenue_potential=analysis.revenue_potential,
        )

    def _dismissed(self, job_id: str) -> bool:
        job = self.tracker.get(job_id)
        return job is None or job.is_terminal
