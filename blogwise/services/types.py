"""Value types shared by the ranking, guard, linking and generation services."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

SignalSource = Literal["google", "naver", "daum", "evergreen", "manual"]
KeywordType = Literal["trending", "evergreen", "seasonal"]
CompetitionLevel = Literal["low", "medium", "high"]
SearchVolume = Literal["low", "medium", "high", "very_high"]
SearchIntent = Literal["informational", "commercial", "transactional", "navigational"]
Recommendation = Literal["skip", "proceed", "modify_angle"]


@dataclass(frozen=True, slots=True)
class CandidateTopic:
    """A keyword surfaced by a trend signal, not yet vetted or written."""

    keyword: str
    source: SignalSource
    category: str
    trend_score: float
    related_keywords: tuple[str, ...] = ()
    fetched_at: datetime | None = None
    keyword_type: KeywordType | None = None
    reason: str | None = None


@dataclass(frozen=True, slots=True)
class KeywordEstimate:
    """Commercial signals an estimation provider returns for one keyword."""

    cpc_range: tuple[float, float]
    competition_level: CompetitionLevel
    search_volume: SearchVolume
    category: str
    search_intent: SearchIntent = "informational"


@dataclass(frozen=True, slots=True)
class KeywordAnalysis:
    """Ranked, monetization-scored view of a candidate topic."""

    keyword: str
    estimated_cpc: float
    competition_level: CompetitionLevel
    search_volume_estimate: SearchVolume
    revenue_potential: int
    suggested_title: str
    suggested_category: str
    long_tail_variants: tuple[str, ...]
    search_intent: SearchIntent
    trend_score: float


@dataclass(frozen=True, slots=True)
class SimilarPost:
    """A stored row that overlaps a candidate keyword."""

    id: str
    title: str
    slug: str
    similarity: float


@dataclass(frozen=True, slots=True)
class DuplicateCheckResult:
    """Go / no-go / modify decision for a candidate keyword."""

    is_duplicate: bool
    similar_posts: tuple[SimilarPost, ...]
    recommendation: Recommendation

    @classmethod
    def fail_open(cls) -> DuplicateCheckResult:
        return cls(is_duplicate=False, similar_posts=(), recommendation="proceed")


@dataclass(frozen=True, slots=True)
class StoredContentSummary:
    """Read-only projection of a content store row."""

    id: str
    title: str
    slug: str
    keywords: tuple[str, ...] | None = None
    category_id: str | None = None


@dataclass(frozen=True, slots=True)
class InternalLink:
    """A scored cross-reference to existing content."""

    content_id: str
    title: str
    slug: str
    relevance_score: int


@dataclass(frozen=True, slots=True)
class GenerationConstraints:
    """Knobs the pipeline hands to the generation provider."""

    system_prompt: str
    word_count: int = 2500
    temperature: float = 0.7
    max_tokens: int = 8192


@dataclass(frozen=True, slots=True)
class GenerationOutput:
    """Text plus token/cost metrics from the generation provider."""

    text: str
    input_tokens: int
    output_tokens: int
    cost_usd: float
    latency_ms: int
    model: str
    provider: str = "pydantic-ai"


@dataclass(slots=True)
class NewContent:
    """Row payload handed to the content store for insertion."""

    title: str
    slug: str
    content: str
    excerpt: str
    read_time_minutes: int
    seo_title: str
    seo_description: str
    seo_keywords: list[str] = field(default_factory=list)
    category_id: str | None = None
    status: str = "draft"
    ai_provider: str | None = None
    ai_model: str | None = None
