"""Keyword ranking and duplicate-check schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from blogwise.services.types import CandidateTopic


class CandidateTopicRequest(BaseModel):
    """A candidate keyword supplied by the caller."""

    keyword: str = Field(min_length=1, max_length=200)
    source: Literal["google", "naver", "daum", "evergreen", "manual"] = "manual"
    category: str = "생활정보"
    trend_score: float = Field(default=50, ge=0, le=100)
    related_keywords: list[str] = Field(default_factory=list)
    fetched_at: datetime | None = None
    keyword_type: Literal["trending", "evergreen", "seasonal"] | None = None
    reason: str | None = None

    def to_topic(self) -> CandidateTopic:
        return CandidateTopic(
            keyword=self.keyword,
            source=self.source,
            category=self.category,
            trend_score=self.trend_score,
            related_keywords=tuple(self.related_keywords),
            fetched_at=self.fetched_at,
            keyword_type=self.keyword_type,
            reason=self.reason,
        )


class RankKeywordsRequest(BaseModel):
    candidates: list[CandidateTopicRequest] = Field(min_length=1, max_length=100)


class KeywordAnalysisResponse(BaseModel):
    """Schema for a ranked keyword."""

    model_config = ConfigDict(from_attributes=True)

    keyword: str
    estimated_cpc: float
    competition_level: str
    search_volume_estimate: str
    revenue_potential: int
    suggested_title: str
    suggested_category: str
    long_tail_variants: list[str]
    search_intent: str
    trend_score: float


class RankKeywordsResponse(BaseModel):
    items: list[KeywordAnalysisResponse]
    total: int


class DuplicateCheckRequest(BaseModel):
    keyword: str = Field(min_length=1, max_length=200)
    category: str | None = None


class SimilarPostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    slug: str
    similarity: float


class DuplicateCheckResponse(BaseModel):
    """Schema for a duplicate-content decision."""

    model_config = ConfigDict(from_attributes=True)

    is_duplicate: bool
    similar_posts: list[SimilarPostResponse]
    recommendation: str
