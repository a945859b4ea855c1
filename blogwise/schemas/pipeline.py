"""Pipeline schemas."""

from typing import Literal

from pydantic import BaseModel, Field

from blogwise.config import settings
from blogwise.services.content_pipeline import PipelineRequest

Tone = Literal["professional", "casual", "educational", "informative"]


class PipelineRunRequest(BaseModel):
    """Schema for starting a generation job."""

    mode: Literal["single", "manual", "batch"] = "batch"
    keyword: str | None = Field(default=None, max_length=200)
    count: int = Field(default=3, ge=1, le=10, description="Topics to write in batch mode")
    tone: Tone = settings.generation_tone
    word_count: int = Field(default=settings.generation_word_count, ge=500, le=10_000)
    persona: str | None = Field(default=None, max_length=200)
    category_style: str | None = Field(default=None, max_length=50)

    def to_request(self) -> PipelineRequest:
        return PipelineRequest(
            mode=self.mode,
            keyword=self.keyword.strip() if self.keyword else None,
            count=self.count,
            tone=self.tone,
            word_count=self.word_count,
            persona=self.persona,
            category_style=self.category_style,
        )


class PipelineRunResponse(BaseModel):
    """Schema for an accepted generation job."""

    job_id: str
    mode: str
    status: str = "accepted"
