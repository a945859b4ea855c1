"""Unit tests for the generation provider, cost table and article helpers."""

from __future__ import annotations

from typing import Any

import pytest

from blogwise.agents.article_writer import ArticleDraft, ArticleWriterInput
from blogwise.agents.base_agent import AgentRunResult
from blogwise.core.exceptions import GenerationError
from blogwise.integrations.generation import AgentGenerationProvider, estimate_cost
from blogwise.services.article_text import (
    estimate_read_time,
    extract_excerpt,
    extract_title,
    slugify,
)
from blogwise.services.prompt_builder import build_system_prompt, build_user_prompt, max_tokens_for
from blogwise.services.types import GenerationConstraints


class _FakeAgent:
    def __init__(self, *, markdown: str = "", error: Exception | None = None) -> None:
        self.markdown = markdown
        self.error = error
        self.inputs: list[ArticleWriterInput] = []

    async def run(self, input_data: ArticleWriterInput) -> AgentRunResult[ArticleDraft]:
        self.inputs.append(input_data)
        if self.error is not None:
            raise self.error
        return AgentRunResult(
            output=ArticleDraft(markdown=self.markdown),
            input_tokens=1_000,
            output_tokens=2_000,
            duration_ms=850,
        )


def _provider(agent: _FakeAgent, monkeypatch: Any) -> AgentGenerationProvider:
    provider = AgentGenerationProvider(model="openai:gpt-4o-mini")
    monkeypatch.setattr(provider, "build_agent", lambda constraints: agent)
    return provider


def test_estimate_cost_matches_longest_model_key() -> None:
    assert estimate_cost("openai:gpt-4o-mini", 1_000_000, 0) == 0.15
    assert estimate_cost("gpt-4o", 1_000_000, 0) == 5.0
    assert estimate_cost("anthropic:claude-3-5-sonnet-20241022", 0, 1_000_000) == 15.0
    assert estimate_cost("unknown-model", 1_000, 1_000) == 0.0


@pytest.mark.asyncio
async def test_generate_returns_metrics(monkeypatch: Any) -> None:
    agent = _FakeAgent(markdown="  # 제목\n\n본문  ")
    provider = _provider(agent, monkeypatch)

    output = await provider.generate("프롬프트", GenerationConstraints(system_prompt="system"))

    assert output.text == "# 제목\n\n본문"
    assert output.input_tokens == 1_000
    assert output.output_tokens == 2_000
    assert output.latency_ms == 850
    assert output.model == "openai:gpt-4o-mini"
    assert output.provider == "pydantic-ai"
    assert output.cost_usd == estimate_cost("openai:gpt-4o-mini", 1_000, 2_000)
    assert agent.inputs[0].prompt == "프롬프트"


@pytest.mark.asyncio
async def test_generate_wraps_agent_failure(monkeypatch: Any) -> None:
    provider = _provider(_FakeAgent(error=RuntimeError("rate limited")), monkeypatch)

    with pytest.raises(GenerationError, match="rate limited"):
        await provider.generate("프롬프트", GenerationConstraints(system_prompt="system"))


@pytest.mark.asyncio
async def test_generate_rejects_empty_article(monkeypatch: Any) -> None:
    provider = _provider(_FakeAgent(markdown="   "), monkeypatch)

    with pytest.raises(GenerationError, match="empty article"):
        await provider.generate("프롬프트", GenerationConstraints(system_prompt="system"))


def test_build_agent_applies_constraints() -> None:
    provider = AgentGenerationProvider(model="openai:gpt-4o")

    agent = provider.build_agent(
        GenerationConstraints(system_prompt="당신은 작가입니다", temperature=0.5, max_tokens=6000)
    )

    assert agent.model_name == "openai:gpt-4o"
    assert agent.system_prompt == "당신은 작가입니다"
    assert agent._model_settings()["max_tokens"] == 6000
    assert agent._model_settings()["temperature"] == 0.5


def test_slugify_keeps_hangul_and_appends_suffix() -> None:
    assert slugify("청년 월세 지원, 총정리!", suffix=42) == "청년-월세-지원-총정리-42"
    assert slugify("!!!", suffix=7) == "7"


def test_extract_title_and_excerpt() -> None:
    markdown = "# 실업급여 완벽 가이드\n\n" + "가" * 250 + "\n\n## 섹션"

    assert extract_title(markdown, "대체 제목") == "실업급여 완벽 가이드"
    assert extract_title("본문만 있음", "대체 제목") == "대체 제목"
    excerpt = extract_excerpt(markdown)
    assert excerpt.endswith("...")
    assert len(excerpt) == 203


def test_read_time_has_floor_of_one_minute() -> None:
    assert estimate_read_time("짧은 글") == 1
    assert estimate_read_time("가" * 1500) == 3


def test_prompts_carry_keyword_and_constraints() -> None:
    system = build_system_prompt("청년 월세", word_count=3000, tone="professional", category_style="생활정보")
    user = build_user_prompt(
        "청년 월세",
        avoid_titles=["청년 월세 지원 가이드"],
        related_keywords=["청년 월세 신청"],
    )

    assert "청년 월세" in system
    assert "3000" in system
    assert "[생활정보 카테고리 가이드라인]" in system
    assert "청년 월세 지원 가이드" in user
    assert "청년 월세 신청" in user
    assert max_tokens_for(500) == 4096
    assert max_tokens_for(3000) == 9000
    assert max_tokens_for(10_000) == 16384
