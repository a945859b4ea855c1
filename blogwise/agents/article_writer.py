"""Article writer agent producing a markdown blog post."""

from __future__ import annotations

from pydantic import BaseModel, Field

from blogwise.agents.base_agent import BaseAgent


class ArticleWriterInput(BaseModel):
    """User-side prompt for one article."""

    prompt: str


class ArticleDraft(BaseModel):
    """Generated article."""

    markdown: str = Field(description="Full article in markdown, starting with a single h1 title")


class ArticleWriterAgent(BaseAgent[ArticleWriterInput, ArticleDraft]):
    """Writes one long-form article for a keyword.

    The system prompt is built per article (persona, tone and category
    guidelines depend on the keyword), so one agent instance serves one
    article.
    """

    def __init__(
        self,
        system_prompt: str,
        *,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        model_override: str | None = None,
    ) -> None:
        self._system_prompt = system_prompt
        self.temperature = temperature
        self.max_tokens = max_tokens
        super().__init__(model_override=model_override)

    @property
    def system_prompt(self) -> str:
        return self._system_prompt

    @property
    def output_type(self) -> type[ArticleDraft]:
        return ArticleDraft

    def _build_prompt(self, input_data: ArticleWriterInput) -> str:
        return input_data.prompt
