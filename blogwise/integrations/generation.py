"""Text-generation provider backed by the pydantic-ai article writer."""

import logging

from blogwise.agents.article_writer import ArticleWriterAgent, ArticleWriterInput
from blogwise.config import settings
from blogwise.core.exceptions import GenerationError
from blogwise.services.types import GenerationConstraints, GenerationOutput

logger = logging.getLogger(__name__)

# USD per token (input, output).
MODEL_PRICING: dict[str, tuple[float, float]] = {
    "gpt-4o": (5e-6, 15e-6),
    "gpt-4o-mini": (1.5e-7, 6e-7),
    "claude-3-5-sonnet": (3e-6, 15e-6),
    "claude-3-haiku": (2.5e-7, 1.25e-6),
    "gemini-1.5-pro": (1e-6, 4e-6),
    "gemini-1.5-flash": (7.5e-8, 3e-7),
    "moonshot-v1-128k": (6e-7, 6e-7),
    "moonshot-v1-32k": (2e-7, 2e-7),
}


def estimate_cost(model: str, input_tokens: int, output_tokens: int) -> float:
    """Price a run from the per-model table; unknown models cost 0.

    ``model`` may carry a provider prefix (``openai:gpt-4o``) or a dated
    suffix (``claude-3-5-sonnet-20241022``).
    """
    name = model.split(":", 1)[-1]
    # Longest key first so gpt-4o-mini is not priced as gpt-4o.
    for key in sorted(MODEL_PRICING, key=len, reverse=True):
        if name == key or name.startswith(f"{key}-"):
            input_price, output_price = MODEL_PRICING[key]
            return round(input_tokens * input_price + output_tokens * output_price, 6)
    return 0.0


class AgentGenerationProvider:
    """Runs one ArticleWriterAgent per prompt."""

    provider_name = "pydantic-ai"

    def __init__(self, model: str | None = None) -> None:
        self.model = model or settings.default_llm_model

    def build_agent(self, constraints: GenerationConstraints) -> ArticleWriterAgent:
        return ArticleWriterAgent(
            constraints.system_prompt,
            temperature=constraints.temperature,
            max_tokens=constraints.max_tokens,
            model_override=self.model,
        )

    async def generate(self, prompt: str, constraints: GenerationConstraints) -> GenerationOutput:
        agent = self.build_agent(constraints)
        try:
            run = await agent.run(ArticleWriterInput(prompt=prompt))
        except Exception as e:
            logger.warning(
                "Article generation failed",
                extra={"model": self.model, "error": str(e)},
            )
            raise GenerationError(prompt[:80], str(e)) from e

        text = run.output.markdown.strip()
        if not text:
            raise GenerationError(prompt[:80], "empty article returned")

        return GenerationOutput(
            text=text,
            input_tokens=run.input_tokens,
            output_tokens=run.output_tokens,
            cost_usd=estimate_cost(self.model, run.input_tokens, run.output_tokens),
            latency_ms=run.duration_ms,
            model=self.model,
            provider=self.provider_name,
        )
