"""Base class for Pydantic AI agents."""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, cast

from pydantic import BaseModel
from pydantic_ai import Agent

from blogwise.config import settings

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)


@dataclass(frozen=True, slots=True)
class AgentRunResult(Generic[OutputT]):
    """Structured output plus token usage of one agent run."""

    output: OutputT
    input_tokens: int
    output_tokens: int
    duration_ms: int


class BaseAgent(ABC, Generic[InputT, OutputT]):
    """Abstract base class for Pydantic AI agents.

    Subclasses define ``system_prompt``, ``output_type`` and ``_build_prompt``.
    """

    # Explicit model override at the class level
    model: str | None = None
    temperature: float = 0.7
    max_tokens: int | None = None
    max_retries: int = settings.llm_max_retries

    def __init__(self, model_override: str | None = None) -> None:
        """Resolve the model: runtime override, then class attribute, then settings."""
        self._model = model_override or self.model or settings.default_llm_model
        self._agent: Agent[None, OutputT] | None = None
        logger.info(
            "Agent initialized",
            extra={
                "agent": self.__class__.__name__,
                "model": self._model,
                "temperature": self.temperature,
            },
        )

    @property
    def model_name(self) -> str:
        return self._model

    @property
    def agent(self) -> Agent[None, OutputT]:
        """Lazily initialize and return the Pydantic AI agent."""
        if self._agent is None:
            self._agent = cast(
                Agent[None, OutputT],
                Agent(
                    model=self._model,
                    output_type=self.output_type,
                    system_prompt=self.system_prompt,
                    retries=self.max_retries,
                ),
            )
        return self._agent

    @property
    @abstractmethod
    def system_prompt(self) -> str:
        """System prompt for the agent."""

    @property
    @abstractmethod
    def output_type(self) -> type[OutputT]:
        """Pydantic model type for structured output."""

    @abstractmethod
    def _build_prompt(self, input_data: InputT) -> str:
        """Build the user prompt from input data."""

    def _model_settings(self) -> dict[str, Any]:
        model_settings: dict[str, Any] = {
            "temperature": self.temperature,
            "timeout": settings.llm_timeout_seconds,
        }
        if self.max_tokens is not None:
            model_settings["max_tokens"] = self.max_tokens
        return model_settings

    async def run(self, input_data: InputT) -> AgentRunResult[OutputT]:
        """Run the agent and return its output with usage figures."""
        agent_name = self.__class__.__name__
        prompt = self._build_prompt(input_data)
        logger.info(
            "Agent run started",
            extra={"agent": agent_name, "prompt_length": len(prompt), "model": self._model},
        )

        t0 = time.perf_counter()
        result = await self.agent.run(prompt, model_settings=self._model_settings())
        elapsed_ms = int((time.perf_counter() - t0) * 1000)

        usage = result.usage()
        logger.info(
            "Agent run completed",
            extra={
                "agent": agent_name,
                "duration_ms": elapsed_ms,
                "input_tokens": usage.input_tokens,
                "output_tokens": usage.output_tokens,
            },
        )
        return AgentRunResult(
            output=result.output,
            input_tokens=usage.input_tokens or 0,
            output_tokens=usage.output_tokens or 0,
            duration_ms=elapsed_ms,
        )
