"""Protocols for the external collaborators the pipeline depends on."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from blogwise.services.types import (
    CandidateTopic,
    GenerationConstraints,
    GenerationOutput,
    KeywordEstimate,
    NewContent,
    StoredContentSummary,
)


class SignalProvider(Protocol):
    """Supplies raw candidate topics; may raise on network or parse failure."""

    name: str

    async def fetch_trends(self) -> list[CandidateTopic]: ...


class KeywordEstimator(Protocol):
    """Supplies CPC, competition and volume signals for one candidate."""

    async def estimate(self, topic: CandidateTopic) -> KeywordEstimate: ...


class GenerationProvider(Protocol):
    """Turns a prompt into draft markdown plus usage metrics."""

    async def generate(
        self,
        prompt: str,
        constraints: GenerationConstraints,
    ) -> GenerationOutput: ...


class ContentStore(Protocol):
    """Query/update surface of the persistence collaborator."""

    async def query_summaries(
        self,
        *,
        statuses: Sequence[str],
        limit: int,
    ) -> list[StoredContentSummary]: ...

    async def insert_content(self, content: NewContent) -> str: ...

    async def update_status(self, content_id: str, status: str) -> bool: ...

    async def log_generation(
        self,
        *,
        content_id: str | None,
        output: GenerationOutput,
        prompt_template: str,
        prompt_variables: dict[str, Any],
        status: str = "completed",
    ) -> None: ...
