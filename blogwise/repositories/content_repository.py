"""Content store backed by the content_posts and generation_logs tables."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from contextlib import AbstractAsyncContextManager
from typing import Any, TypeVar

from sqlalchemy import select, update
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blogwise.core.database import get_session_context
from blogwise.core.exceptions import ContentStoreError
from blogwise.models.content import CONTENT_STATUSES, ContentPost, GenerationLog
from blogwise.services.types import GenerationOutput, NewContent, StoredContentSummary

logger = logging.getLogger(__name__)

_ResultT = TypeVar("_ResultT")

SessionFactory = Callable[..., AbstractAsyncContextManager[AsyncSession]]


def is_transient_connection_error(exc: Exception) -> bool:
    """True when an exception likely came from a dropped DB connection."""
    if isinstance(exc, (InterfaceError, OperationalError)):
        return True
    return isinstance(exc, DBAPIError) and exc.connection_invalidated


class ContentRepository:
    """Reads summaries and writes generated content via short-lived sessions."""

    def __init__(
        self,
        *,
        session_factory: SessionFactory = get_session_context,
        attempts: int = 3,
        base_delay_seconds: float = 0.2,
    ) -> None:
        self.session_factory = session_factory
        self.attempts = max(1, attempts)
        self.base_delay_seconds = base_delay_seconds

    async def _with_retry(
        self,
        operation: Callable[[], Awaitable[_ResultT]],
        *,
        operation_name: str,
    ) -> _ResultT:
        for attempt in range(1, self.attempts + 1):
            try:
                return await operation()
            except SQLAlchemyError as exc:
                if not is_transient_connection_error(exc) or attempt == self.attempts:
                    raise ContentStoreError(
                        f"Content store {operation_name} failed: {exc}",
                        {"operation": operation_name, "attempt": attempt},
                    ) from exc
                logger.warning(
                    "Transient database connection error; retrying",
                    extra={"operation": operation_name, "attempt": attempt},
                )
                await asyncio.sleep(self.base_delay_seconds * attempt)
        raise RuntimeError(f"Retry loop exhausted unexpectedly for operation: {operation_name}")

    async def query_summaries(
        self,
        *,
        statuses: Sequence[str],
        limit: int,
    ) -> list[StoredContentSummary]:
        async def _query() -> list[StoredContentSummary]:
            async with self.session_factory(commit_on_exit=False) as session:
                result = await session.execute(
                    select(
                        ContentPost.id,
                        ContentPost.title,
                        ContentPost.slug,
                        ContentPost.seo_keywords,
                        ContentPost.category_id,
                    )
                    .where(ContentPost.status.in_(list(statuses)))
                    .order_by(ContentPost.created_at.desc())
                    .limit(limit)
                )
                return [
                    StoredContentSummary(
                        id=row.id,
                        title=row.title,
                        slug=row.slug,
                        keywords=tuple(row.seo_keywords) if row.seo_keywords is not None else None,
                        category_id=row.category_id,
                    )
                    for row in result
                ]

        return await self._with_retry(_query, operation_name="query_summaries")

    async def insert_content(self, content: NewContent) -> str:
        if content.status not in CONTENT_STATUSES:
            raise ContentStoreError(f"Unknown content status: {content.status}")

        async def _insert() -> str:
            async with self.session_factory() as session:
                post = ContentPost(
                    title=content.title,
                    slug=content.slug,
                    content=content.content,
                    excerpt=content.excerpt,
                    read_time_minutes=content.read_time_minutes,
                    status=content.status,
                    seo_title=content.seo_title,
                    seo_description=content.seo_description,
                    seo_keywords=list(content.seo_keywords),
                    category_id=content.category_id,
                    ai_provider=content.ai_provider,
                    ai_model=content.ai_model,
                )
                session.add(post)
                await session.flush()
                return post.id

        content_id = await self._with_retry(_insert, operation_name="insert_content")
        logger.info("Content stored", extra={"content_id": content_id, "slug": content.slug})
        return content_id

    async def update_status(self, content_id: str, status: str) -> bool:
        if status not in CONTENT_STATUSES:
            raise ContentStoreError(f"Unknown content status: {status}")

        async def _update() -> bool:
            async with self.session_factory() as session:
                result = await session.execute(
                    update(ContentPost).where(ContentPost.id == content_id).values(status=status)
                )
                return bool(result.rowcount)

        return await self._with_retry(_update, operation_name="update_status")

    async def log_generation(
        self,
        *,
        content_id: str | None,
        output: GenerationOutput,
        prompt_template: str,
        prompt_variables: dict[str, Any],
        status: str = "completed",
    ) -> None:
        async def _log() -> None:
            async with self.session_factory() as session:
                session.add(
                    GenerationLog(
                        post_id=content_id,
                        provider=output.provider,
                        model=output.model,
                        prompt_template=prompt_template,
                        prompt_variables=prompt_variables,
                        input_tokens=output.input_tokens,
                        output_tokens=output.output_tokens,
                        cost_usd=output.cost_usd,
                        generation_time_ms=output.latency_ms,
                        status=status,
                    )
                )

        await self._with_retry(_log, operation_name="log_generation")
