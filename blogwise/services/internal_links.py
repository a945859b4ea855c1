"""Related-content lookup and markdown link injection."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Sequence

from blogwise.config import settings
from blogwise.services.providers import ContentStore
from blogwise.services.text_similarity import keyword_query_tokens
from blogwise.services.types import InternalLink, StoredContentSummary

logger = logging.getLogger(__name__)

TITLE_TOKEN_WEIGHT = 3
TITLE_PHRASE_WEIGHT = 3
KEYWORD_WEIGHT = 2
CATEGORY_WEIGHT = 1

HEADING_PATTERN = re.compile(r"^#{2,3}\s")


def score_relevance(
    row: StoredContentSummary,
    keyword: str,
    category_id: str | None,
) -> int:
    """Weighted keyword/title/category overlap between a query and a stored row."""
    phrase = keyword.lower()
    tokens = keyword_query_tokens(keyword)
    title = row.title.lower()

    score = sum(TITLE_TOKEN_WEIGHT for token in tokens if token in title)
    if phrase and phrase in title:
        score += TITLE_PHRASE_WEIGHT

    for stored_keyword in row.keywords or ():
        stored = stored_keyword.lower()
        if stored == phrase:
            score += KEYWORD_WEIGHT
        else:
            score += sum(KEYWORD_WEIGHT for token in tokens if token in stored)

    if category_id and row.category_id == category_id:
        score += CATEGORY_WEIGHT
    return score


class InternalLinkService:
    """Finds published content related to a keyword."""

    def __init__(self, store: ContentStore, *, scan_limit: int | None = None) -> None:
        self.store = store
        self.scan_limit = scan_limit or settings.internal_links_scan_limit

    async def find_related(
        self,
        keyword: str,
        category_id: str | None,
        exclude_slug: str | None = None,
        limit: int = 5,
    ) -> list[InternalLink]:
        """Return up to ``limit`` related rows, best first; [] on store errors."""
        try:
            rows = await self.store.query_summaries(statuses=("published",), limit=self.scan_limit)
        except Exception as e:
            logger.warning(
                "Related content lookup failed",
                extra={"keyword": keyword, "error": str(e)},
            )
            return []

        links: list[InternalLink] = []
        for row in rows:
            if exclude_slug is not None and row.slug == exclude_slug:
                continue
            score = score_relevance(row, keyword, category_id)
            if score > 0:
                links.append(
                    InternalLink(
                        content_id=row.id,
                        title=row.title,
                        slug=row.slug,
                        relevance_score=score,
                    )
                )

        links.sort(key=lambda link: link.relevance_score, reverse=True)
        return links[:limit]


def build_link_block(
    links: Sequence[InternalLink],
    *,
    label: str | None = None,
    path_prefix: str | None = None,
) -> str:
    label = label or settings.internal_links_label
    prefix = (path_prefix or settings.internal_links_path_prefix).rstrip("/")
    if len(links) == 1:
        link = links[0]
        return f"**{label}**: [{link.title}]({prefix}/{link.slug})"
    items = "\n".join(f"- [{link.title}]({prefix}/{link.slug})" for link in links)
    return f"**{label}**\n\n{items}"


def inject_links(
    markdown: str,
    links: Sequence[InternalLink],
    *,
    max_links: int | None = None,
    label: str | None = None,
    path_prefix: str | None = None,
) -> str:
    """Insert reference blocks between sections of a markdown document.

    With fewer than two ``##``/``###`` headings a single block of at most
    two links is appended. Otherwise one block goes midway through the
    second section and, when there is room, another just before the last
    heading.
    """
    if not links:
        return markdown

    if max_links is None:
        max_links = settings.internal_links_max_injected
    selected = list(links[: max(0, max_links)])
    if not selected:
        return markdown
    lines = markdown.split("\n")
    headings = [index for index, line in enumerate(lines) if HEADING_PATTERN.match(line)]

    if len(headings) < 2:
        block = build_link_block(selected[:2], label=label, path_prefix=path_prefix)
        return f"{markdown.rstrip()}\n\n{block}"

    section_end = headings[2] if len(headings) > 2 else len(lines)
    first_point = (headings[1] + section_end) // 2
    points = [first_point]
    if headings[-1] - 2 > first_point:
        points.append(headings[-1] - 1)

    chunk_size = math.ceil(len(selected) / len(points))
    chunks = [selected[i : i + chunk_size] for i in range(0, len(selected), chunk_size)]

    for index, position in sorted(enumerate(points), key=lambda pair: pair[1], reverse=True):
        chunk = chunks[index] if index < len(chunks) else chunks[-1]
        block = build_link_block(chunk, label=label, path_prefix=path_prefix)
        lines[position:position] = ["", block, ""]

    return "\n".join(lines)


async def find_related_links(
    store: ContentStore,
    keyword: str,
    category_id: str | None,
    exclude_slug: str | None = None,
    limit: int = 5,
) -> list[InternalLink]:
    return await InternalLinkService(store).find_related(keyword, category_id, exclude_slug, limit)
