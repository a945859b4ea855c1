"""Unit tests for related-content lookup and link injection."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from blogwise.services.internal_links import (
    InternalLinkService,
    build_link_block,
    inject_links,
    score_relevance,
)
from blogwise.services.types import InternalLink, StoredContentSummary


class _FakeStore:
    def __init__(self, rows: list[StoredContentSummary], *, fail: bool = False) -> None:
        self.rows = rows
        self.fail = fail
        self.statuses: list[tuple[str, ...]] = []

    async def query_summaries(
        self,
        *,
        statuses: Sequence[str],
        limit: int,
    ) -> list[StoredContentSummary]:
        self.statuses.append(tuple(statuses))
        if self.fail:
            raise RuntimeError("timeout")
        return self.rows[:limit]


ROWS = [
    StoredContentSummary(
        id="c1",
        title="청년 월세 지원 총정리",
        slug="youth-rent",
        keywords=("청년 월세",),
        category_id="정부지원",
    ),
    StoredContentSummary(id="c2", title="월세 계약 주의사항", slug="rent-contract"),
    StoredContentSummary(id="c3", title="주식 투자 입문", slug="stocks"),
]


def _links(count: int) -> list[InternalLink]:
    return [
        InternalLink(content_id=f"c{i}", title=f"관련 글 {i}", slug=f"post-{i}", relevance_score=10 - i)
        for i in range(count)
    ]


def test_score_relevance_weights() -> None:
    assert score_relevance(ROWS[0], "청년 월세", "정부지원") == 12
    assert score_relevance(ROWS[1], "청년 월세", "정부지원") == 3
    assert score_relevance(ROWS[2], "청년 월세", "정부지원") == 0


@pytest.mark.asyncio
async def test_find_related_orders_by_score_and_drops_zero() -> None:
    store = _FakeStore(ROWS)

    links = await InternalLinkService(store).find_related("청년 월세", "정부지원")

    assert [link.content_id for link in links] == ["c1", "c2"]
    assert store.statuses == [("published",)]


@pytest.mark.asyncio
async def test_find_related_excludes_current_slug() -> None:
    links = await InternalLinkService(_FakeStore(ROWS)).find_related(
        "청년 월세", "정부지원", exclude_slug="youth-rent"
    )

    assert [link.slug for link in links] == ["rent-contract"]


@pytest.mark.asyncio
async def test_find_related_respects_limit() -> None:
    links = await InternalLinkService(_FakeStore(ROWS)).find_related("청년 월세", None, limit=1)

    assert len(links) == 1


@pytest.mark.asyncio
async def test_find_related_returns_empty_on_store_error() -> None:
    links = await InternalLinkService(_FakeStore(ROWS, fail=True)).find_related("청년 월세", None)

    assert links == []


def test_inject_without_links_is_identity() -> None:
    markdown = "# 제목\n\n## 하나\n본문\n## 둘\n본문"

    assert inject_links(markdown, []) == markdown


def test_inject_appends_when_few_headings() -> None:
    markdown = "# 제목\n\n본문 한 줄\n\n"
    links = _links(3)

    result = inject_links(markdown, links, label="함께 보기", path_prefix="/blog")

    assert result.startswith("# 제목\n\n본문 한 줄\n\n")
    assert result.endswith("- [관련 글 1](/blog/post-1)")
    assert "관련 글 2" not in result


def test_inject_appends_with_one_section_heading() -> None:
    markdown = "# 제목\n\n도입\n## 하나\n본문 내용"

    result = inject_links(markdown, _links(3), label="함께 보기", path_prefix="/blog")

    assert result[: len(markdown)] == markdown
    assert result[len(markdown) :].startswith("\n\n**함께 보기**")
    assert result.count("**함께 보기**") == 1


def test_inject_with_zero_max_links_is_identity() -> None:
    markdown = "# 제목\n\n## 하나\na\n## 둘\nb\n## 셋\nc"

    assert inject_links(markdown, _links(3), max_links=0) == markdown


def test_single_link_block_is_inline() -> None:
    block = build_link_block(_links(1), label="함께 보기", path_prefix="/blog/")

    assert block == "**함께 보기**: [관련 글 0](/blog/post-0)"


def test_inject_places_two_blocks_between_sections() -> None:
    markdown = "\n".join(
        [
            "# 제목",
            "",
            "도입",
            "## 하나",
            "a",
            "b",
            "## 둘",
            "c",
            "d",
            "e",
            "f",
            "## 셋",
            "g",
            "h",
            "## 넷",
            "i",
        ]
    )

    result = inject_links(markdown, _links(4), label="함께 보기", path_prefix="/blog")

    assert result.count("**함께 보기**") == 2
    assert result.index("## 둘") < result.index("(/blog/post-0)") < result.index("## 셋")
    assert result.index("(/blog/post-1)") < result.index("## 셋")
    assert result.index("## 셋") < result.index("(/blog/post-2)") < result.index("## 넷")
    assert result.index("(/blog/post-3)") < result.index("## 넷")
    assert result.startswith("# 제목\n\n도입\n## 하나")


def test_inject_caps_link_count() -> None:
    markdown = "## 하나\na\nb\nc\n## 둘\nd\ne\nf\ng"

    result = inject_links(markdown, _links(6), max_links=2, label="함께 보기", path_prefix="/blog")

    assert "(/blog/post-1)" in result
    assert "(/blog/post-2)" not in result
