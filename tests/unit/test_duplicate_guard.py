"""Unit tests for the duplicate-content guard."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from blogwise.services.duplicate_guard import GUARDED_STATUSES, DuplicateContentGuard
from blogwise.services.types import StoredContentSummary


class _FakeStore:
    def __init__(self, rows: list[StoredContentSummary], *, fail: bool = False) -> None:
        self.rows = rows
        self.fail = fail
        self.calls: list[tuple[tuple[str, ...], int]] = []

    async def query_summaries(
        self,
        *,
        statuses: Sequence[str],
        limit: int,
    ) -> list[StoredContentSummary]:
        self.calls.append((tuple(statuses), limit))
        if self.fail:
            raise RuntimeError("connection refused")
        return self.rows[:limit]


def _rows() -> list[StoredContentSummary]:
    return [
        StoredContentSummary(
            id="c1",
            title="정부지원금 신청방법 총정리",
            slug="gov-support",
            keywords=("정부지원금 신청방법",),
            category_id="정부지원",
        ),
        StoredContentSummary(
            id="c2",
            title="청년 월세 지원 가이드",
            slug="youth-rent",
            keywords=("청년 월세 지원 제도",),
            category_id="정부지원",
        ),
    ]


@pytest.mark.asyncio
async def test_exact_keyword_match_is_skipped() -> None:
    guard = DuplicateContentGuard(_FakeStore(_rows()))

    result = await guard.check("정부지원금 신청방법")

    assert result.is_duplicate
    assert result.recommendation == "skip"
    assert result.similar_posts[0].id == "c1"
    assert result.similar_posts[0].similarity == 1.0


@pytest.mark.asyncio
async def test_unrelated_keyword_proceeds() -> None:
    guard = DuplicateContentGuard(_FakeStore(_rows()))

    result = await guard.check("완전히 새로운 주제")

    assert not result.is_duplicate
    assert result.recommendation == "proceed"
    assert result.similar_posts == ()


@pytest.mark.asyncio
async def test_partial_overlap_recommends_new_angle() -> None:
    guard = DuplicateContentGuard(_FakeStore(_rows()))

    result = await guard.check("청년 월세 대출")

    assert not result.is_duplicate
    assert result.recommendation == "modify_angle"
    assert [post.id for post in result.similar_posts] == ["c2"]
    assert result.similar_posts[0].similarity == 0.67


@pytest.mark.asyncio
async def test_same_category_adds_bonus() -> None:
    guard = DuplicateContentGuard(_FakeStore(_rows()))

    result = await guard.check("청년 월세 대출", category="정부지원")

    assert result.similar_posts[0].similarity == 0.77
    assert result.recommendation == "modify_angle"


@pytest.mark.asyncio
async def test_title_containment_scores_high() -> None:
    rows = [StoredContentSummary(id="c9", title="전세 계약 갱신권 정리", slug="jeonse")]
    guard = DuplicateContentGuard(_FakeStore(rows))

    result = await guard.check("전세 계약")

    assert result.similar_posts[0].similarity == 0.9
    assert result.recommendation == "skip"


@pytest.mark.asyncio
async def test_store_failure_fails_open() -> None:
    guard = DuplicateContentGuard(_FakeStore(_rows(), fail=True))

    result = await guard.check("정부지원금 신청방법")

    assert not result.is_duplicate
    assert result.recommendation == "proceed"
    assert result.similar_posts == ()


@pytest.mark.asyncio
async def test_scan_uses_guarded_statuses_and_limit() -> None:
    store = _FakeStore(_rows())
    guard = DuplicateContentGuard(store, scan_limit=1)

    await guard.check("아무 키워드")

    assert store.calls == [(GUARDED_STATUSES, 1)]


@pytest.mark.asyncio
async def test_similar_posts_are_capped_and_sorted() -> None:
    rows = [
        StoredContentSummary(
            id=f"c{index}",
            title=f"실업급여 신청 {index}",
            slug=f"s{index}",
            keywords=("실업급여 신청",) if index == 3 else None,
        )
        for index in range(8)
    ]
    guard = DuplicateContentGuard(_FakeStore(rows), max_similar_posts=5)

    result = await guard.check("실업급여 신청")

    assert len(result.similar_posts) == 5
    assert result.similar_posts[0].id == "c3"
    similarities = [post.similarity for post in result.similar_posts]
    assert similarities == sorted(similarities, reverse=True)
