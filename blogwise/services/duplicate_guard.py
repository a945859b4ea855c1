"""Duplicate-content guard for candidate keywords."""

from __future__ import annotations

import logging

from blogwise.config import settings
from blogwise.services.providers import ContentStore
from blogwise.services.text_similarity import normalize, overlap_similarity, tokenize
from blogwise.services.types import DuplicateCheckResult, SimilarPost, StoredContentSummary

logger = logging.getLogger(__name__)

GUARDED_STATUSES = ("published", "draft", "scheduled")
TITLE_CONTAINMENT_SIMILARITY = 0.9


class DuplicateContentGuard:
    """Decides whether a keyword is already covered by stored content.

    Each stored row is scored by its strongest signal:
    - a stored keyword equal to the candidate after normalization (1.0),
      otherwise token overlap with that keyword;
    - the title containing the keyword or vice versa (0.9), otherwise
      token overlap with the title.
    Rows in the same category get a small bonus once they are already
    somewhat similar.
    """

    def __init__(
        self,
        store: ContentStore,
        *,
        scan_limit: int | None = None,
        skip_threshold: float | None = None,
        modify_threshold: float | None = None,
        category_bonus: float | None = None,
        category_bonus_floor: float | None = None,
        max_similar_posts: int | None = None,
    ) -> None:
        self.store = store
        self.scan_limit = scan_limit or settings.duplicate_scan_limit
        self.skip_threshold = (
            settings.duplicate_skip_threshold if skip_threshold is None else skip_threshold
        )
        self.modify_threshold = (
            settings.duplicate_modify_threshold if modify_threshold is None else modify_threshold
        )
        self.category_bonus = (
            settings.duplicate_category_bonus if category_bonus is None else category_bonus
        )
        self.category_bonus_floor = (
            settings.duplicate_category_bonus_floor
            if category_bonus_floor is None
            else category_bonus_floor
        )
        self.max_similar_posts = max_similar_posts or settings.duplicate_max_similar_posts

    def score_row(
        self,
        row: StoredContentSummary,
        normalized_keyword: str,
        keyword_tokens: set[str],
        category: str | None,
    ) -> float:
        similarity = 0.0

        for stored_keyword in row.keywords or ():
            if normalized_keyword and normalize(stored_keyword) == normalized_keyword:
                similarity = max(similarity, 1.0)
            else:
                similarity = max(
                    similarity, overlap_similarity(keyword_tokens, tokenize(stored_keyword))
                )

        title = normalize(row.title)
        # An empty string would be "contained" in anything.
        if title and normalized_keyword and (normalized_keyword in title or title in normalized_keyword):
            similarity = max(similarity, TITLE_CONTAINMENT_SIMILARITY)
        else:
            similarity = max(similarity, overlap_similarity(keyword_tokens, tokenize(row.title)))

        if category and row.category_id == category and similarity > self.category_bonus_floor:
            similarity = min(1.0, similarity + self.category_bonus)

        return similarity

    async def check(self, keyword: str, category: str | None = None) -> DuplicateCheckResult:
        """Compare a keyword against stored content; fails open on store errors."""
        try:
            rows = await self.store.query_summaries(
                statuses=GUARDED_STATUSES,
                limit=self.scan_limit,
            )
        except Exception as e:
            logger.warning(
                "Duplicate check failed, proceeding",
                extra={"keyword": keyword, "error": str(e)},
            )
            return DuplicateCheckResult.fail_open()

        normalized_keyword = normalize(keyword)
        keyword_tokens = tokenize(keyword)

        similar: list[SimilarPost] = []
        for row in rows:
            similarity = self.score_row(row, normalized_keyword, keyword_tokens, category)
            if similarity >= self.modify_threshold:
                similar.append(
                    SimilarPost(
                        id=row.id,
                        title=row.title,
                        slug=row.slug,
                        similarity=round(similarity, 2),
                    )
                )

        similar.sort(key=lambda post: post.similarity, reverse=True)
        top = tuple(similar[: self.max_similar_posts])
        highest = top[0].similarity if top else 0.0

        if highest >= self.skip_threshold:
            result = DuplicateCheckResult(is_duplicate=True, similar_posts=top, recommendation="skip")
        elif highest >= self.modify_threshold:
            result = DuplicateCheckResult(
                is_duplicate=False, similar_posts=top, recommendation="modify_angle"
            )
        else:
            result = DuplicateCheckResult(is_duplicate=False, similar_posts=top, recommendation="proceed")

        logger.info(
            "Duplicate check complete",
            extra={
                "keyword": keyword,
                "scanned": len(rows),
                "similar": len(top),
                "recommendation": result.recommendation,
            },
        )
        return result


async def check_duplicate(
    store: ContentStore,
    keyword: str,
    category: str | None = None,
) -> DuplicateCheckResult:
    return await DuplicateContentGuard(store).check(keyword, category)
