"""Unit tests for keyword normalization and overlap scoring."""

from blogwise.services.text_similarity import (
    keyword_query_tokens,
    normalize,
    overlap_similarity,
    tokenize,
)


def test_normalize_strips_spacing_and_punctuation() -> None:
    assert normalize("정부지원금 신청-방법!") == "정부지원금신청방법"
    assert normalize("Hello, World.") == "helloworld"
    assert normalize("") == ""


def test_tokenize_drops_short_tokens_and_symbols() -> None:
    assert tokenize("청년 월세 지원 (2025) a") == {"청년", "월세", "지원", "2025"}
    assert tokenize("") == set()


def test_overlap_uses_smaller_set() -> None:
    assert overlap_similarity({"청년", "월세"}, {"청년", "월세", "지원", "신청"}) == 1.0
    assert overlap_similarity({"a1", "b1"}, {"a1", "c1"}) == 0.5


def test_overlap_with_empty_set_is_zero() -> None:
    assert overlap_similarity(set(), {"청년"}) == 0.0
    assert overlap_similarity({"청년"}, []) == 0.0


def test_keyword_query_tokens_keep_order() -> None:
    assert keyword_query_tokens("청년 월세 a 지원") == ["청년", "월세", "지원"]


def test_overlap_of_set_with_itself_is_one() -> None:
    tokens = tokenize("청년 월세 지원 신청")

    assert overlap_similarity(tokens, tokens) == 1.0
    assert overlap_similarity({"청년"}, {"청년"}) == 1.0
