"""Unit tests for keyword-level heuristics."""

from datetime import date

from blogwise.services.keyword_catalog import DEFAULT_NICHE
from blogwise.services.keyword_signals import (
    classify_search_intent,
    detect_trend_category,
    estimate_competition,
    generate_long_tail_variants,
    is_low_value_keyword,
    keyword_bonus,
    keyword_quality,
    match_niche,
    suggest_title,
)


def test_match_niche_prefers_subcategory() -> None:
    niche = match_niche("주택담보대출 금리")

    assert niche.category == "금융"
    assert niche.cpc_range == (2.0, 6.0)
    assert niche.search_volume == "high"


def test_match_niche_falls_back_to_default() -> None:
    assert match_niche("zzz") is DEFAULT_NICHE


def test_search_intent_priority() -> None:
    assert classify_search_intent("국세청 홈페이지") == "navigational"
    assert classify_search_intent("실업급여 신청") == "transactional"
    assert classify_search_intent("노트북 추천") == "commercial"
    assert classify_search_intent("감기 원인") == "informational"


def test_competition_drops_for_specific_long_tail() -> None:
    assert estimate_competition("대출") == "high"
    assert estimate_competition("서울 청년 월세 지원 신청 방법") == "low"


def test_keyword_bonus_rewards_long_tail_phrasing() -> None:
    assert keyword_bonus("") == 1.0
    assert keyword_bonus("대출") == 1.0
    assert keyword_bonus("신용대출 금리 비교") > keyword_bonus("신용대출")


def test_suggest_title_is_deterministic_and_has_keyword() -> None:
    first = suggest_title("청년 월세", "정부지원")

    assert first == suggest_title("청년 월세", "정부지원")
    assert "청년 월세" in first
    assert "청년 월세" in suggest_title("청년 월세", "없는 카테고리")


def test_long_tail_variants_are_unique_and_capped() -> None:
    variants = generate_long_tail_variants("대출", today=date(2025, 1, 1))

    assert len(variants) == 12
    assert len(set(variants)) == 12
    assert "대출" not in variants
    assert variants[0] == "대출 방법"


def test_low_value_keywords() -> None:
    assert is_low_value_keyword("오늘 날씨")
    assert is_low_value_keyword("비 오는 날")
    assert is_low_value_keyword("ab")
    assert not is_low_value_keyword("아이폰 가격 비교")
    assert not is_low_value_keyword("눈썹 문신 가격")


def test_trend_category_and_quality() -> None:
    assert detect_trend_category("실업급여 신청 방법") == "정부지원"
    assert detect_trend_category("zzz") is None
    assert keyword_quality("실업급여 신청 방법") == 100
    assert keyword_quality("오늘 날씨") == 0
