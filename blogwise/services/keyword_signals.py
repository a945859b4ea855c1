"""Keyword-level signals: niche, intent, competition and derived variants."""

from __future__ import annotations

import re
from datetime import date

from blogwise.services.keyword_catalog import (
    ACTION_WORDS,
    COMMERCIAL_SIGNALS,
    COMPARISON_SIGNALS,
    COMPETITION_COMPARISON_SIGNALS,
    COMPETITION_TUTORIAL_SIGNALS,
    DEFAULT_NICHE,
    HIGH_CPC_CATEGORIES,
    LONG_TAIL_PREFIXES,
    LONG_TAIL_SUFFIXES,
    LOW_VALUE_PATTERNS,
    LOW_VALUE_WORDS,
    NAVIGATIONAL_SIGNALS,
    NICHE_CONFIGS,
    QUALITY_ACTION_WORDS,
    REGION_MARKERS,
    SPECIFICITY_MARKERS,
    SUBCATEGORY_CONFIGS,
    TITLE_TEMPLATES,
    TRANSACTIONAL_SIGNALS,
    TREND_CATEGORY_KEYWORDS,
    TUTORIAL_SIGNALS,
    NicheConfig,
)
from blogwise.services.types import CompetitionLevel, SearchIntent

YEAR_PATTERN = re.compile(r"20\d{2}")
AMOUNT_PATTERN = re.compile(r"\d+(만원|억|천만|백만|원)")
MAX_LONG_TAIL_VARIANTS = 12


def match_niche(keyword: str) -> NicheConfig:
    """Return the first subcategory, then broad niche, whose pattern occurs in the keyword."""
    lowered = keyword.lower()
    for config in (*SUBCATEGORY_CONFIGS, *NICHE_CONFIGS):
        if any(pattern.lower() in lowered for pattern in config.patterns):
            return config
    return DEFAULT_NICHE


def classify_search_intent(keyword: str) -> SearchIntent:
    """Classify intent; navigational > transactional > commercial > informational."""
    lowered = keyword.lower()
    if any(signal in lowered for signal in NAVIGATIONAL_SIGNALS):
        return "navigational"
    if any(signal in lowered for signal in TRANSACTIONAL_SIGNALS):
        return "transactional"
    if any(signal in lowered for signal in COMMERCIAL_SIGNALS):
        return "commercial"
    return "informational"


def has_action_intent(keyword: str) -> bool:
    """True for keywords carrying a how-to / apply / compare style action word."""
    return any(word in keyword for word in ACTION_WORDS)


def has_specificity_markers(keyword: str) -> bool:
    """True when the keyword names a year, amount, region or qualifier."""
    if YEAR_PATTERN.search(keyword) or AMOUNT_PATTERN.search(keyword):
        return True
    if any(region in keyword for region in REGION_MARKERS):
        return True
    lowered = keyword.lower()
    return any(marker.lower() in lowered for marker in SPECIFICITY_MARKERS)


def estimate_competition(keyword: str) -> CompetitionLevel:
    """Estimate ranking competition; longer and more specific keywords compete less."""
    length = len(re.sub(r"\s", "", keyword))
    word_count = len(keyword.split())
    lowered = keyword.lower()

    score = 3
    if word_count >= 3 or length >= 10:
        score -= 2
    elif word_count >= 2 or length >= 7:
        score -= 1

    if has_specificity_markers(keyword):
        score -= 1
    if any(signal in lowered for signal in COMPETITION_COMPARISON_SIGNALS):
        score -= 1
    if any(signal in keyword for signal in COMPETITION_TUTORIAL_SIGNALS):
        score -= 1

    if score <= 1:
        return "low"
    if score == 2:
        return "medium"
    return "high"


def keyword_bonus(keyword: str) -> float:
    """Multiplicative bonus (>= 1.0) for SEO-friendly long-tail phrasing."""
    bonus = 1.0
    if not keyword:
        return bonus
    if has_action_intent(keyword):
        bonus += 0.3
    word_count = len(keyword.split())
    if word_count >= 4:
        bonus += 0.2
    elif word_count >= 3:
        bonus += 0.1
    if has_specificity_markers(keyword):
        bonus += 0.1
    if any(signal in keyword.lower() for signal in COMPARISON_SIGNALS):
        bonus += 0.1
    if any(signal in keyword for signal in TUTORIAL_SIGNALS):
        bonus += 0.05
    return bonus


def suggest_title(keyword: str, category: str) -> str:
    """Pick a category title template deterministically from the keyword."""
    templates = TITLE_TEMPLATES.get(category) or TITLE_TEMPLATES["생활정보"]
    index = sum(ord(char) for char in keyword) % len(templates)
    return templates[index].replace("{keyword}", keyword)


def generate_long_tail_variants(keyword: str, *, today: date | None = None) -> list[str]:
    """Suffix/prefix variants of a keyword, deduplicated, the keyword itself excluded."""
    year = (today or date.today()).year
    variants: list[str] = []
    candidates = [
        *(f"{keyword} {suffix}" for suffix in LONG_TAIL_SUFFIXES),
        *(f"{prefix} {keyword}" for prefix in LONG_TAIL_PREFIXES),
        f"{keyword} {year}년",
        f"{keyword} 신청 방법",
    ]
    for candidate in candidates:
        if candidate != keyword and candidate not in variants:
            variants.append(candidate)
    return variants[:MAX_LONG_TAIL_VARIANTS]


def detect_trend_category(keyword: str) -> str | None:
    """Category of a raw trend keyword, or None when nothing matches."""
    lowered = keyword.lower()
    for category, words in TREND_CATEGORY_KEYWORDS.items():
        if any(word.lower() in lowered for word in words):
            return category
    return None


def is_low_value_keyword(keyword: str) -> bool:
    """Transient queries (weather, breaking news, scores) and near-empty keywords."""
    lowered = keyword.lower()
    if any(pattern in lowered for pattern in LOW_VALUE_PATTERNS):
        return True
    if any(word in LOW_VALUE_WORDS for word in lowered.split()):
        return True
    return len(re.sub(r"\s", "", keyword)) <= 2


def keyword_quality(keyword: str) -> int:
    """Blog monetization quality of a trend keyword on 0..100."""
    score = 50
    category = detect_trend_category(keyword)
    if category:
        score += 30 if category in HIGH_CPC_CATEGORIES else 15
    if any(word in keyword for word in QUALITY_ACTION_WORDS):
        score += 15
    if is_low_value_keyword(keyword):
        score -= 60
    word_count = len(keyword.split())
    if word_count >= 3:
        score += 10
    if word_count >= 4:
        score += 5
    return max(0, min(100, score))
