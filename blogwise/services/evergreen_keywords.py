"""Seasonal, evergreen and life-event keyword catalogue.

Used alongside live trend signals, and on its own when every signal
provider fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from blogwise.services.types import CandidateTopic, KeywordType

RELATED_SUFFIXES = ("방법", "신청", "조건", "후기")

SEASONAL_CALENDAR: dict[int, tuple[tuple[str, str, int], ...]] = {
    1: (
        ("연말정산 하는법", "금융", 95),
        ("연말정산 환급금 조회", "금융", 92),
        ("겨울철 난방비 절약 방법", "생활정보", 75),
        ("독감 예방접종 가격", "건강", 70),
    ),
    2: (
        ("설날 인사말 모음", "생활정보", 85),
        ("명절 선물 추천", "생활정보", 80),
        ("전세 계약 갱신 방법", "부동산", 78),
        ("2026년 달라지는 제도", "정부지원", 88),
    ),
    3: (
        ("새학기 준비물 리스트", "교육", 80),
        ("이직 시기 퇴직금 계산", "금융", 82),
        ("자동차세 납부 방법", "금융", 78),
        ("건강검진 예약 방법", "건강", 85),
    ),
    4: (
        ("벚꽃 명소 추천", "여행", 88),
        ("종합소득세 준비 서류", "금융", 75),
        ("국민건강보험 환급금 신청", "건강", 80),
        ("어린이보험 비교 추천", "보험", 70),
    ),
    5: (
        ("종합소득세 신고 방법", "금융", 95),
        ("종합소득세 절세 방법", "금융", 90),
        ("근로장려금 신청 자격", "정부지원", 92),
        ("어버이날 선물 추천", "생활정보", 85),
    ),
    6: (
        ("에어컨 추천 가성비", "생활정보", 88),
        ("여름 전기세 절약 방법", "생활정보", 78),
        ("장마철 곰팡이 제거 방법", "생활정보", 75),
        ("주택청약 당첨 확률 높이기", "부동산", 80),
    ),
    7: (
        ("여름휴가 추천 국내", "여행", 92),
        ("해외여행 준비물 체크리스트", "여행", 88),
        ("자외선 차단제 추천", "건강", 80),
        ("재산세 납부 방법", "금융", 78),
    ),
    8: (
        ("대학교 등록금 대출", "교육", 85),
        ("추석 기차표 예매 꿀팁", "생활정보", 82),
        ("가을여행 추천 명소", "여행", 78),
        ("전세자금 대출 조건", "금융", 80),
    ),
    9: (
        ("추석 인사말 모음", "생활정보", 88),
        ("추석 선물 추천", "생활정보", 85),
        ("독감 예방접종 시기", "건강", 82),
        ("환절기 건강관리 방법", "건강", 75),
    ),
    10: (
        ("독감 예방접종 무료 대상", "건강", 90),
        ("가을 단풍 명소", "여행", 85),
        ("연말정산 미리보기", "금융", 75),
        ("자동차보험 갱신 비교", "보험", 80),
    ),
    11: (
        ("수능 준비 꿀팁", "교육", 90),
        ("블랙프라이데이 할인 정보", "생활정보", 88),
        ("겨울 타이어 교체 시기", "생활정보", 78),
        ("연말정산 소득공제 항목", "금융", 85),
    ),
    12: (
        ("연말정산 체크리스트", "금융", 95),
        ("연말정산 공제 최대화 방법", "금융", 92),
        ("크리스마스 선물 추천", "생활정보", 88),
        ("내년 달라지는 부동산 제도", "부동산", 82),
    ),
}

EVERGREEN_KEYWORDS: tuple[tuple[str, str, int], ...] = (
    ("신용대출 금리 비교", "금융", 90),
    ("적금 금리 높은 곳", "금융", 88),
    ("신용점수 올리는 방법", "금융", 85),
    ("주택담보대출 조건 비교", "금융", 87),
    ("연금저축 세액공제 한도", "금융", 82),
    ("정부지원금 종류 총정리", "정부지원", 92),
    ("실업급여 신청 방법", "정부지원", 90),
    ("국민연금 수령액 계산", "정부지원", 85),
    ("소상공인 지원금 신청", "정부지원", 88),
    ("육아휴직 급여 계산", "정부지원", 80),
    ("주택청약 가입 방법", "부동산", 82),
    ("전세 계약시 확인사항", "부동산", 83),
    ("신혼부부 특별공급 조건", "부동산", 78),
    ("실비보험 청구 방법", "보험", 88),
    ("자동차보험 비교 사이트", "보험", 85),
    ("태아보험 추천 비교", "보험", 78),
    ("건강검진 항목 종류", "건강", 82),
    ("비타민D 부족 증상", "건강", 75),
    ("여권 갱신 방법", "생활정보", 82),
    ("운전면허 갱신 온라인", "생활정보", 80),
    ("자격증 추천 취업", "교육", 82),
    ("토익 독학 공부법", "교육", 78),
)

LIFE_EVENT_CLUSTERS: dict[str, tuple[tuple[str, str, int], ...]] = {
    "취업/이직": (
        ("연봉 실수령액 계산기", "금융", 90),
        ("4대보험 계산 방법", "금융", 82),
        ("면접 질문 답변 예시", "교육", 80),
    ),
    "결혼": (
        ("혼인신고 방법 서류", "생활정보", 82),
        ("신혼부부 전세대출 조건", "금융", 88),
    ),
    "출산/육아": (
        ("출산휴가 급여 계산", "정부지원", 85),
        ("육아휴직 신청 방법", "정부지원", 88),
        ("영아수당 신청 자격", "정부지원", 82),
    ),
    "내집 마련": (
        ("주택청약 1순위 조건", "부동산", 90),
        ("디딤돌 대출 조건 금리", "금융", 88),
        ("취득세 감면 조건", "금융", 85),
    ),
    "은퇴 준비": (
        ("국민연금 수령나이 조회", "금융", 88),
        ("퇴직금 IRP 세금 혜택", "금융", 85),
    ),
}

# Last-resort topics when neither live signals nor the catalogue yield anything.
FALLBACK_TOPICS: tuple[tuple[str, str, int], ...] = (
    ("정부지원금 신청방법", "정부지원", 90),
    ("소상공인 대출 조건", "금융", 88),
    ("실업급여 신청 자격", "정부지원", 85),
    ("청년 주택청약 방법", "부동산", 83),
    ("건강보험 환급금 조회", "건강", 82),
    ("연말정산 환급금 조회", "금융", 80),
    ("자동차보험 비교 추천", "보험", 78),
    ("신용대출 금리 비교", "금융", 77),
    ("종합소득세 신고 방법", "금융", 75),
    ("운전면허 갱신 방법", "생활정보", 73),
)


@dataclass(frozen=True, slots=True)
class EvergreenKeyword:
    keyword: str
    category: str
    demand_score: int
    keyword_type: KeywordType
    reason: str


def related_keywords(keyword: str) -> tuple[str, ...]:
    return tuple(f"{keyword} {suffix}" for suffix in RELATED_SUFFIXES)


def seasonal_keywords(month: int) -> list[EvergreenKeyword]:
    """Current month at full demand, next month 10 points lower."""
    next_month = 1 if month == 12 else month + 1
    results: list[EvergreenKeyword] = []
    seen: set[str] = set()

    for keyword, category, score in SEASONAL_CALENDAR.get(month, ()):
        if keyword in seen:
            continue
        seen.add(keyword)
        results.append(
            EvergreenKeyword(keyword, category, score, "seasonal", f"{month}월 시즌 키워드")
        )
    for keyword, category, score in SEASONAL_CALENDAR.get(next_month, ()):
        if keyword in seen:
            continue
        seen.add(keyword)
        results.append(
            EvergreenKeyword(
                keyword, category, max(0, score - 10), "seasonal", f"{next_month}월 대비 선점 키워드"
            )
        )
    return results


def evergreen_keywords() -> list[EvergreenKeyword]:
    results = [
        EvergreenKeyword(keyword, category, score, "evergreen", "연중 꾸준한 검색 수요")
        for keyword, category, score in EVERGREEN_KEYWORDS
    ]
    for event, entries in LIFE_EVENT_CLUSTERS.items():
        results.extend(
            EvergreenKeyword(keyword, category, score, "evergreen", f"{event} 생애주기 키워드")
            for keyword, category, score in entries
        )
    return results


def all_evergreen_keywords(now: datetime | None = None) -> list[EvergreenKeyword]:
    """Seasonal plus evergreen keywords, deduplicated by higher demand.

    Seasonal keywords sort first, then by demand descending.
    """
    month = (now or datetime.now(timezone.utc)).month
    best: dict[str, EvergreenKeyword] = {}
    for item in [*seasonal_keywords(month), *evergreen_keywords()]:
        key = "".join(item.keyword.split()).lower()
        existing = best.get(key)
        if existing is None or item.demand_score > existing.demand_score:
            best[key] = item

    return sorted(
        best.values(),
        key=lambda item: (item.keyword_type != "seasonal", -item.demand_score),
    )


def evergreen_topics(now: datetime | None = None) -> list[CandidateTopic]:
    """The catalogue as candidate topics sourced from `evergreen`."""
    fetched_at = now or datetime.now(timezone.utc)
    return [
        CandidateTopic(
            keyword=item.keyword,
            source="evergreen",
            category=item.category,
            trend_score=item.demand_score,
            related_keywords=related_keywords(item.keyword),
            fetched_at=fetched_at,
            keyword_type=item.keyword_type,
            reason=item.reason,
        )
        for item in all_evergreen_keywords(fetched_at)
    ]


def fallback_topics(now: datetime | None = None) -> list[CandidateTopic]:
    fetched_at = now or datetime.now(timezone.utc)
    return [
        CandidateTopic(
            keyword=keyword,
            source="evergreen",
            category=category,
            trend_score=score,
            related_keywords=related_keywords(keyword),
            fetched_at=fetched_at,
            keyword_type="evergreen",
            reason="기본 고단가 키워드",
        )
        for keyword, category, score in FALLBACK_TOPICS
    ]
