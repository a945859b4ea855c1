"""Static niche, intent and title data used by keyword signal estimation.

CPC ranges are USD per click for the Korean ad market. Subcategories are
checked before broad niches because their ranges are narrower.
"""

from __future__ import annotations

from dataclasses import dataclass

from blogwise.services.types import SearchVolume


@dataclass(frozen=True, slots=True)
class NicheConfig:
    """Keyword patterns mapped to a CPC range, category and volume bucket."""

    patterns: tuple[str, ...]
    cpc_range: tuple[float, float]
    category: str
    search_volume: SearchVolume


SUBCATEGORY_CONFIGS: tuple[NicheConfig, ...] = (
    # 금융
    NicheConfig(
        ("대출", "담보대출", "신용대출", "주택담보대출", "햇살론", "대출금리", "대출조건", "대출한도"),
        (2.0, 6.0), "금융", "high",
    ),
    NicheConfig(("보험", "보험료", "보험비교", "보험추천", "종신보험", "보험설계"), (1.5, 5.0), "금융", "high"),
    NicheConfig(
        ("투자", "주식", "펀드", "코인", "가상화폐", "재테크", "ETF", "채권", "배당"),
        (1.0, 3.0), "금융", "high",
    ),
    NicheConfig(
        ("세금", "소득세", "부가세", "양도세", "취득세", "종부세", "연말정산", "세무", "세금신고"),
        (1.5, 4.0), "금융", "medium",
    ),
    NicheConfig(
        ("저축", "적금", "예금", "금리", "이자", "연금", "퇴직금", "개인연금", "IRP"),
        (0.5, 2.0), "금융", "high",
    ),
    NicheConfig(("카드", "신용카드", "체크카드", "카드혜택", "카드추천", "카드발급"), (1.0, 3.5), "금융", "high"),
    # 부동산
    NicheConfig(
        ("아파트 매매", "부동산 매매", "주택 매매", "집 매매", "매물", "매도", "매수"),
        (1.5, 4.0), "부동산", "high",
    ),
    NicheConfig(("전세", "전세금", "전세대출", "전세사기", "전세계약"), (1.0, 3.5), "부동산", "high"),
    NicheConfig(
        ("청약", "아파트 청약", "청약통장", "청약조건", "청약 당첨", "분양", "사전청약"),
        (1.0, 3.0), "부동산", "very_high",
    ),
    NicheConfig(("재개발", "재건축", "뉴타운", "도시재생"), (1.5, 4.0), "부동산", "medium"),
    NicheConfig(("월세", "임대", "임차", "전월세", "원룸", "오피스텔"), (0.8, 2.5), "부동산", "high"),
    # 건강
    NicheConfig(
        ("수술", "시술", "의료", "병원비", "진료", "입원", "외래", "수술비"),
        (1.0, 3.0), "건강", "high",
    ),
    NicheConfig(("의료보험", "실비보험", "건강보험"), (1.5, 4.0), "건강", "high"),
    NicheConfig(("다이어트", "체중감량", "살빼기", "지방흡입", "식단", "운동법"), (0.5, 1.5), "건강", "very_high"),
    NicheConfig(
        ("건강", "영양", "비타민", "영양제", "보충제", "건강기능식품"),
        (0.3, 1.0), "건강", "very_high",
    ),
    NicheConfig(
        ("당뇨", "고혈압", "심장", "뇌졸중", "치매", "관절", "허리디스크", "질병", "치료"),
        (0.8, 2.5), "건강", "high",
    ),
    # 법률
    NicheConfig(("이혼", "상속", "유언", "가사"), (3.0, 8.0), "법률", "medium"),
    NicheConfig(
        ("형사", "고소", "고발", "피의자", "변호사", "형사소송", "무죄", "벌금"),
        (2.0, 6.0), "법률", "medium",
    ),
    NicheConfig(("부동산법", "임대차", "계약서", "공인중개사", "부동산분쟁"), (2.0, 5.0), "법률", "low"),
    NicheConfig(
        ("노동법", "해고", "부당해고", "임금", "근로계약", "퇴직금소송", "산재"),
        (1.5, 4.0), "법률", "medium",
    ),
    NicheConfig(("법률", "법무", "소송", "민사", "법원", "법적"), (2.0, 6.0), "법률", "medium"),
    # 정부지원
    NicheConfig(
        ("정부대출", "소상공인대출", "창업지원대출", "정책대출", "지원대출"),
        (1.0, 3.5), "정부지원", "high",
    ),
    NicheConfig(
        ("실업급여", "실업급여신청", "고용보험", "취업지원", "국민취업지원"),
        (0.8, 2.5), "정부지원", "very_high",
    ),
    NicheConfig(
        ("복지", "급여", "기초생활수급", "차상위", "한부모", "장애인급여"),
        (0.8, 2.5), "정부지원", "very_high",
    ),
    NicheConfig(("보조금", "지원금", "지원사업", "정부지원", "창업보조금"), (0.7, 2.0), "정부지원", "very_high"),
    NicheConfig(
        ("육아지원", "육아휴직", "출산급여", "아이돌봄", "보육료", "육아"),
        (0.8, 2.5), "정부지원", "high",
    ),
    # 보험
    NicheConfig(("자동차보험", "자차보험", "차보험", "다이렉트자동차보험"), (2.0, 5.0), "보험", "very_high"),
    NicheConfig(("생명보험", "정기보험", "사망보험"), (1.5, 4.0), "보험", "medium"),
    NicheConfig(("실손보험", "실손의료보험"), (1.0, 3.0), "보험", "high"),
    NicheConfig(("태아보험", "어린이보험", "태아보험추천"), (1.0, 3.0), "보험", "medium"),
    NicheConfig(("여행보험", "해외여행보험", "여행자보험"), (0.8, 2.5), "보험", "medium"),
    # 교육
    NicheConfig(("공무원", "공무원시험", "공무원준비", "행정직", "경찰", "소방"), (0.8, 2.5), "교육", "high"),
    NicheConfig(("자격증", "국가자격증", "자격증시험", "자격증준비"), (0.5, 2.0), "교육", "high"),
    NicheConfig(("토익", "토플", "영어", "어학", "IELTS", "영어시험"), (0.5, 1.5), "교육", "high"),
    # IT
    NicheConfig(
        ("AI", "인공지능", "머신러닝", "딥러닝", "ChatGPT", "챗GPT", "LLM"),
        (0.5, 1.5), "IT", "high",
    ),
    NicheConfig(("클라우드", "AWS", "Azure", "GCP", "서버", "호스팅"), (0.4, 1.2), "IT", "medium"),
    NicheConfig(
        ("개발", "프로그래밍", "코딩", "파이썬", "Python", "자바", "JavaScript"),
        (0.3, 1.0), "IT", "medium",
    ),
)

NICHE_CONFIGS: tuple[NicheConfig, ...] = (
    NicheConfig(
        ("법률", "법무", "변호사", "소송", "계약서", "형사", "민사", "이혼", "상속", "법원"),
        (2.0, 8.0), "법률", "medium",
    ),
    NicheConfig(
        ("대출", "금융", "보험", "카드", "저축", "적금", "금리", "신용", "투자", "주식", "펀드",
         "코인", "재테크", "연금", "퇴직금", "세금", "소득세", "연말정산"),
        (1.5, 6.0), "금융", "high",
    ),
    NicheConfig(
        ("부동산", "아파트", "전세", "월세", "임대", "분양", "청약", "취득세", "재개발", "재건축",
         "주택", "토지", "상가"),
        (1.0, 4.0), "부동산", "high",
    ),
    NicheConfig(
        ("지원금", "보조금", "급여", "실업급여", "육아휴직", "정부", "지원사업", "복지", "국민연금",
         "건강보험", "고용보험", "산재보험"),
        (0.8, 3.0), "정부지원", "very_high",
    ),
    NicheConfig(
        ("건강", "의료", "병원", "약", "질병", "치료", "수술", "다이어트", "영양", "비타민", "운동",
         "헬스", "당뇨", "고혈압"),
        (0.5, 2.0), "건강", "very_high",
    ),
    NicheConfig(
        ("자격증", "교육", "공부", "시험", "합격", "학원", "취업", "이직", "면접", "영어", "토익",
         "공무원", "대학교"),
        (0.5, 2.0), "교육", "high",
    ),
    NicheConfig(
        ("개발", "프로그래밍", "IT", "코딩", "소프트웨어", "앱", "AI", "인공지능", "클라우드",
         "서버", "데이터"),
        (0.3, 1.0), "IT", "medium",
    ),
    NicheConfig(
        ("여행", "관광", "호텔", "항공", "패키지", "해외", "국내여행", "제주", "부산", "경주", "비자"),
        (0.2, 0.8), "여행", "high",
    ),
    NicheConfig(
        ("요리", "레시피", "음식", "맛집", "식당", "카페", "베이킹", "쿠킹"),
        (0.1, 0.5), "요리", "very_high",
    ),
    NicheConfig(
        ("드라마", "영화", "연예", "아이돌", "음악", "스포츠", "축구", "야구", "게임", "웹툰", "예능"),
        (0.05, 0.3), "엔터테인먼트", "very_high",
    ),
)

DEFAULT_NICHE = NicheConfig((), (0.1, 0.5), "생활정보", "medium")

TITLE_TEMPLATES: dict[str, tuple[str, ...]] = {
    "법률": (
        "{keyword}, 이것만 알면 끝! 실전 핵심 정리",
        "처음 겪는 {keyword}? 당황하지 마세요",
        "모르면 손해 보는 {keyword} 핵심 포인트",
        "5분 만에 이해하는 {keyword} 완전 정복",
    ),
    "금융": (
        "{keyword}, 나한테 맞는 선택은? 비교 분석",
        "{keyword} 신청 전 반드시 확인할 3가지",
        "{keyword}, 은행 직원이 안 알려주는 꿀팁",
        "초보도 쉽게 따라하는 {keyword} 신청 방법",
    ),
    "부동산": (
        "{keyword}, 전문가가 짚어주는 핵심 체크리스트",
        "이것 놓치면 후회합니다 – {keyword} 필수 정보",
        "부동산 초보를 위한 {keyword} 쉬운 설명",
        "{keyword}, 계약 전 꼭 확인해야 할 것들",
    ),
    "정부지원": (
        "아직도 안 받으셨어요? {keyword} 신청 방법",
        "{keyword}, 자격 조건부터 신청까지 한 번에",
        "{keyword} 받는 법, 생각보다 간단합니다",
        "내가 {keyword} 대상자일까? 자가 진단 가이드",
    ),
    "건강": (
        "혹시 나도? {keyword} 초기 증상과 대처법",
        "{keyword} 때문에 고민이라면 읽어보세요",
        "일상에서 실천하는 {keyword} 관리 비법",
        "병원 가기 전 알아두면 좋은 {keyword} 정보",
    ),
    "교육": (
        "{keyword} 합격자가 직접 알려주는 공부법",
        "시간 없는 직장인을 위한 {keyword} 속성 정리",
        "혼자서도 가능한 {keyword} 독학 로드맵",
        "{keyword} 준비 중이라면 꼭 봐야 할 핵심 정리",
    ),
    "IT": (
        "{keyword} 입문, 여기서부터 시작하세요",
        "현업 개발자가 추천하는 {keyword} 학습법",
        "비전공자도 이해하는 {keyword} 쉬운 설명",
        "{keyword}, 이것부터 익히면 나머지는 쉽습니다",
    ),
    "여행": (
        "현지인이 추천하는 {keyword} 숨은 명소",
        "{keyword} 여행 경비 아끼는 실전 팁",
        "처음 가는 {keyword}? 이것만 준비하세요",
        "알뜰하게 즐기는 {keyword} 여행 플랜",
    ),
    "요리": (
        "{keyword} 황금 레시피 – 실패 없이 만드는 법",
        "자취생도 뚝딱! 초간단 {keyword} 만들기",
        "10분 완성 {keyword} – 바쁜 날 딱 좋은 메뉴",
        "{keyword} 맛있게 만드는 숨겨진 한 가지 비법",
    ),
    "보험": (
        "{keyword}, 나에게 맞는 상품 고르는 법",
        "{keyword} 가입 전 꼭 알아야 할 5가지",
        "{keyword} 보험료 줄이는 실전 꿀팁",
        "처음 가입하는 {keyword}, 이것부터 확인하세요",
    ),
    "엔터테인먼트": (
        "{keyword}, 팬이라면 꼭 알아야 할 이야기",
        "요즘 핫한 {keyword}, 뭐가 다를까?",
        "{keyword} 입문자를 위한 친절한 안내서",
        "놓치면 아쉬운 {keyword} 하이라이트 모음",
    ),
    "생활정보": (
        "{keyword}, 알고 나면 정말 간단합니다",
        "생활 속 {keyword} 꿀팁 모음",
        "{keyword} 때문에 고민? 이렇게 해결하세요",
        "누구나 따라 할 수 있는 {keyword} 방법",
    ),
}

LONG_TAIL_SUFFIXES: tuple[str, ...] = (
    "방법", "추천", "비교", "후기", "가격", "신청방법", "조건", "자격",
)
LONG_TAIL_PREFIXES: tuple[str, ...] = (
    "초보자를 위한", "전문가가 추천하는", "최신", "무료로 받는",
)

TRANSACTIONAL_SIGNALS: tuple[str, ...] = (
    "신청", "가입", "구매", "예약", "주문", "결제", "등록", "접수", "다운로드", "설치",
)
COMMERCIAL_SIGNALS: tuple[str, ...] = (
    "비교", "추천", "순위", "가격", "후기", "가성비", "리뷰", "평가", "랭킹", "베스트",
    "최저가", "할인", "혜택", "장단점", "vs", "대비",
)
NAVIGATIONAL_SIGNALS: tuple[str, ...] = (
    "사이트", "홈페이지", "공식", "로그인", "접속", "바로가기", "링크", "주소",
)

ACTION_WORDS: tuple[str, ...] = (
    "방법", "신청", "조건", "추천", "비교", "가격", "후기", "하는법", "총정리", "계산",
    "가이드", "절차", "서류", "자격",
)
COMPARISON_SIGNALS: tuple[str, ...] = ("vs", "비교", "차이", "대비")
TUTORIAL_SIGNALS: tuple[str, ...] = ("방법", "하는법", "신청", "절차")
COMPETITION_COMPARISON_SIGNALS: tuple[str, ...] = ("vs", "비교", "차이", "대비", "어떤게")
COMPETITION_TUTORIAL_SIGNALS: tuple[str, ...] = ("방법", "하는법", "신청", "절차", "단계", "어떻게")

REGION_MARKERS: tuple[str, ...] = (
    "서울", "부산", "인천", "대구", "광주", "대전", "울산", "세종", "경기", "강원", "충북",
    "충남", "전북", "전남", "경북", "경남", "제주", "수원", "성남", "고양", "용인", "창원", "청주",
)
SPECIFICITY_MARKERS: tuple[str, ...] = ("TOP", "무료", "최신", "완벽", "단계", "초보", "전문가")

# Category detection for raw trend keywords, in priority order.
TREND_CATEGORY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "금융": ("대출", "금리", "투자", "주식", "코인", "비트코인", "증시", "환율", "은행", "카드", "보험료", "연금", "적금", "예금", "재테크"),
    "부동산": ("아파트", "전세", "월세", "부동산", "청약", "분양", "매매", "임대", "집값", "주택"),
    "정부지원": ("지원금", "보조금", "실업급여", "국민연금", "건강보험", "정부", "복지", "수당", "바우처"),
    "건강": ("건강", "다이어트", "운동", "영양", "병원", "의료", "검진", "비타민", "헬스", "약"),
    "IT": ("AI", "인공지능", "ChatGPT", "앱", "스마트폰", "갤럭시", "아이폰", "컴퓨터", "노트북", "소프트웨어"),
    "생활정보": ("면허", "여권", "주민등록", "택배", "배송", "예약", "신청", "발급"),
    "교육": ("수능", "대학", "시험", "자격증", "학원", "공부", "학교", "입학"),
    "엔터테인먼트": ("드라마", "영화", "연예", "아이돌", "K-pop", "배우", "가수", "넷플릭스", "공연"),
    "스포츠": ("축구", "야구", "농구", "KBO", "EPL", "올림픽"),
}
HIGH_CPC_CATEGORIES: frozenset[str] = frozenset({"금융", "부동산", "정부지원", "건강", "법률"})
QUALITY_ACTION_WORDS: tuple[str, ...] = (
    "방법", "신청", "조건", "추천", "비교", "가격", "후기", "가이드", "총정리", "하는법",
)
# Weather, breaking news and live-score queries churn too fast to monetize.
LOW_VALUE_PATTERNS: tuple[str, ...] = (
    "날씨", "기온", "미세먼지", "일기예보", "기상", "지진", "태풍", "폭우", "폭설", "한파",
    "오늘의", "내일의", "이번주", "스코어", "경기결과", "하이라이트", "사망", "사고", "속보",
    "긴급", "실시간", "생중계", "라이브", "맑음", "흐림",
)
# Matched as whole words only; as substrings they would hit 비교, 눈썹 and the like.
LOW_VALUE_WORDS: frozenset[str] = frozenset({"비", "눈", "vs"})
